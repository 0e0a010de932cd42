import logging

from kafka_assignor.coordinator.assignors.abstract import AbstractPartitionAssignor
from kafka_assignor.structs import TopicPartition

log = logging.getLogger(__name__)


class RangePartitionAssignor(AbstractPartitionAssignor):
    """
    The range assignor works on a per-topic basis. For each topic, we lay out
    the available partitions in numeric order and the consumer threads in
    lexicographic order. We then divide the number of partitions by the total
    number of consumer threads to determine the number of partitions to assign
    to each thread. If it does not evenly divide, then the first few threads
    will have one extra partition.

    For example, suppose there are two consumers C1 and C2 with two threads
    each, and there are five available partitions (p0, p1, p2, p3, p4). So
    each consumer thread will get at least one partition and the first
    consumer thread will get one extra partition.

    The assignment will be:
        p0 -> C1-0, p1 -> C1-0, p2 -> C1-1, p3 -> C2-0, p4 -> C2-1
    """
    name = 'range'

    @classmethod
    def assign(cls, context):
        assignment = cls._new_assignment()

        # Every subscribed topic is laid out, not only the caller's own: the
        # ranges depend on the shared snapshot alone, and the result then
        # covers the whole group.
        for topic in context.topics:
            consumers = context.consumers_for_topic[topic]
            partitions = context.partitions_for_topic[topic]

            partitions_per_consumer = len(partitions) // len(consumers)
            consumers_with_extra = len(partitions) % len(consumers)

            log.info('Consumer %s rebalancing the following partitions: %s'
                     ' for topic %s with consumers: %s', context.consumer_id,
                     list(partitions), topic, [str(c) for c in consumers])

            for i, thread_id in enumerate(consumers):
                start = partitions_per_consumer * i
                start += min(i, consumers_with_extra)
                length = partitions_per_consumer
                if i < consumers_with_extra:
                    length += 1

                # Range-partition the sorted partitions to consumers for
                # better locality. The first few consumers pick up an extra
                # partition, if any.
                if length == 0:
                    log.warning('No broker partitions consumed by consumer'
                                ' thread %s for topic %s', thread_id, topic)
                    continue
                for partition in partitions[start:start + length]:
                    cls._record(assignment, TopicPartition(topic, partition), thread_id)

        return cls._finish(context, assignment)

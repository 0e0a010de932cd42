import logging

from kafka_assignor.coordinator.assignors.abstract import AbstractPartitionAssignor
from kafka_assignor.structs import TopicPartition

log = logging.getLogger(__name__)


class FairPartitionAssignor(AbstractPartitionAssignor):
    """
    The fair assignor attempts to balance partitions across consumers such
    that each consumer thread is assigned approximately the same number of
    partitions, even if the consumer topic subscriptions are substantially
    different (if they are identical, then the result will be equivalent to
    that of a roundrobin assignment over naturally ordered partitions). The
    running total of assignments per consumer thread is tracked as the
    algorithm executes in order to accomplish this.

    The algorithm starts with the topic with the fewest consumer
    subscriptions. In the event of a tie for least subscriptions, the topic
    with the highest partition count is assigned first, as this generally
    creates a more balanced distribution. The final tiebreaker is the topic
    name.

    Each partition is assigned to the subscribing consumer thread with the
    fewest assignments so far. In the event of a tie, the lowest consumer
    thread id wins.

    For example, suppose there are two consumers C0 and C1, two topics t0 and
    t1, and each topic has 3 partitions, resulting in partitions t0p0, t0p1,
    t0p2, t1p0, t1p1, and t1p2. If both C0 and C1 are consuming t0, but only
    C1 is consuming t1 then the assignment will be:
        C0: [t0p0, t0p1, t0p2]
        C1: [t1p0, t1p1, t1p2]
    """
    name = 'fair'

    @classmethod
    def assign(cls, context):
        assignment = cls._new_assignment()
        topics = context.topics

        if topics:
            # total number of partitions assigned to each consumer thread
            assignment_counts = {}
            for topic in topics:
                for thread_id in context.consumers_for_topic[topic]:
                    assignment_counts[thread_id] = 0

            # topics with fewer consumers first, then most partitions, then name
            ordered_topics = sorted(topics, key=lambda topic: (
                len(context.consumers_for_topic[topic]),
                -len(context.partitions_for_topic[topic]),
                topic))

            for topic in ordered_topics:
                consumers = context.consumers_for_topic[topic]
                partitions = context.partitions_for_topic[topic]
                log.info('Consumer %s rebalancing the following partitions'
                         ' for topic %s: %s', context.consumer_id, topic,
                         list(partitions))
                for partition in partitions:
                    thread_id = min(consumers, key=lambda t: (assignment_counts[t], t))
                    assignment_counts[thread_id] += 1
                    cls._record(assignment, TopicPartition(topic, partition), thread_id)

        return cls._finish(context, assignment)

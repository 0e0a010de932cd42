import itertools
import logging

import kafka_assignor.errors as Errors
from kafka_assignor.coordinator.assignors.abstract import AbstractPartitionAssignor
from kafka_assignor.structs import TopicPartition
from kafka_assignor.util import java_string_hashcode

log = logging.getLogger(__name__)


class RoundRobinPartitionAssignor(AbstractPartitionAssignor):
    """
    The roundrobin assignor lays out all the available partitions and all the
    available consumer threads. It then proceeds to do a roundrobin assignment
    from partition to consumer thread. If the subscriptions of all consumer
    instances are identical, then the partitions will be uniformly
    distributed. (i.e., the partition ownership counts will be within a delta
    of exactly one across all consumer threads.)

    Partitions are laid out by the java String.hashCode of "topic-partition"
    rather than in natural order, so that all partitions of one topic do not
    end up on the same consumer when it runs many threads. Hash collisions
    keep (topic, partition) order.

    The assignor may hand a partition to any thread of any instance, so it
    requires that every topic is subscribed to by exactly the same set of
    consumer threads: every instance subscribes to the same topics, with the
    same stream count for each topic.

    For example, suppose there are two consumers C0 and C1 with one thread
    each, two topics t0 and t1, and each topic has 3 partitions, resulting in
    partitions t0p0, t0p1, t0p2, t1p0, t1p1, and t1p2.

    The assignment will be:
        C0: [t0p0, t0p2, t1p1]
        C1: [t0p1, t1p0, t1p2]
    """
    name = 'roundrobin'

    @classmethod
    def assign(cls, context):
        assignment = cls._new_assignment()
        topics = context.topics

        if topics:
            thread_ids = cls._check_identical_subscriptions(context, topics)
            thread_iter = itertools.cycle(thread_ids)

            log.info('Starting round-robin assignment with consumers %s',
                     list(context.consumers))
            all_topic_partitions = []
            for topic in topics:
                partitions = context.partitions_for_topic[topic]
                log.info('Consumer %s rebalancing the following partitions'
                         ' for topic %s: %s', context.consumer_id, topic,
                         list(partitions))
                for partition in partitions:
                    all_topic_partitions.append(TopicPartition(topic, partition))

            # stable sort: equal hashes keep (topic, partition) order
            all_topic_partitions.sort(key=lambda tp: java_string_hashcode(str(tp)))

            for topic_partition in all_topic_partitions:
                cls._record(assignment, topic_partition, next(thread_iter))

        return cls._finish(context, assignment)

    @classmethod
    def _check_identical_subscriptions(cls, context, topics):
        head_topic = topics[0]
        head_thread_ids = context.consumers_for_topic[head_topic]
        for topic in topics[1:]:
            thread_ids = context.consumers_for_topic[topic]
            if set(thread_ids) != set(head_thread_ids):
                raise Errors.SubscriptionMismatchError(
                    topic, thread_ids, head_topic, head_thread_ids)
        return head_thread_ids

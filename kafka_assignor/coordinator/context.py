from types import MappingProxyType

import kafka_assignor.errors as Errors
from kafka_assignor.structs import ConsumerThreadId


class AssignmentContext(object):
    """Point-in-time snapshot of a consumer group, as seen by one member.

    Every member of the group builds an equal context for a rebalance and
    feeds it to the same assignor, so all inputs are normalised into sorted,
    immutable sequences here. Assignors must not depend on anything else.

    Arguments:
        consumer_id (str): id of the instance computing the assignment. Only
            used for diagnostics.
        consumers (iterable of str): every instance in the group, including
            instances that subscribe to nothing.
        consumers_for_topic (dict): {topic: [ConsumerThreadId, ...]} for all
            threads in the group subscribed to topic.
        partitions_for_topic (dict): {topic: [partition_id, ...]}.
        my_topic_thread_ids (dict, optional): {topic: {ConsumerThreadId, ...}}
            restricted to the calling instance. Derived from
            consumers_for_topic when omitted.
    """
    __slots__ = ('_consumer_id', '_consumers', '_consumers_for_topic',
                 '_partitions_for_topic', '_my_topic_thread_ids')

    def __init__(self, consumer_id, consumers, consumers_for_topic,
                 partitions_for_topic, my_topic_thread_ids=None):
        self._consumer_id = consumer_id
        self._consumers = tuple(sorted(set(consumers)))
        self._consumers_for_topic = MappingProxyType(dict(
            (topic, tuple(sorted(set(ConsumerThreadId(*t) for t in threads))))
            for topic, threads in sorted(consumers_for_topic.items())))
        self._partitions_for_topic = MappingProxyType(dict(
            (topic, tuple(sorted(set(partitions))))
            for topic, partitions in sorted(partitions_for_topic.items())))
        if my_topic_thread_ids is None:
            my_topic_thread_ids = dict(
                (topic, [t for t in threads if t.consumer_id == consumer_id])
                for topic, threads in self._consumers_for_topic.items())
            my_topic_thread_ids = dict(
                (topic, threads)
                for topic, threads in my_topic_thread_ids.items() if threads)
        self._my_topic_thread_ids = MappingProxyType(dict(
            (topic, frozenset(ConsumerThreadId(*t) for t in threads))
            for topic, threads in sorted(my_topic_thread_ids.items())))

    @classmethod
    def from_subscriptions(cls, consumer_id, topic_counts, partitions_for_topic,
                           all_topics=None):
        """Build a context from each member's subscription.

        Arguments:
            consumer_id (str): id of the calling instance; must be present in
                topic_counts.
            topic_counts (dict): {consumer_id: TopicCount} for every member
                of the group.
            partitions_for_topic (dict): {topic: [partition_id, ...]} for at
                least every subscribed topic. Extra topics are ignored.
            all_topics (iterable of str, optional): every topic in the
                cluster, used to resolve wildcard subscriptions. Defaults to
                the keys of partitions_for_topic.

        Returns:
            AssignmentContext

        Raises:
            IllegalStateError: if the calling instance is not registered
            InconsistentContextError: if a subscribed topic has no
                partition metadata
        """
        if consumer_id not in topic_counts:
            raise Errors.IllegalStateError(
                'Consumer %s is not registered in the group' % (consumer_id,))
        if all_topics is None:
            all_topics = partitions_for_topic.keys()
        all_topics = sorted(set(all_topics))

        consumers_for_topic = {}
        for member_id in sorted(topic_counts):
            per_topic = topic_counts[member_id].consumer_thread_ids_per_topic(all_topics)
            for topic, thread_ids in per_topic.items():
                consumers_for_topic.setdefault(topic, []).extend(thread_ids)

        missing = sorted(t for t in consumers_for_topic if t not in partitions_for_topic)
        if missing:
            raise Errors.InconsistentContextError(
                'No partition metadata for subscribed topics %s' % (missing,))

        my_topic_thread_ids = topic_counts[consumer_id].consumer_thread_ids_per_topic(all_topics)
        return cls(consumer_id,
                   topic_counts.keys(),
                   consumers_for_topic,
                   dict((topic, partitions_for_topic[topic])
                        for topic in consumers_for_topic),
                   my_topic_thread_ids)

    @property
    def consumer_id(self):
        return self._consumer_id

    @property
    def consumers(self):
        """Sorted tuple of every consumer instance id in the group"""
        return self._consumers

    @property
    def consumers_for_topic(self):
        return self._consumers_for_topic

    @property
    def partitions_for_topic(self):
        return self._partitions_for_topic

    @property
    def my_topic_thread_ids(self):
        return self._my_topic_thread_ids

    @property
    def topics(self):
        """Sorted tuple of topics with at least one subscribed thread"""
        return tuple(t for t, threads in self._consumers_for_topic.items() if threads)

    def validate(self):
        """Check the snapshot invariants the assignors rely on.

        Raises:
            InconsistentContextError: if consumers_for_topic and
                partitions_for_topic cover different topics, or a thread
                belongs to an instance missing from consumers
        """
        subscribed = set(self._consumers_for_topic)
        described = set(self._partitions_for_topic)
        if subscribed != described:
            raise Errors.InconsistentContextError(
                'Topics without partition metadata: %s; topics without'
                ' subscribers: %s' % (sorted(subscribed - described),
                                      sorted(described - subscribed)))
        members = set(self._consumers)
        unknown = sorted(set(
            t.consumer_id for threads in self._consumers_for_topic.values()
            for t in threads) - members)
        if unknown:
            raise Errors.InconsistentContextError(
                'Threads reference consumers outside the group: %s' % (unknown,))
        for topic, threads in self._my_topic_thread_ids.items():
            foreign = sorted(t for t in threads if t.consumer_id != self._consumer_id)
            if foreign:
                raise Errors.InconsistentContextError(
                    'Thread ids for topic %s do not belong to %s: %s'
                    % (topic, self._consumer_id, [str(t) for t in foreign]))
        return self

    def __eq__(self, other):
        if not isinstance(other, AssignmentContext):
            return NotImplemented
        return (self._consumer_id == other._consumer_id
                and self._consumers == other._consumers
                and dict(self._consumers_for_topic) == dict(other._consumers_for_topic)
                and dict(self._partitions_for_topic) == dict(other._partitions_for_topic)
                and dict(self._my_topic_thread_ids) == dict(other._my_topic_thread_ids))

    __hash__ = None

    def __repr__(self):
        return ('AssignmentContext(consumer_id=%r, consumers=%r,'
                ' consumers_for_topic=%r, partitions_for_topic=%r)' % (
                    self._consumer_id, list(self._consumers),
                    dict(self._consumers_for_topic),
                    dict(self._partitions_for_topic)))

import abc
import collections
import logging

log = logging.getLogger(__name__)


class AbstractPartitionAssignor(abc.ABC):
    """
    Abstract assignor implementation which does some common grunt work (in
    particular shaping the result so that every member of the group is
    present, and ordering it identically on every member).

    An assignment is {consumer_id: {TopicPartition: ConsumerThreadId}}.
    """

    @property
    @abc.abstractmethod
    def name(self):
        """.name should be a string identifying the assignor"""
        pass

    @classmethod
    @abc.abstractmethod
    def assign(cls, context):
        """Perform group assignment given a snapshot of the group

        @param context: AssignmentContext
        @return {consumer_id: {TopicPartition: ConsumerThreadId}}
        """
        pass

    @classmethod
    def _new_assignment(cls):
        return collections.defaultdict(dict)

    @classmethod
    def _record(cls, assignment, topic_partition, thread_id):
        # record the partition ownership decision
        assignment[thread_id.consumer_id][topic_partition] = thread_id

    @classmethod
    def _finish(cls, context, assignment):
        # assign an empty dict for the consumers which are not associated
        # with topic partitions
        for consumer_id in context.consumers:
            assignment.setdefault(consumer_id, {})
        return dict(
            (consumer_id, dict(sorted(assignment[consumer_id].items())))
            for consumer_id in sorted(assignment))

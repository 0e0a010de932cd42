from collections import namedtuple


class TopicPartition(namedtuple("TopicPartition",
        ["topic", "partition"])):
    __slots__ = ()

    def __str__(self):
        return '%s-%d' % (self.topic, self.partition)


# One consuming stream inside a consumer instance. Tuple ordering compares
# consumer_id as a string first, then thread_index numerically.
class ConsumerThreadId(namedtuple("ConsumerThreadId",
        ["consumer_id", "thread_index"])):
    __slots__ = ()

    def __str__(self):
        return '%s-%d' % (self.consumer_id, self.thread_index)

class KafkaError(RuntimeError):
    retriable = False
    # whether metadata should be refreshed on error
    invalid_metadata = False

    def __str__(self):
        if not self.args:
            return self.__class__.__name__
        return '{0}: {1}'.format(self.__class__.__name__,
                               super(KafkaError, self).__str__())


class IllegalStateError(KafkaError):
    pass


class IllegalArgumentError(KafkaError):
    pass


class KafkaConfigurationError(KafkaError):
    pass


class SubscriptionMismatchError(KafkaConfigurationError):
    """Raised when an assignor that needs identical subscriptions across the
    group finds two topics with different consumer threads."""

    def __init__(self, topic, thread_ids, other_topic, other_thread_ids):
        self.topic = topic
        self.thread_ids = frozenset(thread_ids)
        self.other_topic = other_topic
        self.other_thread_ids = frozenset(other_thread_ids)
        super(SubscriptionMismatchError, self).__init__(
            'Round-robin assignment is allowed only if all consumers in the'
            ' group subscribe to the same topics, AND if the stream counts'
            ' across topics are identical for a given consumer instance.'
            ' Topic %s has the following available consumer streams: %s.'
            ' Topic %s has the following available consumer streams: %s'
            % (topic, _format_threads(self.thread_ids),
               other_topic, _format_threads(self.other_thread_ids)))


class InconsistentContextError(IllegalStateError):
    invalid_metadata = True


def _format_threads(thread_ids):
    return '[%s]' % ', '.join(str(t) for t in sorted(thread_ids))

import abc
import json
import logging
import re

import kafka_assignor.errors as Errors
from kafka_assignor.structs import ConsumerThreadId
from kafka_assignor.util import ensure_valid_topic_name, is_internal_topic

log = logging.getLogger(__name__)


STATIC_PATTERN = 'static'
WHITELIST_PATTERN = 'white_list'
BLACKLIST_PATTERN = 'black_list'


class TopicFilter(abc.ABC):
    """Regex over topic names, as used by wildcard subscriptions.

    Commas are accepted as alternation so that 'foo,bar' behaves like
    'foo|bar'; surrounding whitespace and quotes are stripped.
    """
    def __init__(self, raw_regex):
        regex = raw_regex.strip().strip('"').strip()
        regex = regex.replace(',', '|')
        if not regex:
            raise Errors.KafkaConfigurationError(
                'Topic filter regex must not be empty')
        try:
            self._pattern = re.compile(regex)
        except re.error as e:
            raise Errors.KafkaConfigurationError(
                '%s is an invalid regex: %s' % (raw_regex, e))
        self.regex = regex

    @abc.abstractmethod
    def is_topic_allowed(self, topic, exclude_internal_topics):
        pass

    def __eq__(self, other):
        return type(self) is type(other) and self.regex == other.regex

    def __hash__(self):
        return hash((type(self), self.regex))

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, self.regex)


class Whitelist(TopicFilter):
    pattern_type = WHITELIST_PATTERN

    def is_topic_allowed(self, topic, exclude_internal_topics):
        allowed = self._pattern.fullmatch(topic) is not None
        if allowed and exclude_internal_topics and is_internal_topic(topic):
            log.debug('Topic %s matched whitelist /%s/ but is internal',
                      topic, self.regex)
            return False
        return allowed


class Blacklist(TopicFilter):
    pattern_type = BLACKLIST_PATTERN

    def is_topic_allowed(self, topic, exclude_internal_topics):
        allowed = self._pattern.fullmatch(topic) is None
        if allowed and exclude_internal_topics and is_internal_topic(topic):
            return False
        return allowed


def _check_num_streams(topic, num_streams):
    if isinstance(num_streams, bool) or not isinstance(num_streams, int) \
            or num_streams <= 0:
        raise Errors.KafkaConfigurationError(
            'Stream count for %s must be a positive integer, got %r'
            % (topic, num_streams))


def _thread_ids(consumer_id, num_streams):
    return set(ConsumerThreadId(consumer_id, i) for i in range(num_streams))


class TopicCount(abc.ABC):
    """A consumer instance's subscription: which topics it reads and with
    how many streams (threads) per topic."""

    def __init__(self, consumer_id):
        self.consumer_id = consumer_id

    @abc.abstractmethod
    def topic_count_map(self, all_topics=None):
        """Resolve the subscription to {topic: num_streams}.

        Arguments:
            all_topics (iterable of str): every topic known to the cluster.
                Only needed by wildcard subscriptions.
        """
        pass

    @property
    @abc.abstractmethod
    def pattern(self):
        pass

    def consumer_thread_ids_per_topic(self, all_topics=None):
        """Returns:
            dict: {topic: set(ConsumerThreadId, ...)}
        """
        return dict(
            (topic, _thread_ids(self.consumer_id, num_streams))
            for topic, num_streams in self.topic_count_map(all_topics).items())


class StaticTopicCount(TopicCount):
    pattern = STATIC_PATTERN

    def __init__(self, consumer_id, topic_count_map):
        super(StaticTopicCount, self).__init__(consumer_id)
        for topic, num_streams in topic_count_map.items():
            ensure_valid_topic_name(topic)
            _check_num_streams(topic, num_streams)
        self._topic_count_map = dict(topic_count_map)

    def topic_count_map(self, all_topics=None):
        return dict(self._topic_count_map)

    def registration(self):
        return {'version': 1, 'subscription': dict(self._topic_count_map),
                'pattern': self.pattern}

    def __eq__(self, other):
        return (isinstance(other, StaticTopicCount)
                and self.consumer_id == other.consumer_id
                and self._topic_count_map == other._topic_count_map)

    def __repr__(self):
        return 'StaticTopicCount(consumer_id=%r, topic_count_map=%r)' % (
            self.consumer_id, dict(sorted(self._topic_count_map.items())))


class WildcardTopicCount(TopicCount):

    def __init__(self, consumer_id, topic_filter, num_streams,
                 exclude_internal_topics=True):
        super(WildcardTopicCount, self).__init__(consumer_id)
        if not isinstance(topic_filter, TopicFilter):
            raise TypeError('topic_filter must be a Whitelist or Blacklist')
        _check_num_streams(topic_filter.regex, num_streams)
        self.topic_filter = topic_filter
        self.num_streams = num_streams
        self.exclude_internal_topics = exclude_internal_topics

    @property
    def pattern(self):
        return self.topic_filter.pattern_type

    def topic_count_map(self, all_topics=None):
        if all_topics is None:
            raise Errors.IllegalArgumentError(
                'Wildcard subscription /%s/ of %s needs the list of all topics'
                % (self.topic_filter.regex, self.consumer_id))
        return dict(
            (topic, self.num_streams) for topic in sorted(set(all_topics))
            if self.topic_filter.is_topic_allowed(
                topic, self.exclude_internal_topics))

    def registration(self):
        return {'version': 1,
                'subscription': {self.topic_filter.regex: self.num_streams},
                'pattern': self.pattern}

    def __repr__(self):
        return 'WildcardTopicCount(consumer_id=%r, topic_filter=%r, num_streams=%d)' % (
            self.consumer_id, self.topic_filter, self.num_streams)


def construct_topic_count(consumer_id, registration, exclude_internal_topics=True):
    """Build a TopicCount from a consumer registration record.

    The record is the json document a consumer instance publishes when it
    joins the group, e.g.::

        {"version": 1, "subscription": {"clicks": 2}, "pattern": "static"}

    Wildcard registrations carry a single {regex: num_streams} entry and a
    pattern of "white_list" or "black_list".

    Arguments:
        consumer_id (str): id of the instance that published the record
        registration (dict or str): decoded or json-encoded record
        exclude_internal_topics (bool): drop internal topics from wildcard
            matches. Default: True

    Raises:
        KafkaConfigurationError: if the record cannot be interpreted
    """
    if isinstance(registration, (bytes, str)):
        try:
            registration = json.loads(registration)
        except ValueError as e:
            raise Errors.KafkaConfigurationError(
                'Unparseable registration for consumer %s: %s' % (consumer_id, e))
    if not isinstance(registration, dict):
        raise Errors.KafkaConfigurationError(
            'Registration for consumer %s must be a json object' % (consumer_id,))

    subscription = registration.get('subscription')
    if not isinstance(subscription, dict):
        raise Errors.KafkaConfigurationError(
            'Registration for consumer %s has no subscription' % (consumer_id,))
    pattern = registration.get('pattern', STATIC_PATTERN)

    if pattern == STATIC_PATTERN:
        return StaticTopicCount(consumer_id, subscription)

    if pattern in (WHITELIST_PATTERN, BLACKLIST_PATTERN):
        if len(subscription) != 1:
            raise Errors.KafkaConfigurationError(
                'Wildcard registration for consumer %s must hold exactly one'
                ' topic filter, got %d' % (consumer_id, len(subscription)))
        regex, num_streams = next(iter(subscription.items()))
        if pattern == WHITELIST_PATTERN:
            topic_filter = Whitelist(regex)
        else:
            topic_filter = Blacklist(regex)
        return WildcardTopicCount(consumer_id, topic_filter, num_streams,
                                  exclude_internal_topics=exclude_internal_topics)

    raise Errors.KafkaConfigurationError(
        'Unknown subscription pattern %r for consumer %s' % (pattern, consumer_id))

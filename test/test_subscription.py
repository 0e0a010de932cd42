import json

import pytest

import kafka_assignor.errors as Errors
from kafka_assignor.coordinator.subscription import (
    Blacklist, StaticTopicCount, Whitelist, WildcardTopicCount,
    construct_topic_count)
from kafka_assignor.structs import ConsumerThreadId


ALL_TOPICS = ['foo1', 'foobar', 'bar', '__consumer_offsets']


def test_static_topic_count():
    tc = StaticTopicCount('c1', {'a': 2, 'b': 1})
    assert tc.pattern == 'static'
    assert tc.topic_count_map() == {'a': 2, 'b': 1}
    assert tc.consumer_thread_ids_per_topic() == {
        'a': {ConsumerThreadId('c1', 0), ConsumerThreadId('c1', 1)},
        'b': {ConsumerThreadId('c1', 0)},
    }


def test_static_topic_count_keeps_internal_topics():
    tc = StaticTopicCount('c1', {'__consumer_offsets': 1})
    assert tc.topic_count_map(ALL_TOPICS) == {'__consumer_offsets': 1}


@pytest.mark.parametrize('num_streams', [0, -1, True, '2', 1.5, None])
def test_static_topic_count_rejects_stream_count(num_streams):
    with pytest.raises(Errors.KafkaConfigurationError):
        StaticTopicCount('c1', {'a': num_streams})


def test_static_topic_count_rejects_topic_name():
    with pytest.raises(ValueError):
        StaticTopicCount('c1', {'bad topic': 1})


@pytest.mark.parametrize('topic_filter,exclude_internal,expected', [
    (Whitelist('foo.*'), True, ['foo1', 'foobar']),
    (Whitelist('foo'), True, []),
    (Whitelist('foo1,bar'), True, ['bar', 'foo1']),
    (Whitelist(' "bar" '), True, ['bar']),
    (Whitelist('.*'), True, ['bar', 'foo1', 'foobar']),
    (Whitelist('.*'), False, ['__consumer_offsets', 'bar', 'foo1', 'foobar']),
    (Blacklist('bar'), True, ['foo1', 'foobar']),
    (Blacklist('foo.*'), False, ['__consumer_offsets', 'bar']),
])
def test_wildcard_topic_count(topic_filter, exclude_internal, expected):
    tc = WildcardTopicCount('c1', topic_filter, 2,
                            exclude_internal_topics=exclude_internal)
    topic_count_map = tc.topic_count_map(ALL_TOPICS)
    assert sorted(topic_count_map) == expected
    assert all(n == 2 for n in topic_count_map.values())
    assert tc.pattern == topic_filter.pattern_type


def test_wildcard_topic_count_requires_all_topics():
    tc = WildcardTopicCount('c1', Whitelist('foo.*'), 1)
    with pytest.raises(Errors.IllegalArgumentError):
        tc.consumer_thread_ids_per_topic()


def test_wildcard_topic_count_requires_filter():
    with pytest.raises(TypeError):
        WildcardTopicCount('c1', 'foo.*', 1)


@pytest.mark.parametrize('regex', ['', '   ', '(unclosed'])
def test_topic_filter_rejects_regex(regex):
    with pytest.raises(Errors.KafkaConfigurationError):
        Whitelist(regex)


def test_topic_filter_equality():
    assert Whitelist('a,b') == Whitelist('a|b')
    assert Whitelist('a') != Blacklist('a')
    assert len(set([Blacklist('a'), Blacklist('a')])) == 1


def test_construct_static_from_json():
    registration = json.dumps({'version': 1, 'subscription': {'a': 3}, 'pattern': 'static'})
    tc = construct_topic_count('c1', registration)
    assert tc == StaticTopicCount('c1', {'a': 3})
    assert tc.registration() == json.loads(registration)


def test_construct_static_from_bytes():
    tc = construct_topic_count('c1', b'{"subscription": {"a": 1}}')
    assert tc == StaticTopicCount('c1', {'a': 1})


@pytest.mark.parametrize('pattern,expected', [
    ('white_list', ['foo1', 'foobar']),
    ('black_list', ['bar']),
])
def test_construct_wildcard(pattern, expected):
    registration = {'version': 1, 'subscription': {'foo.*': 2}, 'pattern': pattern}
    tc = construct_topic_count('c1', registration)
    assert isinstance(tc, WildcardTopicCount)
    assert sorted(tc.topic_count_map(ALL_TOPICS)) == expected
    assert tc.registration() == registration


def test_construct_wildcard_include_internal():
    registration = {'subscription': {'__.*': 1}, 'pattern': 'white_list'}
    tc = construct_topic_count('c1', registration, exclude_internal_topics=False)
    assert tc.topic_count_map(ALL_TOPICS) == {'__consumer_offsets': 1}
    tc = construct_topic_count('c1', registration)
    assert tc.topic_count_map(ALL_TOPICS) == {}


@pytest.mark.parametrize('registration', [
    '{not json',
    '[1, 2]',
    {'version': 1},
    {'version': 1, 'subscription': ['a']},
    {'version': 1, 'subscription': {'a': 1}, 'pattern': 'regex'},
    {'version': 1, 'subscription': {'a': 1, 'b': 1}, 'pattern': 'white_list'},
    {'version': 1, 'subscription': {}, 'pattern': 'black_list'},
    42,
])
def test_construct_topic_count_errors(registration):
    with pytest.raises(Errors.KafkaConfigurationError):
        construct_topic_count('c1', registration)

# pylint: skip-file
import pytest

from kafka_assignor.structs import ConsumerThreadId, TopicPartition
from kafka_assignor.util import (
    ensure_valid_topic_name, is_internal_topic, java_string_hashcode)


@pytest.mark.parametrize(('topic_name', 'expectation'), [
    (0, pytest.raises(TypeError)),
    (None, pytest.raises(TypeError)),
    ('', pytest.raises(ValueError)),
    ('.', pytest.raises(ValueError)),
    ('..', pytest.raises(ValueError)),
    ('a' * 250, pytest.raises(ValueError)),
    ('abc/123', pytest.raises(ValueError)),
    ('/abc/123', pytest.raises(ValueError)),
    ('/abc123', pytest.raises(ValueError)),
    ('name with space', pytest.raises(ValueError)),
    ('name*with*stars', pytest.raises(ValueError)),
    ('name+with+plus', pytest.raises(ValueError)),
])
def test_topic_name_validation(topic_name, expectation):
    with expectation:
        ensure_valid_topic_name(topic_name)


@pytest.mark.parametrize("value,expected", [
    ('', 0),
    ('hello', 99162322),
    ('t0-0', 3503327),
    ('t1-0', 3504288),
    # wraps around to Integer.MIN_VALUE
    ('polygenelubricants', -2147483648),
    # hashed as a UTF-16 surrogate pair
    ('\U0001F600', 1772899),
])
def test_java_string_hashcode(value, expected):
    assert java_string_hashcode(value) == expected


def test_java_string_hashcode_collision():
    assert java_string_hashcode('Aa') == java_string_hashcode('BB')
    assert java_string_hashcode('Aa-0') == java_string_hashcode('BB-0')


def test_internal_topics():
    assert is_internal_topic('__consumer_offsets')
    assert is_internal_topic('__transaction_state')
    assert not is_internal_topic('consumer_offsets')


def test_topic_partition():
    tp = TopicPartition('foo', 3)
    assert str(tp) == 'foo-3'
    assert tp.topic == 'foo'
    assert tp.partition == 3
    assert TopicPartition('a', 10) > TopicPartition('a', 9)
    assert TopicPartition('a', 10) < TopicPartition('b', 0)


def test_consumer_thread_id_ordering():
    assert str(ConsumerThreadId('C1', 0)) == 'C1-0'
    # instance id compares as a string, thread index as a number
    assert ConsumerThreadId('C10', 0) < ConsumerThreadId('C2', 0)
    assert ConsumerThreadId('C1', 2) < ConsumerThreadId('C1', 10)
    assert sorted([ConsumerThreadId('b', 0), ConsumerThreadId('a', 1), ConsumerThreadId('a', 0)]) == [
        ConsumerThreadId('a', 0), ConsumerThreadId('a', 1), ConsumerThreadId('b', 0)]
    assert ConsumerThreadId('C1', 0) == ConsumerThreadId('C1', 0)
    assert len(set([ConsumerThreadId('C1', 0), ConsumerThreadId('C1', 0)])) == 1

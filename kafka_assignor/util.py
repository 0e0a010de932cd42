import re
import struct


MAX_INT = 2 ** 31
TO_SIGNED = 2 ** 32

# Taken from: https://github.com/apache/kafka/blob/39eb31feaeebfb184d98cc5d94da9148c2319d81/clients/src/main/java/org/apache/kafka/common/internals/Topic.java#L29
TOPIC_MAX_LENGTH = 249
TOPIC_LEGAL_CHARS = re.compile('^[a-zA-Z0-9._-]+$')

INTERNAL_TOPICS = frozenset(['__consumer_offsets', '__transaction_state'])


def java_string_hashcode(s):
    """Compute java.lang.String#hashCode() for a python str.

    Every group member must order partitions identically, so python's salted
    hash() is of no use here. Java hashes UTF-16 code units with wrapping
    32-bit arithmetic; the result is returned as a signed int.
    """
    data = s.encode('utf-16-be')
    h = 0
    for unit in struct.unpack('>%dH' % (len(data) // 2), data):
        h = (31 * h + unit) & 0xffffffff
    if h >= MAX_INT:
        h -= TO_SIGNED
    return h


def is_internal_topic(topic):
    return topic in INTERNAL_TOPICS


def ensure_valid_topic_name(topic):
    """ Ensures that the topic name is valid according to the kafka source. """

    # See Kafka Source:
    # https://github.com/apache/kafka/blob/39eb31feaeebfb184d98cc5d94da9148c2319d81/clients/src/main/java/org/apache/kafka/common/internals/Topic.java
    if topic is None:
        raise TypeError('All topics must not be None')
    if not isinstance(topic, str):
        raise TypeError('All topics must be strings')
    if len(topic) == 0:
        raise ValueError('All topics must be non-empty strings')
    if topic == '.' or topic == '..':
        raise ValueError('Topic name cannot be "." or ".."')
    if len(topic) > TOPIC_MAX_LENGTH:
        raise ValueError('Topic name is illegal, it can\'t be longer than {0} characters, topic: "{1}"'.format(TOPIC_MAX_LENGTH, topic))
    if not TOPIC_LEGAL_CHARS.match(topic):
        raise ValueError('Topic name "{0}" is illegal, it contains a character other than ASCII alphanumerics, ".", "_" and "-"'.format(topic))

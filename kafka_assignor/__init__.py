__title__ = 'kafka_assignor'
from kafka_assignor.version import __version__
__author__ = 'Dana Powers'
__license__ = 'Apache License 2.0'
__copyright__ = 'Copyright 2025 Dana Powers, David Arthur, and Contributors'

# Set default logging handler to avoid "No handler found" warnings.
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())


from kafka_assignor.coordinator.assignors import (
    ASSIGNORS, create_assignor, FairPartitionAssignor,
    RangePartitionAssignor, RoundRobinPartitionAssignor)
from kafka_assignor.coordinator.consumer import GroupAssignmentCoordinator
from kafka_assignor.coordinator.context import AssignmentContext
from kafka_assignor.coordinator.subscription import (
    Blacklist, StaticTopicCount, Whitelist, WildcardTopicCount,
    construct_topic_count)
from kafka_assignor.structs import ConsumerThreadId, TopicPartition


__all__ = [
    'ASSIGNORS', 'AssignmentContext', 'Blacklist', 'ConsumerThreadId',
    'FairPartitionAssignor', 'GroupAssignmentCoordinator',
    'RangePartitionAssignor', 'RoundRobinPartitionAssignor',
    'StaticTopicCount', 'TopicPartition', 'Whitelist', 'WildcardTopicCount',
    'construct_topic_count', 'create_assignor',
]

from kafka_assignor.coordinator.assignors.fair import FairPartitionAssignor
from kafka_assignor.coordinator.assignors.range import RangePartitionAssignor
from kafka_assignor.coordinator.assignors.roundrobin import RoundRobinPartitionAssignor


ASSIGNORS = dict(
    (assignor.name, assignor) for assignor in (
        RangePartitionAssignor, RoundRobinPartitionAssignor, FairPartitionAssignor))

DEFAULT_ASSIGNOR = RangePartitionAssignor


def create_assignor(strategy):
    """Look up the assignor for a partition assignment strategy name.

    Unrecognized names, including None, select the range assignor.
    """
    return ASSIGNORS.get(strategy, DEFAULT_ASSIGNOR)


__all__ = [
    'ASSIGNORS', 'DEFAULT_ASSIGNOR', 'create_assignor',
    'FairPartitionAssignor', 'RangePartitionAssignor',
    'RoundRobinPartitionAssignor',
]

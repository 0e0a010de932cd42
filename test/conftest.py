import pytest

from kafka_assignor.coordinator.consumer import GroupAssignmentCoordinator


@pytest.fixture
def registrations():
    """Registrations of a three member group; C2 subscribes to nothing"""
    return {
        'C0': {'version': 1, 'subscription': {'t0': 2, 't1': 1}, 'pattern': 'static'},
        'C1': '{"version": 1, "subscription": {"t0": 1}, "pattern": "static"}',
        'C2': {'version': 1, 'subscription': {}, 'pattern': 'static'},
    }


@pytest.fixture
def partitions_for_topic():
    return {'t0': [0, 1, 2, 3, 4], 't1': [0, 1, 2], 'unused': [0]}


@pytest.fixture
def coordinator_factory():
    def factory(consumer_id, **configs):
        configs.setdefault('group_id', 'test-group')
        return GroupAssignmentCoordinator(consumer_id=consumer_id, **configs)
    return factory

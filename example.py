#!/usr/bin/env python
import logging

from kafka_assignor import GroupAssignmentCoordinator


# Registrations as each member of the group publishes them
REGISTRATIONS = {
    'group1_host1-1700000000000-1a2b3c4d': {
        'version': 1, 'subscription': {'clicks': 2, 'views': 1}, 'pattern': 'static'},
    'group1_host2-1700000000000-5e6f7a8b': {
        'version': 1, 'subscription': {'clicks': 1}, 'pattern': 'static'},
    'group1_host3-1700000000000-9c0d1e2f': {
        'version': 1, 'subscription': {'.*': 1}, 'pattern': 'white_list'},
}

PARTITIONS = {
    'clicks': list(range(8)),
    'views': list(range(4)),
    '__consumer_offsets': list(range(50)),
}


def main():
    for strategy in ('range', 'fair'):
        print('%s:' % strategy)
        for member_id in sorted(REGISTRATIONS):
            coordinator = GroupAssignmentCoordinator(
                group_id='group1', consumer_id=member_id,
                partition_assignment_strategy=strategy)
            owned = coordinator.rebalance(REGISTRATIONS, PARTITIONS)
            by_thread = {}
            for tp, thread_id in owned.items():
                by_thread.setdefault(str(thread_id), []).append(str(tp))
            for thread_id in sorted(by_thread):
                print('  %s: %s' % (thread_id, ', '.join(sorted(by_thread[thread_id]))))


if __name__ == "__main__":
    logging.basicConfig(
        format='%(asctime)s.%(msecs)s:%(name)s:%(thread)d:%(levelname)s:%(process)d:%(message)s',
        level=logging.WARNING
        )
    main()

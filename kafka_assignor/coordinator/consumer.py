import collections
import copy
import logging
import socket
import time
import uuid

import kafka_assignor.errors as Errors
from kafka_assignor.coordinator.assignors import create_assignor
from kafka_assignor.coordinator.context import AssignmentContext
from kafka_assignor.coordinator.subscription import construct_topic_count, TopicCount

log = logging.getLogger(__name__)


def generate_consumer_id(group_id):
    """Build a consumer instance id unique within the group:
    <group>_<hostname>-<millis>-<uuid prefix>"""
    return '%s_%s-%d-%s' % (group_id, socket.gethostname(),
                            int(time.time() * 1000), uuid.uuid4().hex[:8])


class GroupAssignmentCoordinator(object):
    """Computes partition ownership for one member of a consumer group.

    This is the member-side half of a rebalance: given the group snapshot it
    runs the configured assignor and picks out the partitions that belong to
    this instance. Fetching the snapshot, and installing or retrying the
    result, is left to the caller.
    """
    DEFAULT_CONFIG = {
        'group_id': 'kafka-assignor-default-group',
        'consumer_id': None,
        'partition_assignment_strategy': 'range',
        'exclude_internal_topics': True,
    }

    def __init__(self, **configs):
        """Initialize the coordinator.

        Keyword Arguments:
            group_id (str): name of the consumer group. Default:
                'kafka-assignor-default-group'
            consumer_id (str): id of this consumer instance. If None, an id
                is generated from group_id, hostname, time and a random
                suffix. Default: None
            partition_assignment_strategy (str): one of 'range',
                'roundrobin' or 'fair'. Unrecognized values fall back to
                'range'. Default: 'range'
            exclude_internal_topics (bool): Whether wildcard subscriptions
                may match internal topics (such as offsets). If set to True
                the only way to consume an internal topic is subscribing to
                it by name. Default: True
        """
        self.config = copy.copy(self.DEFAULT_CONFIG)
        for key in self.config:
            if key in configs:
                self.config[key] = configs.pop(key)

        if configs:
            raise Errors.KafkaConfigurationError(
                'Unrecognized configs: %s' % (sorted(configs),))
        if not self.config['group_id']:
            raise Errors.KafkaConfigurationError('group_id is required')

        if self.config['consumer_id'] is None:
            self.config['consumer_id'] = generate_consumer_id(self.config['group_id'])

        self.assignor = create_assignor(self.config['partition_assignment_strategy'])
        if self.assignor.name != self.config['partition_assignment_strategy']:
            log.warning('Unknown partition assignment strategy %r; using %s',
                        self.config['partition_assignment_strategy'],
                        self.assignor.name)

    @property
    def consumer_id(self):
        return self.config['consumer_id']

    def topic_counts(self, registrations):
        """Interpret the registrations of every member of the group.

        Arguments:
            registrations (dict): {consumer_id: TopicCount, registration dict
                or json string}

        Returns:
            dict: {consumer_id: TopicCount}
        """
        topic_counts = {}
        for member_id, registration in registrations.items():
            if isinstance(registration, TopicCount):
                topic_counts[member_id] = registration
            else:
                topic_counts[member_id] = construct_topic_count(
                    member_id, registration,
                    exclude_internal_topics=self.config['exclude_internal_topics'])
        return topic_counts

    def build_context(self, registrations, partitions_for_topic, all_topics=None):
        """Returns:
            AssignmentContext for this consumer instance
        """
        return AssignmentContext.from_subscriptions(
            self.consumer_id, self.topic_counts(registrations),
            partitions_for_topic, all_topics=all_topics)

    def assign(self, context):
        """Run the configured assignor over a group snapshot.

        Returns:
            dict: {consumer_id: {TopicPartition: ConsumerThreadId}} covering
                every consumer in the group
        """
        log.debug('Consumer %s computing %s assignment for group %s',
                  context.consumer_id, self.assignor.name, self.config['group_id'])
        return self.assignor.assign(context)

    def owned_partitions(self, assignment):
        """Returns:
            dict: {TopicPartition: ConsumerThreadId} owned by this instance
        """
        return dict(assignment.get(self.consumer_id, {}))

    def partitions_by_thread(self, assignment):
        """Returns:
            dict: {ConsumerThreadId: [TopicPartition, ...]} for this instance
        """
        by_thread = collections.defaultdict(list)
        for topic_partition, thread_id in self.owned_partitions(assignment).items():
            by_thread[thread_id].append(topic_partition)
        return dict((thread_id, sorted(partitions))
                    for thread_id, partitions in sorted(by_thread.items()))

    def rebalance(self, registrations, partitions_for_topic, all_topics=None):
        """Compute the partitions this instance should own after a rebalance.

        Arguments:
            registrations (dict): {consumer_id: registration} for every
                member of the group, this instance included
            partitions_for_topic (dict): {topic: [partition_id, ...]}
            all_topics (iterable of str, optional): every topic in the
                cluster, for wildcard subscriptions

        Returns:
            dict: {TopicPartition: ConsumerThreadId}

        Raises:
            SubscriptionMismatchError: if the roundrobin strategy is
                configured and subscriptions differ across the group
            InconsistentContextError: if a subscribed topic has no
                partition metadata
        """
        context = self.build_context(registrations, partitions_for_topic,
                                     all_topics=all_topics)
        owned = self.owned_partitions(self.assign(context))
        log.info('Consumer %s selected partitions : %s', self.consumer_id,
                 ','.join(str(tp) for tp in sorted(owned)))
        return owned

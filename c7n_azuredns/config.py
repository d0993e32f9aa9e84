# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
import logging
import os

from c7n.config import Bag

from c7n_azuredns import constants
from c7n_azuredns.cloud import get_cloud

log = logging.getLogger('custodian.azuredns.config')


class Config(Bag):
    """Zone discovery settings.

    ``private_zone`` selects private dns zones over public ones, the
    ``subscription_id``, ``resource_group`` and ``service_discovery_filter``
    strings narrow the query when non-empty and ``environment`` names the
    Azure cloud to query.
    """

    def copy(self, **kw):
        d = {}
        d.update(self)
        d.update(**kw)
        return Config(d)

    @classmethod
    def empty(cls, **kw):
        d = {}
        d.update({
            'private_zone': False,
            'subscription_id': '',
            'resource_group': '',
            'service_discovery_filter': '',
            'environment': None})
        d.update(kw)
        if d['environment'] is None:
            d['environment'] = os.environ.get(
                constants.ENV_ENVIRONMENT, constants.DEFAULT_CLOUD)
        d['environment'] = get_cloud(d['environment'])
        log.debug('Using Azure cloud environment %s', d['environment'].name)
        return cls(d)

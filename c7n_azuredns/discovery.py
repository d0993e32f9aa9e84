# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
"""Discover Azure DNS zones visible to a credential using Resource Graph.
"""
import logging
from collections import namedtuple
from collections.abc import Mapping

from azure.core.exceptions import AzureError
from azure.mgmt.resourcegraph import ResourceGraphClient
from azure.mgmt.resourcegraph.models import QueryRequest, QueryRequestOptions, ResultFormat

from c7n_azuredns import constants
from c7n_azuredns.cloud import get_cloud
from c7n_azuredns.exceptions import (
    ClientConstructionError, DuplicateZoneError, MalformedRowError, ResourceGraphQueryError,
    UnknownCloudError)
from c7n_azuredns.query import ResourceGraphQuery

log = logging.getLogger('custodian.azuredns.discovery')


ServiceDiscoveryZone = namedtuple(
    'ServiceDiscoveryZone', 'name, subscription_id, resource_group')


class ZoneRow(namedtuple('ZoneRow', 'name, subscription_id, resource_group')):
    """A Resource Graph result row projected to the zone columns."""

    __slots__ = ()

    @staticmethod
    def get_name(row):
        """The row's zone name, or None when the row has no usable name."""
        if not isinstance(row, Mapping):
            return None
        name = row.get(constants.ROW_NAME)
        if not isinstance(name, str):
            return None
        return name

    @classmethod
    def from_row(cls, row, zones=None):
        name = cls.get_name(row)
        if name is None:
            raise MalformedRowError("Resource Graph row has no zone name", row, zones)
        values = {}
        for field in (constants.ROW_RESOURCE_GROUP, constants.ROW_SUBSCRIPTION_ID):
            value = row.get(field)
            if not isinstance(value, str):
                raise MalformedRowError(
                    'dns zone "%s" row has no valid %s: %r' % (name, field, value),
                    row, zones)
            values[field] = value
        return cls(name=name,
                   resource_group=values[constants.ROW_RESOURCE_GROUP],
                   subscription_id=values[constants.ROW_SUBSCRIPTION_ID])

    def to_zone(self):
        return ServiceDiscoveryZone(
            name=self.name,
            subscription_id=self.subscription_id,
            resource_group=self.resource_group)


class ZoneDiscoverer:
    """Pages through Resource Graph and collects dns zones keyed by name.

    Requests are issued one at a time. A zone name seen twice is an error,
    even when the rows come from different subscriptions or resource groups.
    """

    page_size = constants.RESOURCE_GRAPH_QUERY_TOP

    def __init__(self, config, credential, **client_options):
        """
        :param client_options: passed through to ``ResourceGraphClient``,
            e.g. ``transport`` or ``user_agent``.
        """
        self.config = config
        self.credential = credential
        self.client_options = client_options
        self.query = ResourceGraphQuery.for_config(config)

    def get_client(self):
        if self.credential is None:
            raise ClientConstructionError(
                "A token credential is required to query Resource Graph")

        try:
            cloud = get_cloud(self.config.get('environment'))
        except UnknownCloudError as e:
            raise ClientConstructionError(str(e)) from e

        try:
            return ResourceGraphClient(
                self.credential,
                base_url=cloud.resource_manager,
                credential_scopes=[cloud.credential_scope],
                **self.client_options)
        except (ValueError, TypeError, AzureError) as e:
            raise ClientConstructionError(
                "Failed to create Resource Graph client: %s" % e) from e

    def get_request(self, skip):
        return QueryRequest(
            query=self.query.build(),
            options=QueryRequestOptions(
                top=self.page_size,
                skip=skip,
                result_format=ResultFormat.OBJECT_ARRAY))

    def discover(self):
        zones = {}
        client = self.get_client()
        with client:
            skip = 0
            while True:
                try:
                    result = client.resources(self.get_request(skip))
                except AzureError as e:
                    raise ResourceGraphQueryError(
                        "Resource Graph query failed at offset %d: %s" % (skip, e),
                        zones) from e

                rows = result.data
                if not isinstance(rows, list):
                    log.debug("Resource Graph returned no row list at offset %d", skip)
                    break
                # without a total an empty page is the only end marker
                if not rows and result.total_records is None:
                    log.debug("Resource Graph returned no rows at offset %d", skip)
                    break

                self.add_rows(zones, rows)
                log.debug("Resource Graph offset:%d rows:%d total:%s",
                          skip, len(rows), result.total_records)

                skip += self.page_size
                if result.total_records is not None and skip >= result.total_records:
                    break

        log.info("Discovered %d %s dns zones", len(zones),
                 'private' if self.config.get('private_zone') else 'public')
        return zones

    def add_rows(self, zones, rows):
        for row in rows:
            name = ZoneRow.get_name(row)
            if name is None:
                continue
            if name in zones:
                raise DuplicateZoneError(name, zones)
            zones[name] = ZoneRow.from_row(row, zones).to_zone()


def discover_dns_zones(config, credential, **client_options):
    """Find all visible Azure dns zones.

    :param config: a :class:`c7n_azuredns.config.Config` (or mapping) with
        the zone type, optional filters and cloud environment.
    :param credential: an ``azure.core.credentials.TokenCredential``.
    :param client_options: extra ``ResourceGraphClient`` keyword arguments.
    :returns: dict of zone name to :class:`ServiceDiscoveryZone`.
    :raises ZoneDiscoveryError: with the zones found so far on ``zones``.
    """
    return ZoneDiscoverer(config, credential, **client_options).discover()

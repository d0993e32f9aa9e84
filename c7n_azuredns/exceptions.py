# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0

from c7n.exceptions import CustodianError


class UnknownCloudError(CustodianError):
    """Cloud environment name could not be resolved
    """


class ZoneDiscoveryError(CustodianError):
    """Zone Discovery Exception Base Class

    ``zones`` holds the zones accumulated before the failure.
    """

    def __init__(self, msg, zones=None):
        super(ZoneDiscoveryError, self).__init__(msg)
        self.zones = zones if zones is not None else {}


class ClientConstructionError(ZoneDiscoveryError):
    """The Resource Graph client could not be built
    """


class ResourceGraphQueryError(ZoneDiscoveryError):
    """A Resource Graph query request failed
    """


class DuplicateZoneError(ZoneDiscoveryError):
    """Two result rows carried the same zone name
    """

    def __init__(self, zone_name, zones=None):
        super(DuplicateZoneError, self).__init__(
            'found duplicate dns zone "%s"' % zone_name, zones)
        self.zone_name = zone_name


class MalformedRowError(ZoneDiscoveryError):
    """A named result row is missing a required string field
    """

    def __init__(self, msg, row, zones=None):
        super(MalformedRowError, self).__init__(msg, zones)
        self.row = row

# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
"""Resource Graph (Kusto) query assembly.

Values are interpolated as given. Filter values and custom clauses come
from the caller's configuration and are not escaped or validated.
"""
from c7n_azuredns import constants


class FieldFilter:
    """Case insensitive equality on a result column."""

    def __init__(self, field, value):
        self.field = field
        self.value = value

    def render(self):
        return '| where %s =~ "%s"' % (self.field, self.value)

    def __repr__(self):
        return "<FieldFilter %s =~ %s>" % (self.field, self.value)


class CustomFilter:
    """A caller supplied query fragment, appended verbatim."""

    def __init__(self, clause):
        self.clause = clause

    def render(self):
        return '| %s' % self.clause

    def __repr__(self):
        return "<CustomFilter %s>" % self.clause


class ResourceGraphQuery:

    def __init__(self, resource_type, projection=constants.RESOURCE_GRAPH_PROJECTION):
        self.resource_type = resource_type
        self.projection = tuple(projection)
        self.filters = []

    def where_equals(self, field, value):
        if value:
            self.filters.append(FieldFilter(field, value))
        return self

    def where(self, clause):
        if clause:
            self.filters.append(CustomFilter(clause))
        return self

    def build(self):
        lines = [constants.RESOURCE_GRAPH_TABLE,
                 '| where type =~ "%s"' % self.resource_type]
        lines.extend(f.render() for f in self.filters)
        lines.append('| project %s' % ', '.join(self.projection))
        return '\n'.join(lines)

    __str__ = build

    @classmethod
    def for_config(cls, config):
        """Build the dns zone query for a discovery configuration.

        Filters are added in a fixed order: subscription, resource group,
        then the custom service discovery filter.
        """
        query = cls(resource_type_for(config.get('private_zone', False)))
        query.where_equals(constants.ROW_SUBSCRIPTION_ID, config.get('subscription_id'))
        query.where_equals(constants.ROW_RESOURCE_GROUP, config.get('resource_group'))
        query.where(config.get('service_discovery_filter'))
        return query


def resource_type_for(private_zone):
    if private_zone:
        return constants.RESOURCE_GRAPH_TYPE_PRIVATE_DNS_ZONE
    return constants.RESOURCE_GRAPH_TYPE_PUBLIC_DNS_ZONE

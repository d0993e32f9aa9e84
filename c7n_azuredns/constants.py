# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0

"""
Resource Graph
"""
RESOURCE_GRAPH_TYPE_PUBLIC_DNS_ZONE = 'microsoft.network/dnszones'
RESOURCE_GRAPH_TYPE_PRIVATE_DNS_ZONE = 'microsoft.network/privatednszones'

RESOURCE_GRAPH_TABLE = 'resources'
RESOURCE_GRAPH_PROJECTION = ('subscriptionId', 'resourceGroup', 'name')

# Rows requested per page (QueryRequestOptions.top)
RESOURCE_GRAPH_QUERY_TOP = 1000

"""
Result Row Fields
"""
ROW_NAME = 'name'
ROW_RESOURCE_GROUP = 'resourceGroup'
ROW_SUBSCRIPTION_ID = 'subscriptionId'

"""
Environment Variables
"""
ENV_ENVIRONMENT = 'AZURE_ENVIRONMENT'

"""
Cloud Environments
"""
CLOUD_PUBLIC = 'AzureCloud'
CLOUD_CHINA = 'AzureChinaCloud'
CLOUD_US_GOVERNMENT = 'AzureUSGovernment'

DEFAULT_CLOUD = CLOUD_PUBLIC

# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
"""Azure cloud environments a Resource Graph client can target.
"""
from collections import namedtuple

from azure.identity import AzureAuthorityHosts

from c7n_azuredns import constants
from c7n_azuredns.exceptions import UnknownCloudError


CloudEnvironment = namedtuple(
    'CloudEnvironment', 'name, resource_manager, credential_scope, authority_host')


AZURE_PUBLIC_CLOUD = CloudEnvironment(
    name=constants.CLOUD_PUBLIC,
    resource_manager='https://management.azure.com',
    credential_scope='https://management.azure.com/.default',
    authority_host=AzureAuthorityHosts.AZURE_PUBLIC_CLOUD)

AZURE_CHINA_CLOUD = CloudEnvironment(
    name=constants.CLOUD_CHINA,
    resource_manager='https://management.chinacloudapi.cn',
    credential_scope='https://management.chinacloudapi.cn/.default',
    authority_host=AzureAuthorityHosts.AZURE_CHINA)

AZURE_US_GOVERNMENT = CloudEnvironment(
    name=constants.CLOUD_US_GOVERNMENT,
    resource_manager='https://management.usgovcloudapi.net',
    credential_scope='https://management.usgovcloudapi.net/.default',
    authority_host=AzureAuthorityHosts.AZURE_GOVERNMENT)


_clouds = {
    'azurecloud': AZURE_PUBLIC_CLOUD,
    'azurepubliccloud': AZURE_PUBLIC_CLOUD,
    'public': AZURE_PUBLIC_CLOUD,
    'azurechinacloud': AZURE_CHINA_CLOUD,
    'china': AZURE_CHINA_CLOUD,
    'azureusgovernment': AZURE_US_GOVERNMENT,
    'azureusgovernmentcloud': AZURE_US_GOVERNMENT,
    'usgovernment': AZURE_US_GOVERNMENT,
}


def get_cloud(cloud):
    """Resolve a cloud name (case insensitive) or pass an environment through.

    :param cloud: a :class:`CloudEnvironment`, a cloud name or ``None``
        for the public cloud.
    """
    if cloud is None:
        return AZURE_PUBLIC_CLOUD
    if isinstance(cloud, CloudEnvironment):
        return cloud
    try:
        return _clouds[cloud.strip().lower()]
    except (AttributeError, KeyError):
        raise UnknownCloudError(
            "Unknown Azure cloud environment: %s. Valid values are %s" % (
                cloud, ', '.join(sorted({c.name for c in _clouds.values()}))))

# Automatically generated from poetry/pyproject.toml
# flake8: noqa
# -*- coding: utf-8 -*-
from setuptools import setup

packages = \
['c7n_azuredns']

package_data = \
{'': ['*']}

install_requires = \
['azure-core>=1.29.0,<2.0.0',
 'azure-identity>=1.15.0,<2.0.0',
 'azure-mgmt-resourcegraph>=8.0.0,<9.0.0',
 'c7n>=0.9.30,<0.10.0']

extras_require = \
{'test': ['mock>=5.0.0,<6.0.0',
          'pytest>=7.0.0',
          'requests>=2.22.0,<3.0.0']}

setup_kwargs = {
    'name': 'c7n-azuredns',
    'version': '0.1.0',
    'description': 'Cloud Custodian - Azure DNS Zone Discovery',
    'long_description': '\n# Cloud Custodian - Azure DNS Zone Discovery\n\nFinds the public or private Azure DNS zones visible to a credential\nusing Azure Resource Graph.\n\n    from azure.identity import DefaultAzureCredential\n    from c7n_azuredns.config import Config\n    from c7n_azuredns.discovery import discover_dns_zones\n\n    zones = discover_dns_zones(\n        Config.empty(private_zone=True, resource_group=\'dns\'),\n        DefaultAzureCredential())\n',
    'long_description_content_type': 'text/markdown',
    'author': 'Cloud Custodian Project',
    'author_email': None,
    'maintainer': None,
    'maintainer_email': None,
    'url': 'https://cloudcustodian.io',
    'packages': packages,
    'package_data': package_data,
    'install_requires': install_requires,
    'extras_require': extras_require,
    'python_requires': '>=3.8,<4.0',
}


setup(**setup_kwargs)

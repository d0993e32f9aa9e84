# Copyright The Cloud Custodian Authors.
# SPDX-License-Identifier: Apache-2.0
import io
import json
import logging
import time
import unittest

import requests
from azure.core.credentials import AccessToken
from azure.core.pipeline.transport import RequestsTransport
from mock import patch
from requests.adapters import HTTPAdapter
from urllib3.response import HTTPResponse

from c7n.config import Bag

DEFAULT_SUBSCRIPTION_ID = 'ea42f556-5106-4743-99b0-c129bfa71a47'
CUSTOM_SUBSCRIPTION_ID = '00000000-5106-4743-99b0-c129bfa71a47'
DEFAULT_RESOURCE_GROUP = 'test_dns'


logging.basicConfig(level=logging.DEBUG, format='%(message)s')
logging.getLogger("urllib3").setLevel(logging.INFO)


def zone_row(name, resource_group=DEFAULT_RESOURCE_GROUP,
             subscription_id=DEFAULT_SUBSCRIPTION_ID):
    return {'subscriptionId': subscription_id,
            'resourceGroup': resource_group,
            'name': name}


def zone_rows(count, start=0, suffix='example.com'):
    return [zone_row('zone%d.%s' % (i, suffix)) for i in range(start, start + count)]


def query_response(data, total_records=None):
    """Stand-in for a Resource Graph QueryResponse."""
    return Bag(
        data=data,
        count=len(data) if isinstance(data, list) else 0,
        total_records=total_records,
        result_truncated='false')


def query_response_body(data, total_records=None):
    """Resource Graph REST response body for an objectArray query."""
    body = {'count': len(data) if isinstance(data, list) else 0,
            'resultTruncated': 'false',
            'data': data,
            'facets': []}
    if total_records is not None:
        body['totalRecords'] = total_records
    return body


class FakeResourceGraphClient:
    """Replays query responses and records the requests it was sent.

    Exceptions in ``responses`` are raised instead of returned.
    """

    def __init__(self, responses):
        self.responses = list(responses)
        self.requests = []
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True

    def resources(self, query):
        self.requests.append(query)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class FakeCredential:

    def __init__(self):
        self.scopes = []

    def get_token(self, *scopes, **kwargs):
        self.scopes.append(scopes)
        return AccessToken('fake_token', int(time.time()) + 3600)


class ResourceGraphPlayback(HTTPAdapter):
    """requests adapter answering Resource Graph calls from canned responses.

    ``responses`` is a list of ``(status, body)`` pairs served in order.
    Sent requests are kept on ``requests``.
    """

    def __init__(self, responses):
        super(ResourceGraphPlayback, self).__init__()
        self.responses = list(responses)
        self.requests = []

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        self.requests.append(request)
        status, body = self.responses.pop(0)
        raw = HTTPResponse(
            body=io.BytesIO(json.dumps(body).encode('utf-8')),
            headers={'Content-Type': 'application/json; charset=utf-8'},
            status=status,
            reason='OK' if status < 400 else 'Bad Request',
            preload_content=False,
            decode_content=False)
        return self.build_response(request, raw)

    @property
    def bodies(self):
        return [json.loads(r.body) for r in self.requests]

    def transport(self):
        session = requests.Session()
        session.mount('https://', self)
        return RequestsTransport(session=session, session_owner=False)


class BaseTest(unittest.TestCase):

    def patch_client(self, *responses):
        client = FakeResourceGraphClient(responses)
        patcher = patch('c7n_azuredns.discovery.ResourceGraphClient', return_value=client)
        self.client_class = patcher.start()
        self.addCleanup(patcher.stop)
        return client

    @staticmethod
    def request_offsets(client):
        return [r.options.skip for r in client.requests]

"""Shared fixtures: a fixed config and a recording backend."""

import json
from typing import Any, Dict, List, Optional

import httpx
import pytest

from config import Config


@pytest.fixture
def config():
    return Config(
        protocol='http',
        host='tree.local',
        port='8080',
        client_id='client-123',
    )


class RecordingBackend:
    """httpx transport that records every request and answers from a table"""

    def __init__(self, status_code: int = 200, body: Any = None):
        self.requests: List[httpx.Request] = []
        self.status_code = status_code
        self.body = body if body is not None else {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport)


@pytest.fixture
def recording_backend():
    return RecordingBackend


def make_event(namespace: str, name: str, payload: Optional[Dict[str, Any]] = None,
               correlation_token: Optional[str] = 'corr-token-1',
               endpoint: Optional[Dict[str, Any]] = None,
               message_id: str = 'msg-in-1') -> Dict[str, Any]:
    header = {
        'namespace': namespace,
        'name': name,
        'messageId': message_id,
        'payloadVersion': '3',
    }
    if correlation_token is not None:
        header['correlationToken'] = correlation_token
    body: Dict[str, Any] = {'header': header, 'payload': payload or {}}
    if endpoint is not None:
        body['endpoint'] = endpoint
    return {'directive': body}


ENDPOINT = {
    'scope': {'type': 'BearerToken', 'token': 'access-token'},
    'endpointId': 'tree-1',
    'cookie': {},
}


def request_json(request: httpx.Request) -> Any:
    return json.loads(request.content)

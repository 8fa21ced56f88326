"""
Destination - where a backend call goes.
Builds the request descriptor. Sends nothing.
"""

import json
import logging
from dataclasses import dataclass
from typing import Dict, Any, Optional

from config import Config

logger = logging.getLogger(__name__)

CLIENT_ID_HEADER = 'ClientId'
JSON_CONTENT_TYPE = 'application/json'


@dataclass(frozen=True)
class BackendRequest:
    """One outbound call. Built fresh, never reused."""
    url: str
    method: str
    headers: Dict[str, str]
    body: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "url": self.url,
            "method": self.method,
            "headers": dict(self.headers)
        }
        if self.body is not None:
            data["body"] = self.body
        return data


def build_destination(config: Config, path: str, method: str = 'GET',
                      body: Any = None) -> BackendRequest:
    """
    Producer function: turn a backend path into a request descriptor.

    URL is <protocol>://<host>:<port>/smart_tree<path>.
    A body, when given, is JSON-serialized and typed as JSON.
    """
    headers = {CLIENT_ID_HEADER: config.client_id}
    encoded = None

    if body is not None:
        encoded = json.dumps(body)
        headers['Content-Type'] = JSON_CONTENT_TYPE

    request = BackendRequest(
        url=config.base_url + path,
        method=method,
        headers=headers,
        body=encoded
    )

    logger.debug(f"Destination: {json.dumps(request.to_dict())}")

    return request

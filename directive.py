"""
Directive - inbound message from the Alexa Smart Home platform.
Structural integrity only. No capability semantics.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)


class InvalidDirectiveError(Exception):
    """Directive structure is invalid"""
    pass


@dataclass(frozen=True)
class Directive:
    """
    One inbound directive.

    endpoint is opaque: it is passed back unchanged, never inspected
    beyond the access token scope.
    """
    namespace: str
    name: str
    message_id: str
    payload: Dict[str, Any] = field(default_factory=dict)
    correlation_token: Optional[str] = None
    endpoint: Optional[Dict[str, Any]] = None

    @classmethod
    def from_event(cls, event: Dict[str, Any]) -> 'Directive':
        """Parse {"directive": {...}} after validating its structure"""
        if not isinstance(event, dict):
            raise InvalidDirectiveError("event must be a dictionary")

        body = event.get('directive')
        validate_structure(body)

        header = body['header']
        return cls(
            namespace=header['namespace'],
            name=header['name'],
            message_id=header['messageId'],
            payload=body.get('payload') or {},
            correlation_token=header.get('correlationToken'),
            endpoint=body.get('endpoint')
        )

    def access_token(self) -> Optional[str]:
        """
        Locate the bearer token.

        Checked in order: endpoint.scope.token, payload.scope.token,
        payload.token. Whitespace is stripped; empty counts as missing.
        """
        candidates = [
            _scope_token(self.endpoint),
            _scope_token(self.payload),
            self.payload.get('token')
        ]
        for token in candidates:
            if isinstance(token, str) and token.strip():
                return token.strip()
        return None


def _scope_token(container: Optional[Dict[str, Any]]) -> Optional[str]:
    if not isinstance(container, dict):
        return None
    scope = container.get('scope')
    if not isinstance(scope, dict):
        return None
    return scope.get('token')


def validate_structure(body: Any) -> None:
    """
    Guarantee structural integrity.

    Does NOT:
    - Check the namespace is supported
    - Check the name is supported
    - Inspect payload contents

    Only checks:
    - header exists with namespace, name, messageId
    - payload and endpoint are objects when present
    """
    if not isinstance(body, dict):
        raise InvalidDirectiveError("directive is required")

    header = body.get('header')
    if not isinstance(header, dict):
        raise InvalidDirectiveError("directive.header is required")

    for key in ('namespace', 'name', 'messageId'):
        value = header.get(key)
        if not isinstance(value, str) or not value:
            raise InvalidDirectiveError(f"directive.header.{key} is required")

    payload = body.get('payload')
    if payload is not None and not isinstance(payload, dict):
        raise InvalidDirectiveError("directive.payload must be a dictionary")

    endpoint = body.get('endpoint')
    if endpoint is not None and not isinstance(endpoint, dict):
        raise InvalidDirectiveError("directive.endpoint must be a dictionary")

    logger.debug(f"Directive structure valid: {header['messageId']}")

"""
Response envelope - the reply Alexa expects.
Identity, traceability, reported state.
"""

import uuid
from datetime import datetime, timezone
from typing import Dict, Any, Optional

from directive import Directive

PAYLOAD_VERSION = '3'
CONTROL_ERROR_NAMESPACE = 'Alexa.ConnectedHome.Control'

POWER_UNCERTAINTY_MS = 500
BRIGHTNESS_UNCERTAINTY_MS = 1000
COLOR_UNCERTAINTY_MS = 1000


def generate_message_id() -> str:
    return str(uuid.uuid4())


def time_of_sample() -> str:
    """Current UTC time, ISO-8601 with Z suffix"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def build_property(namespace: str, name: str, value: Any,
                   uncertainty_ms: int) -> Dict[str, Any]:
    """One entry of context.properties"""
    return {
        "namespace": namespace,
        "name": name,
        "value": value,
        "timeOfSample": time_of_sample(),
        "uncertaintyInMilliseconds": uncertainty_ms
    }


def build_response(namespace: str, name: str, payload: Dict[str, Any],
                   directive: Optional[Directive] = None,
                   context_property: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Wrap a result in an event envelope.

    Always:
    - Fresh messageId
    - Fixed payloadVersion

    Copied from the directive when present:
    - correlationToken (verbatim)
    - endpoint (unchanged)

    context.properties holds exactly one property when given.
    """
    header = {
        "messageId": generate_message_id(),
        "name": name,
        "namespace": namespace,
        "payloadVersion": PAYLOAD_VERSION
    }
    event: Dict[str, Any] = {"header": header}

    if directive is not None:
        if directive.correlation_token is not None:
            header["correlationToken"] = directive.correlation_token
        if directive.endpoint is not None:
            event["endpoint"] = directive.endpoint

    event["payload"] = payload

    response: Dict[str, Any] = {"event": event}
    if context_property is not None:
        response["context"] = {"properties": [context_property]}

    return response


def build_error_response(directive: Directive, name: str) -> Dict[str, Any]:
    """Platform-recognized error, delivered as a normal reply"""
    return build_response(
        CONTROL_ERROR_NAMESPACE,
        name,
        {},
        directive=directive
    )

"""
Directive handlers - one per capability.
Each turns a directive into one backend call and one envelope.
"""

import abc
import json
import logging
from typing import Dict, Any, Optional

import httpx

import backend
from config import Config
from destination import build_destination
from directive import Directive, InvalidDirectiveError
from response_envelope import (
    build_response,
    build_property,
    build_error_response,
    POWER_UNCERTAINTY_MS,
    BRIGHTNESS_UNCERTAINTY_MS,
    COLOR_UNCERTAINTY_MS,
)

logger = logging.getLogger(__name__)

RESPONSE_NAMESPACE = 'Alexa'
RESPONSE_NAME = 'Response'


class UnsupportedDirectiveError(Exception):
    """Directive name is not handled under its namespace"""
    pass


class InvalidAccessTokenError(Exception):
    """Access token is missing or rejected"""
    pass


def is_valid_token(token: Optional[str]) -> bool:
    """
    Access token validation stub.

    Accepts every non-empty token. Replace with a call to the
    account service when one exists.
    """
    return bool(token)


class DirectiveHandler(abc.ABC):
    """
    Shared handler shape.

    Subclasses set namespace, optionally expected_name, and implement
    _handle. The name guard runs before anything else.
    """
    namespace: str = ''
    expected_name: Optional[str] = None

    async def handle(self, directive: Directive, client: httpx.AsyncClient,
                     config: Config) -> Dict[str, Any]:
        if self.expected_name is not None and directive.name != self.expected_name:
            raise UnsupportedDirectiveError(
                f"No supported directive name: {directive.namespace}.{directive.name}"
            )
        return await self._handle(directive, client, config)

    @abc.abstractmethod
    async def _handle(self, directive: Directive, client: httpx.AsyncClient,
                      config: Config) -> Dict[str, Any]:
        ...


class DiscoveryHandler(DirectiveHandler):
    namespace = 'Alexa.Discovery'

    async def _handle(self, directive, client, config):
        token = directive.access_token()
        if not is_valid_token(token):
            message = (f"Discovery Request [{directive.message_id}] failed. "
                       f"Invalid access token: {token}")
            logger.error(message)
            raise InvalidAccessTokenError(message)

        request = build_destination(config, '/discover')
        response = await backend.send(client, request)
        discovered = backend.parse_json(response)

        envelope = build_response(
            self.namespace,
            'Discover.Response',
            {"endpoints": [discovered]},
            directive=directive
        )
        logger.debug(f"Discovery Response: {json.dumps(envelope)}")
        return envelope


class ControlHandler(DirectiveHandler):
    """
    Controller directives.

    A missing or rejected token is answered with an
    InvalidAccessTokenError envelope and no backend call.
    """

    async def _handle(self, directive, client, config):
        token = directive.access_token()
        if not is_valid_token(token):
            logger.error(f"Control Request [{directive.message_id}] failed. "
                         f"Invalid access token: {token}")
            return build_error_response(directive, 'InvalidAccessTokenError')
        return await self._control(directive, client, config)

    @abc.abstractmethod
    async def _control(self, directive: Directive, client: httpx.AsyncClient,
                       config: Config) -> Dict[str, Any]:
        ...


def power_state(name: str) -> str:
    """TurnOn -> ON, TurnOff -> OFF"""
    if name.startswith('Turn'):
        name = name[len('Turn'):]
    return name.upper()


class PowerHandler(ControlHandler):
    namespace = 'Alexa.PowerController'

    async def _control(self, directive, client, config):
        state = power_state(directive.name)
        if not (state.isascii() and state.isalnum()):
            raise InvalidDirectiveError(
                f"No power state in directive name: {directive.name}"
            )

        request = build_destination(config, f"/power/{state}", method='POST')
        await backend.send(client, request)

        return build_response(
            RESPONSE_NAMESPACE,
            RESPONSE_NAME,
            {},
            directive=directive,
            context_property=build_property(
                self.namespace, 'powerState', state, POWER_UNCERTAINTY_MS
            )
        )


def _required_value(directive: Directive, key: str) -> Any:
    value = directive.payload.get(key)
    if value is None:
        raise InvalidDirectiveError(f"directive.payload.{key} is required")
    return value


class BrightnessHandler(ControlHandler):
    namespace = 'Alexa.BrightnessController'
    expected_name = 'setBrightness'

    async def _control(self, directive, client, config):
        brightness = _required_value(directive, 'brightness')
        # goes into the URL path
        if not isinstance(brightness, int) or isinstance(brightness, bool):
            raise InvalidDirectiveError(
                f"directive.payload.brightness must be an integer: {brightness!r}"
            )

        request = build_destination(config, f"/brightness/{brightness}", method='POST')
        await backend.send(client, request)

        return build_response(
            RESPONSE_NAMESPACE,
            RESPONSE_NAME,
            {},
            directive=directive,
            context_property=build_property(
                self.namespace, 'brightness', brightness, BRIGHTNESS_UNCERTAINTY_MS
            )
        )


class ColorHandler(ControlHandler):
    namespace = 'Alexa.ColorController'
    expected_name = 'SetColor'

    async def _control(self, directive, client, config):
        color = _required_value(directive, 'color')

        request = build_destination(config, '/color', method='POST', body=color)
        await backend.send(client, request)

        return build_response(
            RESPONSE_NAMESPACE,
            RESPONSE_NAME,
            {},
            directive=directive,
            context_property=build_property(
                self.namespace, 'color', color, COLOR_UNCERTAINTY_MS
            )
        )

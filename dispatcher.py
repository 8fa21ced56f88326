"""
Dispatcher - single entry point for directives.
Picks a handler by namespace. Awaits one backend call. Nothing more.
"""

import logging
from enum import Enum
from typing import Dict, Any, Optional

import httpx

from config import Config
from directive import Directive
from handlers import (
    DirectiveHandler,
    DiscoveryHandler,
    PowerHandler,
    BrightnessHandler,
    ColorHandler,
)

logger = logging.getLogger(__name__)


class UnsupportedNamespaceError(Exception):
    """No handler registered for the directive namespace"""
    pass


class Namespace(Enum):
    DISCOVERY = 'Alexa.Discovery'
    POWER = 'Alexa.PowerController'
    BRIGHTNESS = 'Alexa.BrightnessController'
    COLOR = 'Alexa.ColorController'
    UNKNOWN = None

    @classmethod
    def parse(cls, value: Optional[str]) -> 'Namespace':
        """Exact match only; anything else is UNKNOWN"""
        for member in cls:
            if member.value is not None and member.value == value:
                return member
        return cls.UNKNOWN


HANDLERS: Dict[Namespace, DirectiveHandler] = {
    Namespace.DISCOVERY: DiscoveryHandler(),
    Namespace.POWER: PowerHandler(),
    Namespace.BRIGHTNESS: BrightnessHandler(),
    Namespace.COLOR: ColorHandler(),
}


class Dispatcher:
    """
    Routes one directive per call.

    Does NOT:
    - Keep state between calls
    - Retry
    - Catch handler failures

    Every call ends in exactly one outcome: an envelope is returned
    or an exception is raised.
    """

    def __init__(self, config: Config,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self.transport = transport

    def handler_for(self, directive: Directive) -> DirectiveHandler:
        handler = HANDLERS.get(Namespace.parse(directive.namespace))
        if handler is None:
            message = f"No supported namespace: {directive.namespace}"
            logger.error(message)
            raise UnsupportedNamespaceError(message)
        return handler

    async def dispatch(self, event: Dict[str, Any]) -> Dict[str, Any]:
        directive = Directive.from_event(event)
        handler = self.handler_for(directive)

        logger.info(f"Dispatching {directive.namespace}.{directive.name}: {directive.message_id}")

        async with httpx.AsyncClient(transport=self.transport) as client:
            response = await handler.handle(directive, client, self.config)

        logger.info(f"Dispatched {directive.namespace}.{directive.name}: {directive.message_id}")
        return response

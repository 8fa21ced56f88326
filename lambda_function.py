"""
Lambda entry point for the Alexa Smart Home skill.

Every directive from the platform lands here:
- Parsed and routed by namespace
- Translated into one smart tree backend call
- Answered with an Alexa envelope, or failed by raising

Logs identify each transition.
"""

import sys
import json
import asyncio
import logging
from typing import Dict, Any

from config import Config
from dispatcher import Dispatcher
from metrics import MetricsPublisher

# Environment, read once per container
CONFIG = Config.from_env()

# Configure logging
logging.basicConfig(
    level=CONFIG.log_level,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s'
)
logger = logging.getLogger(__name__)

DISPATCHER = Dispatcher(CONFIG)
METRICS = MetricsPublisher(CONFIG.metrics_namespace)


def _namespace_of(event: Any) -> str:
    try:
        return event['directive']['header']['namespace']
    except (KeyError, TypeError):
        return 'unknown'


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda entry point.

    Success: the envelope is returned.
    Failure: the exception is logged and re-raised, so the platform
    receives exactly one error and no envelope.
    """
    namespace = _namespace_of(event)
    logger.info(f"Lambda invoked, namespace: {namespace}")
    logger.debug(f"Request: {json.dumps(event, default=str)}")

    try:
        response = asyncio.run(DISPATCHER.dispatch(event))
    except Exception as e:
        logger.error(f"Directive failed: {e}", exc_info=True)
        METRICS.publish('DirectiveFailed', dimensions={'Namespace': namespace})
        raise

    METRICS.publish('DirectiveSucceeded', dimensions={'Namespace': namespace})
    logger.debug(f"Response: {json.dumps(response)}")
    return response


if __name__ == '__main__':
    # Local testing: python lambda_function.py event.json
    if len(sys.argv) != 2:
        print("usage: python lambda_function.py <event.json>", file=sys.stderr)
        sys.exit(2)

    with open(sys.argv[1]) as f:
        test_event = json.load(f)

    result = lambda_handler(test_event, None)
    print(json.dumps(result, indent=2))

from datetime import datetime

from directive import Directive
from response_envelope import (
    build_response,
    build_property,
    build_error_response,
    generate_message_id,
)
from conftest import make_event, ENDPOINT


def test_message_ids_are_unique():
    ids = {generate_message_id() for _ in range(100)}
    assert len(ids) == 100


def test_response_copies_correlation_token_and_endpoint():
    directive = Directive.from_event(
        make_event('Alexa.PowerController', 'TurnOn', endpoint=ENDPOINT))

    response = build_response('Alexa', 'Response', {}, directive=directive)

    header = response['event']['header']
    assert header['correlationToken'] == 'corr-token-1'
    assert header['payloadVersion'] == '3'
    assert header['messageId'] != directive.message_id
    assert response['event']['endpoint'] == ENDPOINT
    assert response['event']['payload'] == {}
    assert 'context' not in response


def test_response_without_correlation_token():
    directive = Directive.from_event(
        make_event('Alexa.Discovery', 'Discover', correlation_token=None))

    response = build_response('Alexa.Discovery', 'Discover.Response',
                              {'endpoints': []}, directive=directive)

    assert 'correlationToken' not in response['event']['header']
    assert 'endpoint' not in response['event']


def test_context_property():
    prop = build_property('Alexa.BrightnessController', 'brightness', 42, 1000)

    response = build_response('Alexa', 'Response', {}, context_property=prop)

    properties = response['context']['properties']
    assert len(properties) == 1
    assert properties[0]['namespace'] == 'Alexa.BrightnessController'
    assert properties[0]['name'] == 'brightness'
    assert properties[0]['value'] == 42
    assert properties[0]['uncertaintyInMilliseconds'] == 1000
    assert properties[0]['timeOfSample'].endswith('Z')
    datetime.fromisoformat(properties[0]['timeOfSample'][:-1])


def test_error_response():
    directive = Directive.from_event(make_event('Alexa.PowerController', 'TurnOn'))

    response = build_error_response(directive, 'InvalidAccessTokenError')

    header = response['event']['header']
    assert header['name'] == 'InvalidAccessTokenError'
    assert header['namespace'] == 'Alexa.ConnectedHome.Control'
    assert header['correlationToken'] == 'corr-token-1'
    assert response['event']['payload'] == {}

# src/lambda_lessons/handlers/gateway.py

"""
API Gateway proxy handlers for the greeting lesson.

The same greeting logic as `hello.greeting_handler`, but the request arrives
inside an API Gateway proxy event (JSON body or query string) and the reply
is a proxy response carrying the message that the gateway integration
template used to build.
"""

import binascii
import json

import pydantic
from aws_lambda_powertools import Logger, Tracer
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from ..config import get_config
from ..exceptions import InvalidRequestError, get_error_context
from ..schemas import GreetingInput, GreetingMessage, GreetingOutput, WireModel

CONFIG = get_config()

logger = Logger(service=CONFIG.service_name, level=CONFIG.log_level)
tracer = Tracer(service=CONFIG.service_name)

JSON_HEADERS = {"Content-Type": "application/json"}


def build_proxy_response(status_code: int, payload: WireModel) -> dict:
    """Serializes *payload* into the proxy response shape API Gateway expects."""
    return {
        "statusCode": status_code,
        "headers": dict(JSON_HEADERS),
        "body": json.dumps(payload.to_wire()),
    }


def _greet(greeting: GreetingInput) -> dict:
    logger.info(f"Hello {greeting.name}, you are now {greeting.age}")
    output = GreetingOutput.from_input(greeting)
    return build_proxy_response(200, GreetingMessage.from_output(output))


def _bad_request(error: InvalidRequestError) -> dict:
    logger.warning(
        f"Rejected request: {error}", extra={"error": get_error_context(error)}
    )
    return build_proxy_response(400, GreetingMessage(message=error.message))


def parse_body(event: APIGatewayProxyEvent) -> GreetingInput:
    try:
        body = event.decoded_body
    except (binascii.Error, UnicodeDecodeError) as e:
        raise InvalidRequestError(
            "Request body must be valid base64-encoded UTF-8 text",
            context={"decode_error": str(e)},
        ) from e
    if not body:
        raise InvalidRequestError("Request body is required")
    try:
        return GreetingInput.model_validate_json(body)
    except pydantic.ValidationError as e:
        raise InvalidRequestError(
            "Request body must be JSON with a Name and an integer Age",
            context={"validation_errors": e.errors(include_url=False)},
        ) from e


def parse_query(event: APIGatewayProxyEvent) -> GreetingInput:
    params = event.query_string_parameters or {}
    try:
        return GreetingInput.model_validate(params)
    except pydantic.ValidationError as e:
        raise InvalidRequestError(
            "Query string must carry a name and an integer age",
            context={"validation_errors": e.errors(include_url=False)},
        ) from e


@logger.inject_lambda_context()
@tracer.capture_lambda_handler
@event_source(data_class=APIGatewayProxyEvent)
def body_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """Greets the caller described by the JSON request body."""
    try:
        greeting = parse_body(event)
    except InvalidRequestError as e:
        return _bad_request(e)
    return _greet(greeting)


@logger.inject_lambda_context()
@tracer.capture_lambda_handler
@event_source(data_class=APIGatewayProxyEvent)
def query_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """Greets the caller described by the ``name`` and ``age`` query parameters."""
    try:
        greeting = parse_query(event)
    except InvalidRequestError as e:
        return _bad_request(e)
    return _greet(greeting)

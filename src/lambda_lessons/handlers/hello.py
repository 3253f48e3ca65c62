# src/lambda_lessons/handlers/hello.py

"""
The first lesson handlers: a fixed greeting, a raw-text echo (with and
without logging), and a typed JSON request/response mapping.

Handler paths:
    lambda_lessons.handlers.hello.hello_handler
    lambda_lessons.handlers.hello.echo_handler
    lambda_lessons.handlers.hello.logged_echo_handler
    lambda_lessons.handlers.hello.greeting_handler
"""

import json
from typing import Any

import pydantic
from aws_lambda_powertools import Logger, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from ..config import get_config
from ..exceptions import InvalidRequestError
from ..schemas import GreetingInput, GreetingOutput

CONFIG = get_config()

logger = Logger(service=CONFIG.service_name, level=CONFIG.log_level)
tracer = Tracer(service=CONFIG.service_name)


def _payload_text(event: Any) -> str:
    """
    Recovers the raw invocation payload as text. A JSON string payload arrives
    already decoded; anything else is re-serialized to the text that was sent.
    """
    if isinstance(event, bytes):
        return event.decode("utf-8")
    if isinstance(event, str):
        return event
    return json.dumps(event, ensure_ascii=False)


def hello_handler(event: Any, context: LambdaContext) -> str:
    return "Hello Lambda!"


def echo_handler(event: Any, context: LambdaContext) -> str:
    return f"Hello {_payload_text(event)}!"


@logger.inject_lambda_context()
def logged_echo_handler(event: Any, context: LambdaContext) -> str:
    text = _payload_text(event)
    logger.info(f"Received input: {text}")
    return f"Hello {text}!"


@logger.inject_lambda_context()
@tracer.capture_lambda_handler
def greeting_handler(event: dict, context: LambdaContext) -> dict:
    """Maps ``{"Name", "Age"}`` to ``{"Name", "Old"}``."""
    try:
        greeting = GreetingInput.model_validate(event)
    except pydantic.ValidationError as e:
        logger.warning(
            "Invalid greeting request.",
            extra={"validation_errors": e.errors(include_url=False)},
        )
        raise InvalidRequestError(
            "Greeting request must carry a Name and an integer Age",
            context={"validation_errors": e.errors(include_url=False)},
        ) from e

    logger.info(f"Hello {greeting.name}, you are now {greeting.age}")
    return GreetingOutput.from_input(greeting).to_wire()

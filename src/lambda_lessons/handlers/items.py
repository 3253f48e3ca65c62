# src/lambda_lessons/handlers/items.py

"""
CRUD handlers over the items table.

Each invocation builds its own `DynamoDbRepository` against the table named
by the ``TableName`` environment variable, performs one store call, and
returns the result. Store failures are logged and re-raised so that the
invocation itself fails.

Handler paths:
    lambda_lessons.handlers.items.get_handler
    lambda_lessons.handlers.items.put_handler
    lambda_lessons.handlers.items.delete_handler
"""

from typing import Any

import pydantic
from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext
from botocore.exceptions import BotoCoreError, ClientError

from ..clients import get_dynamodb_client
from ..config import get_config
from ..exceptions import InvalidRequestError
from ..repository import DynamoDbRepository
from ..schemas import ItemRequest, Result

CONFIG = get_config()

logger = Logger(service=CONFIG.service_name, level=CONFIG.log_level)
tracer = Tracer(service=CONFIG.service_name)
metrics = Metrics(namespace=CONFIG.metrics_namespace, service=CONFIG.service_name)


def _repository() -> DynamoDbRepository:
    table_name = get_config().table_name
    logger.info(f"Using table {table_name}")
    return DynamoDbRepository(table_name, dynamodb_client=get_dynamodb_client())


def _item_id(event: Any) -> str:
    """The delete payload is the bare id, or an object carrying ``Id``."""
    if isinstance(event, dict):
        event = event.get("Id", event.get("id"))
    if not isinstance(event, str) or not event:
        raise InvalidRequestError(
            "Delete request must be a non-empty item id",
            context={"payload_type": type(event).__name__},
        )
    return event


@logger.inject_lambda_context()
@tracer.capture_lambda_handler
@metrics.log_metrics(capture_cold_start_metric=True)
def get_handler(event: Any, context: LambdaContext) -> list[dict]:
    """Lists every stored item."""
    repository = _repository()
    try:
        items = repository.get_items()
    except (ClientError, BotoCoreError):
        logger.exception(
            "Failed to list items.", extra={"table": repository.table_name}
        )
        raise

    metrics.add_metric(name="ItemsListed", unit=MetricUnit.Count, value=len(items))
    return [item.to_wire() for item in items]


@logger.inject_lambda_context()
@tracer.capture_lambda_handler
@metrics.log_metrics(capture_cold_start_metric=True)
def put_handler(event: dict, context: LambdaContext) -> dict:
    """Stores the item in the event, replacing any item with the same id."""
    try:
        item = ItemRequest.model_validate(event)
    except pydantic.ValidationError as e:
        logger.warning(
            "Invalid item payload.",
            extra={"validation_errors": e.errors(include_url=False)},
        )
        metrics.add_metric(name="RejectedRequests", unit=MetricUnit.Count, value=1)
        raise InvalidRequestError(
            "Item must carry a non-empty Id and a Name",
            context={"validation_errors": e.errors(include_url=False)},
        ) from e

    repository = _repository()
    try:
        result = repository.add_item(item)
    except (ClientError, BotoCoreError):
        logger.exception(
            "Failed to add item.",
            extra={"table": repository.table_name, "item_id": item.id},
        )
        raise
    logger.info(f"Result = {result}")

    metrics.add_metric(
        name="ItemsAdded" if result else "FailedWrites",
        unit=MetricUnit.Count,
        value=1,
    )
    return Result(success=result).to_wire()


@logger.inject_lambda_context()
@tracer.capture_lambda_handler
@metrics.log_metrics(capture_cold_start_metric=True)
def delete_handler(event: Any, context: LambdaContext) -> dict:
    """Removes the item with the given id; a missing item still succeeds."""
    try:
        item_id = _item_id(event)
    except InvalidRequestError as e:
        logger.warning(f"Rejected delete request: {e}")
        metrics.add_metric(name="RejectedRequests", unit=MetricUnit.Count, value=1)
        raise

    repository = _repository()
    try:
        result = repository.remove_item(item_id)
    except (ClientError, BotoCoreError):
        logger.exception(
            "Failed to remove item.",
            extra={"table": repository.table_name, "item_id": item_id},
        )
        raise
    logger.info(f"Result = {result}")

    metrics.add_metric(
        name="ItemsRemoved" if result else "FailedWrites",
        unit=MetricUnit.Count,
        value=1,
    )
    return Result(success=result).to_wire()

# src/lambda_lessons/clients.py

"""
Factory for the boto3 DynamoDB client shared by warm invocations.

The client is built once per execution environment and handed to each
repository explicitly, so tests can pass a stubbed or mocked client instead.
"""

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

import boto3

if TYPE_CHECKING:
    from mypy_boto3_dynamodb.client import DynamoDBClient

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_dynamodb_client() -> "DynamoDBClient":
    """Returns the process-wide DynamoDB client, creating it on first use."""
    logger.debug("Creating DynamoDB client")
    return boto3.client("dynamodb")

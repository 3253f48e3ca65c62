"""
Shared fixtures for unit tests.
"""

from __future__ import annotations

import json
import os
import types
import uuid

import boto3
import pytest
from moto import mock_aws

# Handler modules read configuration at import time, so the environment must
# be in place before test modules are collected.
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "lambda-lessons-test")
os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "LambdaLessonsTest")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")

from lambda_lessons.config import get_config  # noqa: E402

TABLE_NAME = "items-test"


@pytest.fixture(autouse=True)
def _table_env(monkeypatch):
    """Points every test at the test table and drops any cached configuration."""
    monkeypatch.setenv("TableName", TABLE_NAME)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def lambda_context():
    """A small stand-in for the LambdaContext object."""
    return types.SimpleNamespace(
        function_name="lambda-lessons-test",
        memory_limit_in_mb=128,
        aws_request_id="req-" + uuid.uuid4().hex,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:dummy",
        get_remaining_time_in_millis=lambda: 30000,
    )


@pytest.fixture
def dynamodb_client():
    """A moto-backed DynamoDB client with the items table and its GSI1 index."""
    with mock_aws():
        client = boto3.client("dynamodb", region_name="us-east-1")
        client.create_table(
            TableName=TABLE_NAME,
            BillingMode="PAY_PER_REQUEST",
            AttributeDefinitions=[
                {"AttributeName": "PK", "AttributeType": "S"},
                {"AttributeName": "SK", "AttributeType": "S"},
                {"AttributeName": "GSI1", "AttributeType": "S"},
            ],
            KeySchema=[
                {"AttributeName": "PK", "KeyType": "HASH"},
                {"AttributeName": "SK", "KeyType": "RANGE"},
            ],
            GlobalSecondaryIndexes=[
                {
                    "IndexName": "GSI1",
                    "KeySchema": [{"AttributeName": "GSI1", "KeyType": "HASH"}],
                    "Projection": {"ProjectionType": "ALL"},
                }
            ],
        )
        yield client


# ---------- Minimal, realistic API Gateway proxy events ---------- #
def _proxy_event(
    body: str | None = None, query: dict[str, str] | None = None
) -> dict:
    return {
        "resource": "/hello",
        "path": "/hello",
        "httpMethod": "POST" if body is not None else "GET",
        "headers": {"Content-Type": "application/json"},
        "multiValueHeaders": {},
        "queryStringParameters": query,
        "multiValueQueryStringParameters": None,
        "pathParameters": None,
        "stageVariables": None,
        "requestContext": {
            "accountId": "000000000000",
            "apiId": "dummy",
            "httpMethod": "POST" if body is not None else "GET",
            "requestId": str(uuid.uuid4()),
            "stage": "test",
            "identity": {"sourceIp": "127.0.0.1"},
        },
        "body": body,
        "isBase64Encoded": False,
    }


@pytest.fixture
def body_event():
    """A POST carrying the greeting request as its JSON body."""
    return _proxy_event(body=json.dumps({"Name": "Abel", "Age": 33}))


@pytest.fixture
def query_event():
    """A GET carrying the greeting request in its query string."""
    return _proxy_event(query={"name": "Abel", "age": "33"})


@pytest.fixture
def make_proxy_event():
    return _proxy_event

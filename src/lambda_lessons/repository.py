# src/lambda_lessons/repository.py

"""
Single-table DynamoDB repository for `Item` records.

Every record is stored as one item keyed by a composite partition/sort key
derived from its id. A denormalized ``GSI1`` attribute, constant for all
records, backs the ``GSI1`` index so that listing every item is a query
rather than a table scan::

    PK   = "ITEM#<id>"
    SK   = "METADATA#<id>"
    GSI1 = "ITEM"
    Id   = <id>
    Name = <name>

Store errors are not caught here; they reach the caller unchanged.
"""

import logging
from typing import TYPE_CHECKING, Any, Mapping

from boto3.dynamodb.types import TypeDeserializer, TypeSerializer

from .schemas import Item

if TYPE_CHECKING:
    from mypy_boto3_dynamodb.client import DynamoDBClient

logger = logging.getLogger(__name__)

PK_PREFIX = "ITEM"
SK_PREFIX = "METADATA"
GSI1_INDEX_NAME = "GSI1"

_serializer = TypeSerializer()
_deserializer = TypeDeserializer()


def item_key(item_id: str) -> dict[str, str]:
    """Composite primary key for the record with *item_id*."""
    return {
        "PK": f"{PK_PREFIX}#{item_id}",
        "SK": f"{SK_PREFIX}#{item_id}",
    }


def to_item(item: Item) -> dict[str, str]:
    """Maps a record to its stored representation."""
    return {
        **item_key(item.id),
        "Id": item.id,
        "Name": item.name,
        # for the GSI1 "list all" query
        "GSI1": PK_PREFIX,
    }


def to_record(raw: Mapping[str, Any]) -> Item:
    """Inverse of `to_item`; the key attributes are ignored."""
    return Item(id=raw["Id"], name=raw["Name"])


def _serialize(plain: Mapping[str, Any]) -> dict[str, Any]:
    return {key: _serializer.serialize(value) for key, value in plain.items()}


def _deserialize(attributes: Mapping[str, Any]) -> dict[str, Any]:
    return {key: _deserializer.deserialize(value) for key, value in attributes.items()}


def _succeeded(response: Mapping[str, Any]) -> bool:
    return response.get("ResponseMetadata", {}).get("HTTPStatusCode") == 200


class DynamoDbRepository:
    """
    List, add and remove `Item` records in a single DynamoDB table.
    """

    def __init__(self, table_name: str | None, dynamodb_client: "DynamoDBClient"):
        """
        Args:
            table_name: Name of the target table. Not validated; DynamoDB
                reports a missing or unknown table on first use.
            dynamodb_client: A low-level boto3 DynamoDB client.
        """
        self._table_name = table_name
        self._client = dynamodb_client

    @property
    def table_name(self) -> str | None:
        return self._table_name

    def get_items(self) -> list[Item]:
        """Returns every record, in whatever order the index yields them."""
        response = self._client.query(
            TableName=self._table_name,
            IndexName=GSI1_INDEX_NAME,
            KeyConditionExpression="GSI1 = :pk_prefix",
            ExpressionAttributeValues={":pk_prefix": {"S": PK_PREFIX}},
        )
        items = [to_record(_deserialize(raw)) for raw in response.get("Items", [])]
        logger.debug(
            "Queried items", extra={"table": self._table_name, "count": len(items)}
        )
        return items

    def add_item(self, item: Item) -> bool:
        """
        Writes *item*, overwriting any record with the same id.
        Returns True iff DynamoDB acknowledged the write.
        """
        response = self._client.put_item(
            TableName=self._table_name,
            Item=_serialize(to_item(item)),
        )
        success = _succeeded(response)
        if not success:
            logger.warning(
                "PutItem was not acknowledged",
                extra={"table": self._table_name, "item_id": item.id},
            )
        return success

    def remove_item(self, item_id: str) -> bool:
        """
        Deletes the record with *item_id*. Deleting an id that was never
        stored is acknowledged like any other delete and returns True.
        """
        response = self._client.delete_item(
            TableName=self._table_name,
            Key=_serialize(item_key(item_id)),
        )
        success = _succeeded(response)
        if not success:
            logger.warning(
                "DeleteItem was not acknowledged",
                extra={"table": self._table_name, "item_id": item_id},
            )
        return success

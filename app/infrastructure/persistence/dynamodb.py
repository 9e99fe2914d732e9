"""DynamoDB mapping store implementation."""

from typing import Any, Optional

import boto3  # type: ignore
from botocore.exceptions import BotoCoreError, ClientError  # type: ignore
from starlette.concurrency import run_in_threadpool

from infrastructure.logging import get_module_logger
from infrastructure.persistence.mapping_store import MappingStore

logger = get_module_logger()

# DynamoDB table layout
PARTITION_KEY = "mapping_key"
VALUE_ATTRIBUTE = "mapping_value"


class DynamoDBMappingStore(MappingStore):
    """DynamoDB-backed mapping store.

    Uses a single table with:
    - PK: mapping_key (string)
    - Attributes: mapping_value (string)

    Each mapping direction is an independent item, so a crash between two
    writes can leave one direction without the other.

    boto3 is synchronous; calls run in the threadpool so request handling
    stays on the event loop.
    """

    def __init__(
        self,
        table_name: str,
        region: str,
        endpoint_url: Optional[str] = None,
        client: Any = None,
    ):
        """Initialize DynamoDB mapping store.

        Args:
            table_name: DynamoDB table name.
            region: AWS region of the table.
            endpoint_url: Optional endpoint override (local DynamoDB).
            client: Optional pre-built boto3 DynamoDB client (tests).
        """
        self.table_name = table_name
        self._client = client or boto3.client(
            "dynamodb", region_name=region, endpoint_url=endpoint_url
        )
        logger.info(
            "initialized_dynamodb_mapping_store",
            table_name=table_name,
            region=region,
        )

    async def get(self, key: str) -> Optional[str]:
        response = await run_in_threadpool(
            self._call,
            "get_item",
            key,
            Key={PARTITION_KEY: {"S": key}},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return item.get(VALUE_ATTRIBUTE, {}).get("S")

    async def put(self, key: str, value: str) -> None:
        await run_in_threadpool(
            self._call,
            "put_item",
            key,
            Item={PARTITION_KEY: {"S": key}, VALUE_ATTRIBUTE: {"S": value}},
        )

    async def delete(self, key: str) -> None:
        await run_in_threadpool(
            self._call,
            "delete_item",
            key,
            Key={PARTITION_KEY: {"S": key}},
        )

    def _call(self, method: str, key: str, **kwargs) -> dict:
        try:
            return getattr(self._client, method)(TableName=self.table_name, **kwargs)
        except (BotoCoreError, ClientError) as e:
            # Callers do not handle store failures
            logger.error(
                "mapping_store_call_failed",
                method=method,
                key=key,
                error=str(e),
            )
            raise

"""DynamoDB-backed record store (table keyed by `id`)."""

import asyncio
from decimal import Decimal

from src.errors import ConfigurationError, ConflictError, NotFoundError, UnavailableError
from src.logging.request_log import get_logger
from src.records.models import utc_timestamp
from src.records.store import RecordStore, duplicate_id_message


def _to_dynamo(value):
    """boto3 rejects float; store numbers as Decimal."""
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, dict):
        return {k: _to_dynamo(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_to_dynamo(v) for v in value]
    return value


def _from_dynamo(value):
    """Turn the Decimals boto3 hands back into JSON-friendly int/float."""
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, dict):
        return {k: _from_dynamo(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_from_dynamo(v) for v in value]
    return value


def _error_code(e: Exception) -> str:
    if isinstance(getattr(e, "response", None), dict):
        return e.response.get("Error", {}).get("Code", "")
    return type(e).__name__


class DynamoDBRecordStore(RecordStore):
    """Stores records in a DynamoDB table whose partition key is `id`."""

    def __init__(self, table_name: str, region: str = "us-east-2", endpoint_url: str = ""):
        self._table_name = table_name
        self._region = region
        self._endpoint_url = endpoint_url
        self._table = None

    def _get_table(self):
        """Lazy-init boto3 Table resource."""
        if not self._table_name:
            raise ConfigurationError(
                "La variable de entorno RECORDS_TABLE no está configurada"
            )
        if self._table is None:
            import boto3

            kwargs = {"region_name": self._region}
            if self._endpoint_url:
                kwargs["endpoint_url"] = self._endpoint_url
            dynamodb = boto3.resource("dynamodb", **kwargs)
            self._table = dynamodb.Table(self._table_name)
        return self._table

    async def _call(self, operation: str, method: str, **kwargs) -> dict:
        """Run a blocking Table method off the event loop, mapping AWS errors."""
        from botocore.exceptions import BotoCoreError, ClientError

        table = self._get_table()
        try:
            return await asyncio.to_thread(getattr(table, method), **kwargs)
        except ClientError as e:
            if _error_code(e) == "ConditionalCheckFailedException":
                raise
            get_logger().error(
                "DynamoDB call failed",
                extra={"log_data": {"operation": operation, "error_code": _error_code(e)}},
            )
            raise UnavailableError(f"Error al {operation} en DynamoDB: {e}")
        except BotoCoreError as e:
            get_logger().error(
                "DynamoDB unreachable",
                extra={"log_data": {"operation": operation, "error": str(e)}},
            )
            raise UnavailableError(f"Error al {operation} en DynamoDB: {e}")

    async def create(self, record: dict) -> dict:
        from botocore.exceptions import ClientError

        try:
            await self._call(
                "guardar",
                "put_item",
                Item=_to_dynamo(record),
                ConditionExpression="attribute_not_exists(id)",
            )
        except ClientError:
            raise ConflictError(duplicate_id_message(record["id"]))
        return record

    async def get(self, record_id: str) -> dict | None:
        resp = await self._call("consultar", "get_item", Key={"id": record_id})
        item = resp.get("Item")
        if not item:
            return None
        return _from_dynamo(item)

    async def scan(self, limit: int = 50) -> list[dict]:
        resp = await self._call("consultar", "scan", Limit=limit)
        return [_from_dynamo(item) for item in resp.get("Items", [])]

    async def update(self, record_id: str, changes: dict) -> dict:
        from botocore.exceptions import ClientError

        fields = {k: v for k, v in changes.items() if k != "id"}
        fields["actualizado"] = utc_timestamp()

        names = {}
        values = {}
        assignments = []
        for index, (key, value) in enumerate(fields.items()):
            names[f"#attr{index}"] = key
            values[f":val{index}"] = _to_dynamo(value)
            assignments.append(f"#attr{index} = :val{index}")

        try:
            resp = await self._call(
                "actualizar",
                "update_item",
                Key={"id": record_id},
                UpdateExpression="SET " + ", ".join(assignments),
                ConditionExpression="attribute_exists(id)",
                ExpressionAttributeNames=names,
                ExpressionAttributeValues=values,
                ReturnValues="ALL_NEW",
            )
        except ClientError:
            raise NotFoundError(f"No se encontró el personaje con ID {record_id}")
        return _from_dynamo(resp.get("Attributes", {}))

    async def delete(self, record_id: str) -> bool:
        await self._call("eliminar", "delete_item", Key={"id": record_id})
        return True

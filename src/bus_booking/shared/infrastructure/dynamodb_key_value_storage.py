import os
from datetime import datetime, timezone

import boto3

from bus_booking.shared.infrastructure.key_value_storage import KeyValueStorage


class DynamoDBKeyValueStorage(KeyValueStorage):
    """DynamoDB を使用した KeyValueStorage の具象実装

    1キー = 1アイテム。値は JSON 文字列のまま payload 属性に格納する。
    """

    SORT_KEY = "RECORDS"

    def __init__(self, table_name: str | None = None, table=None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        if table is None:
            self.dynamodb = boto3.resource("dynamodb")
            table = self.dynamodb.Table(self.table_name)
        self.table = table

    def get_item(self, key: str) -> str | None:
        """キーに対応する値を取得する"""
        response = self.table.get_item(
            Key={"PK": f"COLLECTION#{key}", "SK": self.SORT_KEY},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        payload = item.get("payload")
        return payload if isinstance(payload, str) else None

    def set_item(self, key: str, value: str) -> None:
        """値を丸ごと上書きする"""
        self.table.put_item(
            Item={
                "PK": f"COLLECTION#{key}",
                "SK": self.SORT_KEY,
                "entity_type": "COLLECTION",
                "collection": key,
                "payload": value,
                "updated_at": datetime.now(timezone.utc).isoformat(),
            }
        )

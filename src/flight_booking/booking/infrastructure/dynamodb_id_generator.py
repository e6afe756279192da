class DynamoDBIdGenerator:
    """DynamoDB のアトミックカウンターで連番IDを採番する

    カウンターは PK="COUNTER#<エンティティ種別>" のアイテムに保持する。
    """

    def __init__(self, table) -> None:
        self.table = table

    def next_id(self, entity_type: str) -> int:
        """次のIDを採番する（1から始まる）"""
        response = self.table.update_item(
            Key={"PK": f"COUNTER#{entity_type}", "SK": "COUNTER"},
            UpdateExpression="ADD #value :increment",
            ExpressionAttributeNames={"#value": "value"},
            ExpressionAttributeValues={":increment": 1},
            ReturnValues="UPDATED_NEW",
        )
        return int(response["Attributes"]["value"])

class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class DuplicateResourceException(DomainException):
    """新規採番したIDのアイテムが既に存在する場合（条件付き書き込みの失敗）"""

    def __init__(self, entity: str, entity_id: object) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} already exists: {entity_id}")


class OptimisticLockException(DomainException):
    """保存済みの値が、読み込み時点の値（expected）と異なる場合

    actual はストアが現在値を返せる場合のみ設定される。
    """

    def __init__(
        self,
        entity: str,
        entity_id: object,
        field: str,
        expected: object,
        actual: object = None,
    ) -> None:
        self.entity = entity
        self.entity_id = entity_id
        self.field = field
        self.expected = expected
        self.actual = actual

        message = f"{entity} {field} conflict: expected {expected}"
        if actual is not None:
            message += f", actual {actual}"
        super().__init__(f"{message}, {entity.lower()}_id={entity_id}")

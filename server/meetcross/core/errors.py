from __future__ import annotations


class GatewayError(Exception):
    """A list/save/delete against the backing store failed."""

    code = "operation_failed"


class RecordNotFoundError(GatewayError):
    code = "not_found"

    def __init__(self, entity: str, record_id: object) -> None:
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} {record_id} not found")


class InvalidRecordError(GatewayError):
    code = "invalid_record"


class SelfDeletionError(InvalidRecordError):
    code = "self_deletion"

    def __init__(self) -> None:
        super().__init__("You cannot delete your own user profile.")


class AuthError(Exception):
    """Structured identity-provider failure."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Iterable, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from meetcross.core.db import transaction
from meetcross.core.errors import GatewayError, InvalidRecordError, RecordNotFoundError

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)
ResultT = TypeVar("ResultT")


class EntityGateway(Generic[RecordT]):
    """Upsert-by-key CRUD for one table.

    An empty ``id`` on save inserts and lets the store assign the key; any other
    value must name an existing row, which is then overwritten field by field.
    """

    def __init__(
        self,
        model: Type[Any],
        record_type: Type[RecordT],
        *,
        entity: str,
        order_by: Iterable[Any] = (),
        read_only: Iterable[str] = (),
    ) -> None:
        self.model = model
        self.record_type = record_type
        self.entity = entity
        self.order_by = tuple(order_by)
        self.read_only = {"id", *read_only}

    def read(self, operation: str, fn: Callable[[], ResultT]) -> ResultT:
        try:
            return fn()
        except SQLAlchemyError as exc:
            raise self._failure(operation, exc) from exc

    def write(self, db: Session, operation: str, fn: Callable[[], ResultT]) -> ResultT:
        try:
            with transaction(db):
                return fn()
        except SQLAlchemyError as exc:
            raise self._failure(operation, exc) from exc

    def list(self, db: Session) -> list[RecordT]:
        def _query() -> list[Any]:
            query = db.query(self.model)
            if self.order_by:
                query = query.order_by(*self.order_by)
            return query.all()

        return [self.to_record(row) for row in self.read("list", _query)]

    def load(self, db: Session, record_id: Any) -> Any:
        if record_id in (None, ""):
            raise RecordNotFoundError(self.entity, record_id)
        row = self.read("load", lambda: db.get(self.model, record_id))
        if row is None:
            raise RecordNotFoundError(self.entity, record_id)
        return row

    def get(self, db: Session, record_id: Any) -> RecordT:
        return self.to_record(self.load(db, record_id))

    def save(self, db: Session, record: RecordT) -> RecordT:
        def _upsert() -> Any:
            self.validate(db, record)
            if record.id:
                row = self.load(db, record.id)
            else:
                row = self.model()
                db.add(row)
            self.apply(db, row, record)
            db.flush()
            return row

        row = self.write(db, "save", _upsert)
        logger.info("record_saved", extra={"entity": self.entity, "record_id": row.id, "inserted": not record.id})
        return self.to_record(row)

    def delete(self, db: Session, record_id: Any) -> None:
        def _delete() -> None:
            row = self.load(db, record_id)
            self.before_delete(db, row)
            db.delete(row)

        self.write(db, "delete", _delete)
        logger.info("record_deleted", extra={"entity": self.entity, "record_id": record_id})

    def validate(self, db: Session, record: RecordT) -> None:
        """Reject records whose references do not resolve."""

    def apply(self, db: Session, row: Any, record: RecordT) -> None:
        for field, value in record.dict(exclude=self.read_only).items():
            setattr(row, field, value)

    def before_delete(self, db: Session, row: Any) -> None:
        pass

    def to_record(self, row: Any) -> RecordT:
        return self.record_type.from_orm(row)

    def require_reference(self, db: Session, model: Type[Any], record_id: Any, label: str) -> None:
        if record_id is None:
            return
        if db.get(model, record_id) is None:
            raise InvalidRecordError(f"{label} {record_id} does not exist")

    def _failure(self, operation: str, exc: Exception) -> GatewayError:
        logger.exception("gateway_operation_failed", extra={"entity": self.entity, "operation": operation})
        return GatewayError(f"Could not {operation} {self.entity}: {exc.__class__.__name__}")

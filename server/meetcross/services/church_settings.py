from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from meetcross.core.config import settings
from meetcross.models.church_settings import SETTINGS_ROW_ID, ChurchSettings
from meetcross.schemas.church_settings import ChurchSettingsRecord
from meetcross.services.gateway import EntityGateway

logger = logging.getLogger(__name__)

church_settings = EntityGateway(ChurchSettings, ChurchSettingsRecord, entity="Settings")


def default_settings() -> ChurchSettingsRecord:
    return ChurchSettingsRecord(
        name=settings.DEFAULT_CHURCH_NAME,
        address="",
        email="",
        phone="",
        currency=settings.DEFAULT_CURRENCY,
    )


def get_settings(db: Session) -> ChurchSettingsRecord:
    row = church_settings.read("load", lambda: db.get(ChurchSettings, SETTINGS_ROW_ID))
    if row is None:
        return default_settings()
    return church_settings.to_record(row)


def save_settings(db: Session, record: ChurchSettingsRecord) -> ChurchSettingsRecord:
    def _upsert() -> ChurchSettings:
        row = db.get(ChurchSettings, SETTINGS_ROW_ID)
        if row is None:
            row = ChurchSettings(id=SETTINGS_ROW_ID)
            db.add(row)
        for field, value in record.dict().items():
            setattr(row, field, value)
        db.flush()
        return row

    row = church_settings.write(db, "save", _upsert)
    logger.info("church_settings_saved", extra={"name": row.name})
    return church_settings.to_record(row)

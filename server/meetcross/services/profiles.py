from __future__ import annotations

import logging
from urllib.parse import urlencode

from sqlalchemy.orm import Session

from meetcross.auth.identity import AuthUser
from meetcross.core.config import settings
from meetcross.core.errors import InvalidRecordError, SelfDeletionError
from meetcross.models.church_settings import SETTINGS_ROW_ID, ChurchSettings
from meetcross.models.profile import Profile
from meetcross.schemas.profile import ProfileRecord
from meetcross.services.church_settings import default_settings
from meetcross.services.gateway import EntityGateway

logger = logging.getLogger(__name__)

ADMIN_ROLE = "Admin"

profiles = EntityGateway(Profile, ProfileRecord, entity="Profile")


def avatar_url(name: str) -> str:
    return f"{settings.AVATAR_SERVICE_URL}?{urlencode({'name': name, 'background': 'random'})}"


def placeholder_profile(user: AuthUser) -> ProfileRecord:
    """Stand-in for an account whose profile row has not been provisioned yet."""

    name = user.email.split("@")[0] or user.email
    return ProfileRecord(
        id=user.id,
        name=name,
        email=user.email,
        role=settings.DEFAULT_PROFILE_ROLE,
        avatar=avatar_url(name),
    )


def resolve_profile(db: Session, user: AuthUser) -> ProfileRecord:
    row = profiles.read("load", lambda: db.get(Profile, user.id))
    if row is None:
        logger.info("profile_missing_using_placeholder", extra={"account_id": user.id})
        return placeholder_profile(user)
    return profiles.to_record(row)


def clean_profile_name(name: str | None) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise InvalidRecordError("Profile name must not be blank")
    return cleaned


def claim_admin_role(db: Session, account_id: str) -> bool:
    """Claim the first-registrant admin slot for ``account_id``.

    The claim is a conditional update on the settings row, so only one account
    ever wins it, and deleting profiles later does not reopen it. Databases that
    already hold an Admin profile record that profile as the claimant instead.
    """

    if db.get(ChurchSettings, SETTINGS_ROW_ID) is None:
        db.add(ChurchSettings(id=SETTINGS_ROW_ID, **default_settings().dict()))
        db.flush()
    existing_admin = db.query(Profile.id).filter(Profile.role == ADMIN_ROLE).first()
    claimant = existing_admin[0] if existing_admin else account_id
    claimed = (
        db.query(ChurchSettings)
        .filter(ChurchSettings.id == SETTINGS_ROW_ID, ChurchSettings.admin_account_id.is_(None))
        .update({ChurchSettings.admin_account_id: claimant}, synchronize_session=False)
    )
    return claimed == 1 and claimant == account_id


def registration_role(db: Session, account_id: str) -> str:
    return ADMIN_ROLE if claim_admin_role(db, account_id) else settings.DEFAULT_PROFILE_ROLE


def provision_profile(db: Session, user: AuthUser, name: str) -> ProfileRecord:
    name = clean_profile_name(name)

    def _insert() -> Profile:
        row = Profile(
            id=user.id,
            name=name,
            email=user.email,
            role=registration_role(db, user.id),
            avatar=avatar_url(name),
        )
        db.add(row)
        db.flush()
        return row

    row = profiles.write(db, "provision", _insert)
    logger.info("profile_provisioned", extra={"profile_id": row.id, "role": row.role})
    return profiles.to_record(row)


def list_users(db: Session) -> list[ProfileRecord]:
    return profiles.list(db)


def save_user(db: Session, record: ProfileRecord) -> ProfileRecord:
    if not record.avatar:
        record = record.copy(update={"avatar": avatar_url(record.name)})
    return profiles.save(db, record)


def delete_user(db: Session, user_id: str, acting_user_id: str | None) -> None:
    if acting_user_id is not None and user_id == acting_user_id:
        raise SelfDeletionError()
    profiles.delete(db, user_id)

"""API routers for the Meetcross application."""

from meetcross.routers import (
    announcements,
    auth,
    dashboard,
    donations,
    events,
    families,
    members,
    settings,
    users,
)  # noqa: F401

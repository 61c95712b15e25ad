from .family import Family  # noqa: F401
from .member import Member  # noqa: F401
from .event import Event, EventAttendance  # noqa: F401
from .donation import Donation  # noqa: F401
from .profile import Profile  # noqa: F401
from .account import AuthAccount  # noqa: F401
from .announcement import Announcement  # noqa: F401
from .church_settings import ChurchSettings  # noqa: F401

"""cfptime: a small client for the CFPTime API (https://api.cfptime.org).

The client lists conferences with open calls for proposals, fetches a single
conference by id and lists upcoming conferences. Requests go through an
injectable transport, so the same client serves blocking and asyncio code.
"""

__version__ = "0.1.0"

from .client import CfpTime  # noqa: E402
from .config import ClientConfig  # noqa: E402
from .core import Conference  # noqa: E402
from .errors import CfpTimeError, DecodeError, HttpError, NotFound, TransportError  # noqa: E402
from .transport import AsyncTransport, SyncTransport  # noqa: E402

__all__ = [
    "__version__",
    "AsyncTransport",
    "CfpTime",
    "CfpTimeError",
    "ClientConfig",
    "Conference",
    "DecodeError",
    "HttpError",
    "NotFound",
    "SyncTransport",
    "TransportError",
]

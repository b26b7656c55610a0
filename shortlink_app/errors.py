"""
Error taxonomy for link resolution, registration and click counting.

The core raises these; the HTTP layer (shortlink_app.api.errors) maps
each one to a status code and message.
"""


class ShortlinkError(Exception):
    """Base class for all errors raised by the service layer."""


class LinkNotFoundError(ShortlinkError):
    """No link is registered under the requested code."""

    def __init__(self, code: str):
        super().__init__(f"No link registered for code {code!r}")
        self.code = code


class DuplicateCodeError(ShortlinkError):
    """A link with this code already exists."""

    def __init__(self, code: str):
        super().__init__(f"Code {code!r} is already taken")
        self.code = code


class LinkRegistryError(ShortlinkError):
    """The link registry (relational database) failed."""


class LinkLookupError(LinkRegistryError):
    """The registry could not be queried while resolving a code."""


class StoreUnavailable(ShortlinkError):
    """The click counter store failed or could not be reached."""

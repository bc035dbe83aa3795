"""Domain errors raised by the service layer.

The function endpoints turn any FireProtectError into a 400 response with
``{"success": false, "error": str(exc)}``.
"""


class FireProtectError(Exception):
    """Base class for caller-facing failures."""


class NotFoundError(FireProtectError):
    """A referenced location or alert does not exist."""


class UnauthorizedError(FireProtectError):
    """Missing, unknown or expired caller token."""


class InvalidActionError(FireProtectError):
    """Unrecognized ``action`` in a function request body."""


class InvalidStatusError(FireProtectError):
    """Alert status outside the known set (strict mode only)."""


class RequestValidationError(FireProtectError):
    """Function request body is missing fields or has the wrong shape."""

"""
Error kinds raised while validating and submitting the auth form.
"""
from typing import Dict, Optional


GENERIC_AUTH_ERROR = "Authentication failed"
GENERIC_NETWORK_ERROR = "Unable to reach the server. Please try again."


class AuthFormError(Exception):
    """Base class for auth form errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class LocalValidationError(AuthFormError):
    """Field-level errors found before any network access."""

    def __init__(self, errors: Dict[str, str]):
        super().__init__(", ".join(f"{k}: {v}" for k, v in errors.items()))
        self.errors = dict(errors)


class AuthRejected(AuthFormError):
    """The Auth Service answered with a non-success status."""

    def __init__(self, message: str = GENERIC_AUTH_ERROR, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class TransportFailure(AuthFormError):
    """Network, timeout or parse failure talking to the Auth Service."""

    def __init__(self, message: str = GENERIC_NETWORK_ERROR):
        super().__init__(message)

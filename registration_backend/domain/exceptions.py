"""
Exception hierarchy for user registration.

Raised by the password hasher and the user store. The HTTP layer catches all
of them at one boundary, logs message and details, and answers with
user_message, which every subclass leaves at the one generic text.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional

SAVE_FAILED_MESSAGE = "Failed to save user"


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class RegistrationError(Exception):
    """Base exception for all registration errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or SAVE_FAILED_MESSAGE
        self.details = details or {}


# -----------------------------------------------------------------------------
# Input
# -----------------------------------------------------------------------------


class ValidationError(RegistrationError):
    """Raised when a required user field is missing."""

    def __init__(self, missing_fields, **kwargs):
        self.missing_fields = list(missing_fields)
        super().__init__(
            f"User validation failed: missing required field(s) {', '.join(self.missing_fields)}",
            details={"missing_fields": self.missing_fields},
            **kwargs,
        )


# -----------------------------------------------------------------------------
# Storage
# -----------------------------------------------------------------------------


class DuplicateKeyError(RegistrationError):
    """Raised when a write would break the unique email constraint."""

    def __init__(self, email: str, **kwargs):
        self.email = email
        super().__init__(
            f"A user with email {email!r} already exists",
            details={"email": email},
            **kwargs,
        )


class ConnectivityError(RegistrationError):
    """Raised when the document store cannot be reached."""
    pass


# -----------------------------------------------------------------------------
# Hashing
# -----------------------------------------------------------------------------


class HashingError(RegistrationError):
    """Raised when salt generation or password hashing fails."""
    pass

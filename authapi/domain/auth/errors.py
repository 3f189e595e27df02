"""
Domain errors raised by the auth bounded context.

Factories over the shared taxonomy so every caller produces the
exact same kind and message.
"""

from authapi.domain.errors import DomainError

EMAIL_TAKEN = "Email already exists"
INVALID_CREDENTIALS = "Invalid Credentials"


def email_taken() -> DomainError:
    """Raised when registering an email that already has an account."""
    return DomainError.bad_request(EMAIL_TAKEN)


def invalid_credentials() -> DomainError:
    """Raised for an unknown email and for a wrong password alike."""
    return DomainError.bad_request(INVALID_CREDENTIALS)

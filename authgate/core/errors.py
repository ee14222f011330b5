# File: authgate/core/errors.py

"""
Errors raised by the auth handler.

Each carries the HTTP status and the message the client is allowed to see.
Underlying causes are logged server-side and never sent back.
"""

from typing import Optional


class AuthError(Exception):
    status_code: int = 500
    message: str = "Internal Server Error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(AuthError):
    status_code = 400
    message = "Username and password required"


class CreationError(AuthError):
    status_code = 500
    message = "Failed to create user"


class AuthenticationError(AuthError):
    # Unknown user and wrong password share this on purpose
    status_code = 401
    message = "Invalid Username or Password"


class UserLookupError(AuthError):
    status_code = 500
    message = "Failed to login user"

"""Authentication exceptions.

These exceptions are raised by the storerate_auth package and should be
caught and handled by the application layer (AuthenticationService) or
translated to 401 responses by the API.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet the password policy."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when email or password is incorrect.

    Login uses the same message for unknown emails and wrong passwords so
    callers cannot probe which accounts exist.
    """

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)

"""Password hashing service using bcrypt.

Provides secure password hashing and verification together with the
password policy enforced on signup, admin user creation and password
changes.
"""

import string

import bcrypt

from storerate_auth.exceptions import WeakPasswordError


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses bcrypt for password hashing with configurable work factor.
    Also provides password strength validation.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> hash = service.hash("Secret@123")
    >>> service.verify("Secret@123", hash)
    True
    >>> service.verify("wrong_password", hash)
    False
    """

    # Password requirements
    MIN_LENGTH = 8
    MAX_LENGTH = 16
    SPECIAL_CHARACTERS = frozenset("!@#$%^&*()_+-=[]{};':\"\\|,.<>/?")

    def __init__(self, rounds: int = 12):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 12.
            Tests use the minimum of 4 to stay fast.
        """
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The bcrypt hash as a string

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        self.validate_strength(password)
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a hash.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The bcrypt hash to verify against

        Returns
        -------
        True if password matches, False otherwise
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            # Invalid hash format
            return False

    def validate_strength(self, password: str) -> None:
        """Validate that a password meets the password policy.

        Current requirements:
        - 8 to 16 characters
        - at least one uppercase letter
        - at least one special character

        Parameters
        ----------
        password
            The password to validate

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        if not password:
            msg = "Password is required"
            raise WeakPasswordError(msg)

        if not self.MIN_LENGTH <= len(password) <= self.MAX_LENGTH:
            msg = (
                f"Password must be {self.MIN_LENGTH}-{self.MAX_LENGTH} "
                "characters long"
            )
            raise WeakPasswordError(msg)

        if not any(char in string.ascii_uppercase for char in password):
            msg = "Password must contain at least one uppercase letter"
            raise WeakPasswordError(msg)

        if not any(char in self.SPECIAL_CHARACTERS for char in password):
            msg = "Password must contain at least one special character"
            raise WeakPasswordError(msg)

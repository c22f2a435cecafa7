from enum import Enum


class UserRole(str, Enum):
    """Platform roles.

    ADMIN manages the directory, USER rates stores and STORE_OWNER reads
    the ratings of the store they own.
    """

    ADMIN = "ADMIN"
    USER = "USER"
    STORE_OWNER = "STORE_OWNER"

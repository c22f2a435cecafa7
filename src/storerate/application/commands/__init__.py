"""Commands (state-changing use cases)."""

from storerate.application.commands.admin import CreateUserCommand
from storerate.application.commands.rating import (
    SubmitRatingCommand,
    UpdateRatingCommand,
)
from storerate.application.commands.store import CreateStoreCommand

__all__ = [
    "CreateStoreCommand",
    "CreateUserCommand",
    "SubmitRatingCommand",
    "UpdateRatingCommand",
]

from storerate.application.commands.store.create_store_command import (
    CreateStoreCommand,
)

__all__ = ["CreateStoreCommand"]

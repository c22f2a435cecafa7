"""StoreRate REST API."""

from storerate.presentation.api.app import create_app

__all__ = ["create_app"]

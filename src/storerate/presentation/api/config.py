"""API configuration adapter.

Bridges the centralized storerate_config settings with the API layer. The
settings instance is attached to ``app.state`` by ``create_app`` so tests
can run the application against explicit settings.
"""

from fastapi import Request

from storerate_config.settings import Settings


def get_api_settings(request: Request) -> Settings:
    """Return the settings the running application was created with."""
    return request.app.state.settings

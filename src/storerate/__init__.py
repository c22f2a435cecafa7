"""StoreRate - store directory with per-user ratings."""

__version__ = "0.1.0"

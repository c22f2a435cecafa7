"""Persistence implementations for storerate_auth."""

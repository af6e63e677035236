"""Core request-scoped context objects."""

from storehive.core.user_context import UserContext

__all__ = ["UserContext"]

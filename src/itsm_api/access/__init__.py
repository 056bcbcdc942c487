"""Access control: default authorizer and permission policies."""

from .authorizer import ScopeAuthorizer
from .guard import AccessGuard

__all__ = ["AccessGuard", "ScopeAuthorizer"]

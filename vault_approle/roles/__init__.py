"""
AppRole roles module.

Provides the role configuration model and the role registry operations.
"""

from .models import RoleOptions, TokenType, validate_role_name
from .registry import RoleRegistry

__all__ = [
    # Registry
    "RoleRegistry",
    # Models
    "RoleOptions",
    "TokenType",
    # Utility functions
    "validate_role_name",
]

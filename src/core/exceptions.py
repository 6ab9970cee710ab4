"""
Custom exceptions for the pattern demos.

Only hard failures live here. A proxy validation policy that declines a
write reports it through a WriteReport instead of raising.
"""

from typing import Any, Dict, List, Optional


class PatternError(Exception):
    """Base exception for pattern demo errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dict for logging or display."""
        return {
            "error": type(self).__name__,
            "message": self.message,
            "details": self.details,
        }


class PropertyNotFound(PatternError, AttributeError):
    """
    Raised when neither an instance nor any table in its delegation
    chain defines the requested member.
    """

    def __init__(self, member: str, chain: Optional[List[str]] = None):
        self.member = member
        self.chain = chain or []

        searched = " -> ".join(["<own data>", *self.chain])
        super().__init__(
            message=f"Property '{member}' not found (searched: {searched})",
            details={"member": member, "chain": self.chain},
        )


class SingletonViolation(PatternError):
    """Raised when a second independent singleton instance is constructed."""

    def __init__(self, class_name: str):
        self.class_name = class_name
        super().__init__(
            message=f"You can only create one instance of {class_name}!",
            details={"class_name": class_name},
        )


__all__ = [
    "PatternError",
    "PropertyNotFound",
    "SingletonViolation",
]

"""Encode mode selection."""

from enum import Enum

from .errors import ModeError


class EncodeMode(str, Enum):
    """
    How text is mapped to ids.

    ``CHARACTER`` emits one id per code point and ignores learned merges.
    ``MERGE`` applies learned merges in the order they were learned.
    """

    CHARACTER = "character"
    MERGE = "merge"

    @classmethod
    def get(cls, name: "str | EncodeMode") -> "EncodeMode":
        """Get encode mode by name (case-insensitive)."""
        if isinstance(name, cls):
            return name
        try:
            return cls[name.upper()]
        except (KeyError, AttributeError):
            raise ModeError(
                "unknown encode mode",
                invalid_name=str(name),
                available_modes=[mode.value for mode in cls],
            )


def list_encode_modes() -> list[str]:
    """Return available encode mode names."""
    return [mode.value for mode in EncodeMode]


__all__ = ["EncodeMode", "list_encode_modes"]

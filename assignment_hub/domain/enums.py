"""Domain enumerations: item type discriminant and status class filter."""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class ItemType(_ValuesMixin, str, Enum):
    """Kind of work item; selects the backing source and its completion rule."""

    TASK = "task"
    DDS = "dds"
    RFC = "rfc"
    RFI = "rfi"
    MAS = "mas"


class StatusClass(_ValuesMixin, str, Enum):
    """Coarse status filter applied at the source (absent = all)."""

    ACTIVE = "active"
    COMPLETED = "completed"

"""Completion rules per item type.

One table keyed by ItemType answers "is this item closed?". The same rule
drives the SQL active/completed filter, the counts-only queries, overdue
evaluation and the summary's active count, so those cannot disagree.
"""

from __future__ import annotations

from dataclasses import dataclass

from assignment_hub.domain.enums import ItemType


@dataclass(frozen=True)
class CompletionRule:
    """How one item type signals completion.

    Attributes:
        field: Name of the column/attribute holding the completion state.
        terminal_values: Values meaning closed (used when open_value is None).
        open_value: When set, the single value meaning still open; every
            other value, including a missing one, is terminal.
    """

    field: str
    terminal_values: frozenset[str] = frozenset()
    open_value: str | None = None

    def is_terminal(self, value: str | None) -> bool:
        """Return True when value marks the item closed/resolved."""
        if self.open_value is not None:
            return value != self.open_value
        return value in self.terminal_values

    def is_active(self, value: str | None) -> bool:
        return not self.is_terminal(value)


COMPLETION_RULES: dict[ItemType, CompletionRule] = {
    ItemType.TASK: CompletionRule("status", frozenset({"completed"})),
    ItemType.DDS: CompletionRule("status", frozenset({"completed"})),
    ItemType.RFC: CompletionRule(
        "status", frozenset({"approved", "rejected", "implemented"})
    ),
    ItemType.RFI: CompletionRule("status", frozenset({"Closed", "Resolved", "Approved"})),
    ItemType.MAS: CompletionRule("final_status", open_value="Pending"),
}


def completion_rule(item_type: ItemType) -> CompletionRule:
    """Return the completion rule for item_type."""
    return COMPLETION_RULES[ItemType(item_type)]

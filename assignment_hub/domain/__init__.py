"""Domain layer: item types, completion rules and exceptions (no infrastructure)."""

from assignment_hub.domain.completion import (
    COMPLETION_RULES,
    CompletionRule,
    completion_rule,
)
from assignment_hub.domain.enums import ItemType, StatusClass
from assignment_hub.domain.exceptions import (
    AssignmentHubException,
    AuthenticationException,
    SourceFailureException,
    SqlNotConfiguredException,
)

__all__ = [
    "COMPLETION_RULES",
    "AssignmentHubException",
    "AuthenticationException",
    "CompletionRule",
    "ItemType",
    "SourceFailureException",
    "SqlNotConfiguredException",
    "StatusClass",
    "completion_rule",
]

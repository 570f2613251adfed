"""Source repositories: one read-only repository per assignable item type."""

from assignment_hub.infrastructure.persistence.repositories.base import (
    AssignmentSourceRepository,
)
from assignment_hub.infrastructure.persistence.repositories.dds_repo import (
    DdsSourceRepository,
)
from assignment_hub.infrastructure.persistence.repositories.mas_repo import (
    MasSourceRepository,
)
from assignment_hub.infrastructure.persistence.repositories.rfc_repo import (
    RfcSourceRepository,
)
from assignment_hub.infrastructure.persistence.repositories.rfi_repo import (
    RfiSourceRepository,
)
from assignment_hub.infrastructure.persistence.repositories.task_repo import (
    TaskSourceRepository,
)
from assignment_hub.infrastructure.persistence.safe_query import SafeQueryExecutor

SOURCE_REPOSITORIES: tuple[type[AssignmentSourceRepository], ...] = (
    TaskSourceRepository,
    DdsSourceRepository,
    RfcSourceRepository,
    RfiSourceRepository,
    MasSourceRepository,
)


def build_assignment_sources(
    executor: SafeQueryExecutor,
) -> list[AssignmentSourceRepository]:
    """Instantiate every source repository over one executor."""
    return [repo_cls(executor) for repo_cls in SOURCE_REPOSITORIES]


__all__ = [
    "SOURCE_REPOSITORIES",
    "AssignmentSourceRepository",
    "DdsSourceRepository",
    "MasSourceRepository",
    "RfcSourceRepository",
    "RfiSourceRepository",
    "TaskSourceRepository",
    "build_assignment_sources",
]

"""Source repositories: compiled SQL and executor delegation."""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.dialects import postgresql

from assignment_hub.domain.enums import ItemType, StatusClass
from assignment_hub.infrastructure.persistence.repositories import (
    SOURCE_REPOSITORIES,
    DdsSourceRepository,
    MasSourceRepository,
    RfcSourceRepository,
    RfiSourceRepository,
    TaskSourceRepository,
    build_assignment_sources,
)

CANONICAL_COLUMNS = {
    "id",
    "title",
    "description",
    "status",
    "priority",
    "due_date",
    "created_at",
    "assigned_at",
    "completed_at",
    "project_name",
    "project_id",
    "assigned_by_name",
    "sub_type",
}


def _sql(stmt) -> str:
    compiled = stmt.compile(
        dialect=postgresql.dialect(), compile_kwargs={"literal_binds": True}
    )
    return " ".join(str(compiled).split())


def _repo(repo_cls):
    return repo_cls(AsyncMock())


def test_one_repository_per_item_type() -> None:
    assert [r.item_type for r in SOURCE_REPOSITORIES] == list(ItemType)
    sources = build_assignment_sources(AsyncMock())
    assert [s.item_type for s in sources] == list(ItemType)


@pytest.mark.parametrize("repo_cls", SOURCE_REPOSITORIES)
def test_select_has_canonical_columns(repo_cls) -> None:
    stmt = _repo(repo_cls).build_select(42)
    names = {c.name for c in stmt.selected_columns}
    assert CANONICAL_COLUMNS <= names


@pytest.mark.parametrize("repo_cls", SOURCE_REPOSITORIES)
def test_select_filters_on_caller_and_orders_newest_first(repo_cls) -> None:
    repo = _repo(repo_cls)
    sql = _sql(repo.build_select(42))
    table = repo.source.name
    assert f"{table}.assigned_to_id = 42" in sql
    assert sql.endswith(f"ORDER BY {table}.created_at DESC")


def test_project_filter_on_source() -> None:
    sql = _sql(_repo(TaskSourceRepository).build_select(42, project_id=7))
    assert "tasks.project_id = 7" in sql


def test_dds_project_filter_goes_through_sheet() -> None:
    sql = _sql(_repo(DdsSourceRepository).build_select(42, project_id=7))
    assert "dds.project_id = 7" in sql
    assert "JOIN dds ON dds.id = dds_items.dds_id" in sql


def test_task_joins_projects_and_assigner() -> None:
    sql = _sql(_repo(TaskSourceRepository).build_select(42))
    assert "JOIN projects ON projects.id = tasks.project_id" in sql
    assert "LEFT OUTER JOIN users AS assigner ON assigner.id = tasks.assigned_by_id" in sql


def test_rfi_title_falls_back_to_reference() -> None:
    sql = _sql(_repo(RfiSourceRepository).build_select(42))
    assert "coalesce(requests_for_information.rfi_subject, requests_for_information.rfi_ref_no)" in sql


def test_active_filter_keeps_null_status() -> None:
    sql = _sql(_repo(TaskSourceRepository).build_select(42, status_class=StatusClass.ACTIVE))
    assert "tasks.status IS NULL" in sql
    assert "NOT IN ('completed')" in sql


def test_completed_filter_uses_terminal_set() -> None:
    sql = _sql(
        _repo(RfcSourceRepository).build_select(42, status_class=StatusClass.COMPLETED)
    )
    assert "requests_for_change.status IN ('approved', 'implemented', 'rejected')" in sql


def test_rfi_terminal_values_are_case_sensitive() -> None:
    sql = _sql(
        _repo(RfiSourceRepository).build_select(42, status_class=StatusClass.COMPLETED)
    )
    assert "('Approved', 'Closed', 'Resolved')" in sql


def test_mas_active_filter_uses_final_status() -> None:
    sql = _sql(_repo(MasSourceRepository).build_select(42, status_class=StatusClass.ACTIVE))
    assert "material_approval_sheets.final_status = 'Pending'" in sql
    assert "final_status IS NULL" not in sql
    assert "material_approval_sheets.status" not in sql.split("WHERE", 1)[1]


def test_mas_completed_filter_excludes_pending() -> None:
    sql = _sql(
        _repo(MasSourceRepository).build_select(42, status_class=StatusClass.COMPLETED)
    )
    assert "material_approval_sheets.final_status IS NULL" in sql
    assert "material_approval_sheets.final_status != 'Pending'" in sql


def test_mas_active_count_excludes_missing_final_status() -> None:
    sql = _sql(_repo(MasSourceRepository).build_active_count(42))
    assert "material_approval_sheets.final_status = 'Pending'" in sql
    assert "IS NULL" not in sql


def test_mas_selects_final_status() -> None:
    stmt = _repo(MasSourceRepository).build_select(42)
    assert "final_status" in {c.name for c in stmt.selected_columns}


def test_active_count_has_no_joins() -> None:
    sql = _sql(_repo(TaskSourceRepository).build_active_count(42))
    assert "count(*)" in sql
    assert "FROM tasks WHERE" in sql
    assert "JOIN" not in sql
    assert "tasks.assigned_to_id = 42" in sql
    assert "NOT IN ('completed')" in sql


async def test_fetch_assigned_delegates_to_executor() -> None:
    executor = AsyncMock()
    executor.fetch_all.return_value = [{"id": 1}]
    repo = RfcSourceRepository(executor)

    rows = await repo.fetch_assigned(42, project_id=3, status_class=StatusClass.ACTIVE)

    assert rows == [{"id": 1}]
    executor.fetch_all.assert_awaited_once()
    assert executor.fetch_all.await_args.kwargs == {"source": ItemType.RFC}


async def test_count_active_delegates_to_executor() -> None:
    executor = AsyncMock()
    executor.fetch_count.return_value = 6
    assert await MasSourceRepository(executor).count_active(42) == 6
    assert executor.fetch_count.await_args.kwargs == {"source": ItemType.MAS}

"""MyAssignmentsService over in-memory sources and the real query path."""

from datetime import timedelta
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import DBAPIError

from assignment_hub.application.dtos.assignment import AssignmentFilters
from assignment_hub.application.use_cases.my_assignments import MyAssignmentsService
from assignment_hub.domain.enums import ItemType, StatusClass
from assignment_hub.domain.exceptions import SourceFailureException
from assignment_hub.infrastructure.persistence.repositories import (
    build_assignment_sources,
)
from assignment_hub.infrastructure.persistence.safe_query import SafeQueryExecutor


def _service(sources, now):
    return MyAssignmentsService(list(sources.values()), clock=lambda: now)


async def test_merges_and_ranks_across_sources(
    empty_sources, make_row, fixed_now
) -> None:
    empty_sources[ItemType.TASK].rows = [
        make_row(1, status="in_progress", due_date=fixed_now - timedelta(days=1))
    ]
    empty_sources[ItemType.RFI].rows = [
        make_row(2, status="Open", due_date=fixed_now + timedelta(days=1))
    ]
    empty_sources[ItemType.MAS].rows = [
        make_row(3, status="submitted", final_status="Pending")
    ]

    result = await _service(empty_sources, fixed_now).list_assignments(user_id=42)

    assert [(a.item_type, a.id) for a in result.assignments] == [
        (ItemType.TASK, 1),
        (ItemType.RFI, 2),
        (ItemType.MAS, 3),
    ]
    assert [a.is_overdue for a in result.assignments] == [True, False, False]
    assert result.summary.total == 3
    assert result.summary.overdue == 1
    assert result.summary.active == 3
    assert result.summary.by_type == {"task": 1, "dds": 0, "rfc": 0, "rfi": 1, "mas": 1}


async def test_every_source_queried_with_filters(empty_sources, fixed_now) -> None:
    filters = AssignmentFilters(project_id=9, status_class=StatusClass.ACTIVE)

    await _service(empty_sources, fixed_now).list_assignments(user_id=42, filters=filters)

    for source in empty_sources.values():
        assert source.calls == [
            {"user_id": 42, "project_id": 9, "status_class": StatusClass.ACTIVE}
        ]


async def test_type_filter_with_no_matches_is_empty(
    empty_sources, make_row, fixed_now
) -> None:
    empty_sources[ItemType.TASK].rows = [make_row(1)]

    result = await _service(empty_sources, fixed_now).list_assignments(
        user_id=42, filters=AssignmentFilters(item_type=ItemType.RFC)
    )

    assert result.assignments == []
    assert result.summary.total == 0
    assert result.summary.by_type["task"] == 0


async def test_type_filter_keeps_matching_type(
    empty_sources, make_row, fixed_now
) -> None:
    empty_sources[ItemType.TASK].rows = [make_row(1)]
    empty_sources[ItemType.DDS].rows = [make_row(2)]

    result = await _service(empty_sources, fixed_now).list_assignments(
        user_id=42, filters=AssignmentFilters(item_type=ItemType.DDS)
    )

    assert [(a.item_type, a.id) for a in result.assignments] == [(ItemType.DDS, 2)]


async def test_no_assignments_anywhere(empty_sources, fixed_now) -> None:
    result = await _service(empty_sources, fixed_now).list_assignments(user_id=42)
    assert result.assignments == []
    assert result.summary.total == 0
    assert set(result.summary.by_type) == {"task", "dds", "rfc", "rfi", "mas"}


async def test_failing_source_fails_the_request(
    empty_sources, make_row, fixed_now
) -> None:
    empty_sources[ItemType.TASK].rows = [make_row(1)]
    empty_sources[ItemType.RFC].error = SourceFailureException("rfc", "timeout")

    with pytest.raises(SourceFailureException):
        await _service(empty_sources, fixed_now).list_assignments(user_id=42)


async def test_clock_read_once_per_request(empty_sources, make_row, fixed_now) -> None:
    readings = []

    def clock():
        readings.append(fixed_now)
        return fixed_now

    empty_sources[ItemType.TASK].rows = [make_row(1), make_row(2)]
    service = MyAssignmentsService(list(empty_sources.values()), clock=clock)

    await service.list_assignments(user_id=42)

    assert len(readings) == 1


async def test_count_active_tallies_per_type(make_source) -> None:
    sources = [
        make_source(ItemType.TASK, active_count=2),
        make_source(ItemType.DDS, active_count=0),
        make_source(ItemType.RFC, active_count=1),
        make_source(ItemType.RFI, active_count=0),
        make_source(ItemType.MAS, active_count=4),
    ]

    counts = await MyAssignmentsService(sources).count_active(user_id=42)

    assert counts.total == 7
    assert counts.by_type == {"task": 2, "dds": 0, "rfc": 1, "rfi": 0, "mas": 4}
    assert all(s.calls == [{"user_id": 42, "count": True}] for s in sources)


async def test_count_active_propagates_failure(make_source) -> None:
    sources = [
        make_source(ItemType.TASK, active_count=2),
        make_source(ItemType.RFI, error=SourceFailureException("rfi", "boom")),
    ]
    with pytest.raises(SourceFailureException):
        await MyAssignmentsService(sources).count_active(user_id=42)


class _UndefinedTable(Exception):
    sqlstate = "42P01"


class _TableSession:
    """Session answering by source table; tables not in rows are undefined."""

    def __init__(self, rows: dict[str, list[dict]]) -> None:
        self.rows = rows

    async def __aenter__(self) -> "_TableSession":
        return self

    async def __aexit__(self, *exc_info) -> None:
        return None

    async def execute(self, stmt):
        sql = str(stmt)
        for table, rows in self.rows.items():
            if f"{table}.assigned_to_id" in sql:
                result = MagicMock()
                result.mappings.return_value.all.return_value = rows
                result.scalar_one.return_value = len(rows)
                return result
        raise DBAPIError(sql, {}, _UndefinedTable('relation does not exist'))


@pytest.fixture
def rfi_table_missing(make_row, fixed_now):
    rows = {
        "tasks": [make_row(1, due_date=fixed_now - timedelta(days=2))],
        "dds_items": [make_row(2, priority=None)],
        "requests_for_change": [make_row(3, status="approved")],
        "material_approval_sheets": [make_row(4, final_status="Pending")],
    }
    executor = SafeQueryExecutor(lambda: _TableSession(rows))
    return build_assignment_sources(executor)


async def test_missing_relation_leaves_other_sources(
    rfi_table_missing, fixed_now
) -> None:
    service = MyAssignmentsService(rfi_table_missing, clock=lambda: fixed_now)

    result = await service.list_assignments(user_id=42)

    assert [(a.item_type, a.id) for a in result.assignments] == [
        (ItemType.TASK, 1),
        (ItemType.DDS, 2),
        (ItemType.RFC, 3),
        (ItemType.MAS, 4),
    ]
    assert result.summary.total == 4
    assert result.summary.overdue == 1
    assert result.summary.active == 3
    assert result.summary.by_type == {"task": 1, "dds": 1, "rfc": 1, "rfi": 0, "mas": 1}


async def test_missing_relation_counts_zero(rfi_table_missing) -> None:
    counts = await MyAssignmentsService(rfi_table_missing).count_active(user_id=42)

    assert counts.by_type == {"task": 1, "dds": 1, "rfc": 1, "rfi": 0, "mas": 1}
    assert counts.total == 4

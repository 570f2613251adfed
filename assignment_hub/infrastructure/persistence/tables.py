"""Lightweight Core table definitions for the relations this service reads.

The relations are created and migrated by the main application; only the
columns queried here are declared.
"""

from sqlalchemy import Date, DateTime, Integer, String, Text, column, table

users = table(
    "users",
    column("id", Integer),
    column("full_name", String),
)

projects = table(
    "projects",
    column("id", Integer),
    column("name", String),
)

tasks = table(
    "tasks",
    column("id", Integer),
    column("project_id", Integer),
    column("title", String),
    column("description", Text),
    column("status", String),
    column("priority", String),
    column("task_type", String),
    column("due_date", DateTime(timezone=True)),
    column("created_at", DateTime(timezone=True)),
    column("assigned_at", DateTime(timezone=True)),
    column("completed_at", DateTime(timezone=True)),
    column("assigned_to_id", Integer),
    column("assigned_by_id", Integer),
)

dds = table(
    "dds",
    column("id", Integer),
    column("project_id", Integer),
)

dds_items = table(
    "dds_items",
    column("id", Integer),
    column("dds_id", Integer),
    column("item_name", String),
    column("item_category", String),
    column("discipline", String),
    column("status", String),
    column("expected_completion_date", Date),
    column("actual_completion_date", Date),
    column("created_at", DateTime(timezone=True)),
    column("assigned_to_id", Integer),
)

requests_for_change = table(
    "requests_for_change",
    column("id", Integer),
    column("project_id", Integer),
    column("title", String),
    column("description", Text),
    column("status", String),
    column("priority", String),
    column("due_date", DateTime(timezone=True)),
    column("created_at", DateTime(timezone=True)),
    column("assigned_at", DateTime(timezone=True)),
    column("assigned_to_id", Integer),
    column("assigned_by_id", Integer),
)

requests_for_information = table(
    "requests_for_information",
    column("id", Integer),
    column("project_id", Integer),
    column("rfi_ref_no", String),
    column("rfi_subject", Text),
    column("rfi_description", Text),
    column("status", String),
    column("priority", String),
    column("due_date", DateTime(timezone=True)),
    column("created_at", DateTime(timezone=True)),
    column("assigned_at", DateTime(timezone=True)),
    column("assigned_to_id", Integer),
    column("assigned_by_id", Integer),
)

material_approval_sheets = table(
    "material_approval_sheets",
    column("id", Integer),
    column("project_id", Integer),
    column("material_name", String),
    column("material_category", String),
    column("status", String),
    column("final_status", String),
    column("due_date", DateTime(timezone=True)),
    column("created_at", DateTime(timezone=True)),
    column("assigned_at", DateTime(timezone=True)),
    column("assigned_to_id", Integer),
    column("assigned_by_id", Integer),
)

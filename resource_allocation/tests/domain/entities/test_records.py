"""
Unit Tests for Client, Worker and Task Records

Covers lenient coercion of spreadsheet cells and the row round trip used
by the table views and exporters.
"""

import pytest

from resource_allocation.domain.allocation.entities import (
    Client,
    Task,
    Worker,
)
from resource_allocation.domain.allocation.entities.records import (
    coerce_number,
    coerce_string_list,
)
from resource_allocation.domain.allocation.value_objects import EntityKind


class TestCoercion:
    """Test cell coercion helpers."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("8", 8),
            (" 7.5 ", 7.5),
            (3.0, 3),
            (12, 12),
            ("", None),
            ("   ", None),
            ("high", None),
            (None, None),
            (float("nan"), None),
        ],
    )
    def test_coerce_number(self, raw, expected):
        """Test numeric strings become numbers and junk becomes None."""
        assert coerce_number(raw) == expected

    def test_coerce_string_list_splits_delimited_text(self):
        """Test comma and semicolon separated cells become lists."""
        assert coerce_string_list("JavaScript, React;Python") == [
            "JavaScript",
            "React",
            "Python",
        ]

    def test_coerce_string_list_drops_blank_items(self):
        """Test blank items are dropped."""
        assert coerce_string_list("Go,, ,Rust") == ["Go", "Rust"]
        assert coerce_string_list(None) == []

    def test_coerce_string_list_keeps_lists(self):
        """Test list cells are kept, with items stripped."""
        assert coerce_string_list([" SQL ", "Python"]) == ["SQL", "Python"]


class TestRecordFromRow:
    """Test building records from spreadsheet rows."""

    def test_client_numeric_strings(self):
        """Test client numbers arrive as strings from CSV files."""
        client = Client.from_row(
            {"id": " C1 ", "name": "Acme Corp", "priority": "8", "value": "50000"}
        )
        assert client.id == "C1"
        assert client.priority == 8
        assert client.value == 50000

    def test_numeric_identifier_becomes_text(self):
        """Test spreadsheet ids read as floats become plain strings."""
        client = Client.from_row({"id": 101.0, "name": "Initech"})
        assert client.id == "101"

    def test_unparseable_number_is_none(self):
        """Test a non-numeric priority does not reject the row."""
        client = Client.from_row({"id": "C1", "priority": "urgent"})
        assert client.priority is None

    def test_task_accepts_wire_and_python_names(self):
        """Test camelCase and snake_case columns both populate fields."""
        assert Task.from_row({"id": "T1", "clientId": "C1"}).client_id == "C1"
        assert Task.from_row({"id": "T1", "client_id": "C1"}).client_id == "C1"

    def test_worker_skills_from_text(self):
        """Test comma separated skills become a list."""
        worker = Worker.from_row({"id": "W1", "skills": "JavaScript, React"})
        assert worker.skills == ["JavaScript", "React"]

    def test_unknown_columns_are_kept(self):
        """Test extra spreadsheet columns survive into the row dump."""
        client = Client.from_row({"id": "C1", "name": "Acme", "region": "EU"})
        assert client.to_row() == {"id": "C1", "name": "Acme", "region": "EU"}

    def test_missing_id_defaults_to_empty(self):
        """Test a row without an id still builds a record."""
        assert Task.from_row({"name": "Orphan"}).id == ""


class TestRecordDump:
    """Test record dumps and schema helpers."""

    def test_to_row_uses_wire_names(self):
        """Test dumps use camelCase names and only set columns."""
        task = Task(id="T1", client_id="C1", estimated_hours=4)
        assert task.to_row() == {"id": "T1", "clientId": "C1", "estimatedHours": 4}

    def test_schema_fields(self):
        """Test schema fields are wire names in declaration order."""
        assert Task.schema_fields() == [
            "id",
            "name",
            "clientId",
            "phases",
            "skills",
            "priority",
            "estimatedHours",
        ]
        assert Worker.schema_fields() == [
            "id",
            "name",
            "skills",
            "availability",
            "maxLoad",
        ]

    def test_diagnostic_key(self):
        """Test the composite key combines kind and id."""
        assert Task(id="T1").diagnostic_key == "task-T1"
        assert Worker.kind is EntityKind.WORKER

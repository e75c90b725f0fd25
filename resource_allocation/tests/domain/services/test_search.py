"""Unit Tests for Dataset Search"""

from resource_allocation.domain.allocation.entities import Task
from resource_allocation.domain.allocation.services import search


class TestSearch:
    """Test free-text search across collections."""

    def test_skill_search_is_case_insensitive(
        self, sample_clients, sample_workers, sample_tasks
    ):
        """Test a lower-case skill finds workers and tasks."""
        result = search("javascript", sample_clients, sample_workers, sample_tasks)
        assert [w.id for w in result.workers] == ["W1"]
        assert [t.id for t in result.tasks] == ["T1"]
        assert result.clients == []

    def test_name_search(self, sample_clients, sample_workers, sample_tasks):
        """Test names are matched by substring."""
        result = search("ACME", sample_clients, sample_workers, sample_tasks)
        assert [c.id for c in result.clients] == ["C1"]
        assert result.total == 1

    def test_client_reference_matches_tasks(
        self, sample_clients, sample_workers, sample_tasks
    ):
        """Test searching a client id also finds its tasks."""
        result = search("c2", sample_clients, sample_workers, sample_tasks)
        assert [c.id for c in result.clients] == ["C2"]
        assert [t.id for t in result.tasks] == ["T2"]

    def test_no_match(self, sample_clients, sample_workers, sample_tasks):
        """Test an unmatched query returns empty collections."""
        result = search("kubernetes", sample_clients, sample_workers, sample_tasks)
        assert result.total == 0


class TestPhaseSearch:
    """Test the phase-count query."""

    def test_phase_greater_than(self, sample_clients, sample_workers, sample_tasks):
        """Test 'phase > 2' returns only tasks with more than two phases."""
        result = search("phase > 2", sample_clients, sample_workers, sample_tasks)
        assert [t.id for t in result.tasks] == ["T1"]
        assert result.clients == []
        assert result.workers == []

    def test_phase_query_wording(self, sample_clients, sample_workers, sample_tasks):
        """Test the threshold is the first number after 'phase'."""
        result = search(
            "Tasks with Phases > 0", sample_clients, sample_workers, sample_tasks
        )
        assert [t.id for t in result.tasks] == ["T1", "T2"]

    def test_tasks_without_phases_excluded(self):
        """Test tasks lacking a phase count never match the phase query."""
        tasks = [Task(id="T1", phases=None), Task(id="T2", phases=4)]
        result = search("phase > 1", [], [], tasks)
        assert [t.id for t in result.tasks] == ["T2"]

    def test_without_number_falls_back_to_text(
        self, sample_clients, sample_workers, sample_tasks
    ):
        """Test a phase query without a number is a plain substring search."""
        result = search("phase > many", sample_clients, sample_workers, sample_tasks)
        assert result.total == 0

    def test_phase_query_discards_clients_and_workers(
        self, sample_clients, sample_workers
    ):
        """Test only tasks above the threshold come back."""
        tasks = [
            Task(id="T1", phases=1),
            Task(id="T2", phases=3),
            Task(id="T3", phases=5),
        ]
        result = search("phase > 2", sample_clients, sample_workers, tasks)
        assert [t.id for t in result.tasks] == ["T2", "T3"]
        assert result.clients == []
        assert result.workers == []

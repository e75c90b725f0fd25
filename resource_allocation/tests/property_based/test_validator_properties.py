"""
Property-Based Testing for Validation and Search

Using Hypothesis to check the validator and search invariants over
generated client, worker and task collections.
"""

from collections import Counter

from hypothesis import given, settings, strategies as st

from resource_allocation.domain.allocation.entities import Client, Task, Worker
from resource_allocation.domain.allocation.services import (
    search,
    validate_all,
    validate_clients,
    validate_tasks,
)
from resource_allocation.domain.allocation.value_objects import DiagnosticType

SKILLS = ["Python", "SQL", "JavaScript", "React", "Go", "Rust"]


@st.composite
def client_ids(draw):
    """Generate short client ids with frequent collisions."""
    return f"C{draw(st.integers(min_value=1, max_value=5))}"


@st.composite
def clients(draw):
    return Client(
        id=draw(client_ids()),
        name=draw(st.sampled_from(["Acme Corp", "Globex", "Initech", ""])),
        priority=draw(st.one_of(st.none(), st.integers(min_value=-5, max_value=15))),
    )


@st.composite
def workers(draw):
    return Worker(
        id=f"W{draw(st.integers(min_value=1, max_value=5))}",
        name=draw(st.sampled_from(["Alice", "Bob", "Carol"])),
        skills=draw(st.lists(st.sampled_from(SKILLS), max_size=3, unique=True)),
        availability=draw(st.integers(min_value=-10, max_value=120)),
    )


@st.composite
def tasks(draw):
    return Task(
        id=f"T{draw(st.integers(min_value=1, max_value=8))}",
        name=draw(st.sampled_from(["Build", "Test", "Ship"])),
        client_id=draw(client_ids()),
        phases=draw(st.one_of(st.none(), st.integers(min_value=0, max_value=6))),
        skills=draw(st.lists(st.sampled_from(SKILLS), max_size=3, unique=True)),
    )


class TestValidatorProperties:
    """Property-based tests for the validator."""

    @given(st.lists(clients(), max_size=15))
    @settings(max_examples=100)
    def test_duplicate_count_is_occurrences_minus_one(self, client_list):
        """Test each id shared by n clients yields n - 1 duplicate diagnostics."""
        duplicates = Counter(
            d.entity_id
            for d in validate_clients(client_list)
            if d.type is DiagnosticType.DUPLICATE_ID
        )
        occurrences = Counter(c.id for c in client_list)
        expected = {cid: n - 1 for cid, n in occurrences.items() if n > 1}
        assert dict(duplicates) == expected

    @given(st.lists(clients(), max_size=15))
    def test_out_of_range_matches_priority_bounds(self, client_list):
        """Test exactly the clients with priority outside 1-10 are flagged."""
        flagged = sum(
            1
            for d in validate_clients(client_list)
            if d.type is DiagnosticType.OUT_OF_RANGE
        )
        expected = sum(
            1
            for c in client_list
            if c.priority is not None and not 1 <= c.priority <= 10
        )
        assert flagged == expected

    @given(
        st.lists(clients(), max_size=5),
        st.lists(workers(), max_size=5),
        st.lists(tasks(), max_size=10),
    )
    def test_task_references_and_skills(self, client_list, worker_list, task_list):
        """Test one reference diagnostic per bad task and one per missing skill."""
        diagnostics = validate_tasks(task_list, client_list, worker_list)
        known_clients = {c.id for c in client_list}
        available = {skill for w in worker_list for skill in w.skills}

        references = [
            d for d in diagnostics if d.type is DiagnosticType.INVALID_REFERENCE
        ]
        missing = [d for d in diagnostics if d.type is DiagnosticType.MISSING_SKILL]

        assert len(references) == sum(
            1 for t in task_list if t.client_id not in known_clients
        )
        assert len(missing) == sum(
            1 for t in task_list for skill in t.skills if skill not in available
        )

    @given(
        st.lists(clients(), max_size=5),
        st.lists(workers(), max_size=5),
        st.lists(tasks(), max_size=10),
    )
    def test_validation_is_idempotent(self, client_list, worker_list, task_list):
        """Test validating twice gives the same diagnostics and unique ids."""
        first = validate_all(client_list, worker_list, task_list)
        assert first == validate_all(client_list, worker_list, task_list)
        ids = [d.diagnostic_id for d in first]
        assert len(ids) == len(set(ids))


class TestSearchProperties:
    """Property-based tests for search."""

    @given(
        st.lists(tasks(), max_size=10),
        st.integers(min_value=0, max_value=6),
    )
    def test_phase_query_threshold(self, task_list, threshold):
        """Test the phase query keeps exactly the tasks above the threshold."""
        result = search(f"phase > {threshold}", [], [], task_list)
        assert result.tasks == [
            t for t in task_list if t.phases is not None and t.phases > threshold
        ]

    @given(
        st.lists(clients(), max_size=5),
        st.lists(workers(), max_size=5),
        st.lists(tasks(), max_size=5),
        st.sampled_from(["acme", "python", "t1", "w2", "c3", "zzz"]),
    )
    def test_results_are_subsets(self, client_list, worker_list, task_list, query):
        """Test search only returns records from its inputs, in input order."""
        result = search(query, client_list, worker_list, task_list)
        for found, source in (
            (result.clients, client_list),
            (result.workers, worker_list),
            (result.tasks, task_list),
        ):
            positions = [
                next(i for i, record in enumerate(source) if record is item)
                for item in found
            ]
            assert positions == sorted(positions)

from tablekit.services.column_schema import ColumnDescriptor, ColumnSchema
from tablekit.services.event_bus import EventBus, TableEvent
from tablekit.viewmodels.sort_state import UNSORTED, SortDirection, SortState
from tablekit.viewmodels.table_controller import TableController, derive_view


def _columns():
    return [
        ColumnDescriptor("name", title="Name", sortable=True),
        ColumnDescriptor("email", title="Email", sortable=True),
        ColumnDescriptor("role", title="Role", sortable=False),
        ColumnDescriptor("score", sortable=True),
    ]


def _names(rows):
    return [r["name"] for r in rows]


def test_ascending_sort_is_stable_for_equal_names():
    records = [
        {"id": 1, "name": "Bob"},
        {"id": 2, "name": "Amy"},
        {"id": 3, "name": "Amy"},
    ]
    controller = TableController(_columns(), records)
    controller.request_sort("name")
    assert [r["id"] for r in controller.view()] == [2, 3, 1]


def test_descending_sort_is_stable_for_equal_names():
    records = [
        {"id": 1, "name": "Amy"},
        {"id": 2, "name": "Bob"},
        {"id": 3, "name": "Amy"},
        {"id": 4, "name": "Bob"},
    ]
    controller = TableController(_columns(), records)
    controller.request_sort("name")
    controller.request_sort("name")
    assert controller.sort_state == SortState("name", SortDirection.DESCENDING)
    assert [r["id"] for r in controller.view()] == [2, 4, 1, 3]


def test_full_cycle_restores_input_order(users):
    controller = TableController(_columns(), users)
    controller.request_sort("name")
    assert _names(controller.view()) == ["Bob Johnson", "Jane Smith", "John Doe"]
    controller.request_sort("name")
    assert _names(controller.view()) == ["John Doe", "Jane Smith", "Bob Johnson"]
    controller.request_sort("name")
    assert controller.sort_state == UNSORTED
    assert controller.view() == users
    controller.request_sort("name")
    assert controller.sort_state.direction is SortDirection.ASCENDING


def test_switching_columns_restarts_ascending(users):
    controller = TableController(_columns(), users)
    controller.request_sort("name")
    controller.request_sort("name")
    state = controller.request_sort("email")
    assert state == SortState("email", SortDirection.ASCENDING)
    assert controller.sort_indicator("email") == "asc"
    assert controller.sort_indicator("name") == "none"


def test_non_sortable_and_unknown_columns_are_ignored(users):
    controller = TableController(_columns(), users)
    controller.request_sort("name")
    before = controller.sort_state
    controller.request_sort("role")
    controller.request_sort("nope")
    assert controller.sort_state is before


def test_null_values_sort_first_and_input_is_not_mutated():
    records = [{"id": 1, "score": 5}, {"id": 2, "score": None}, {"id": 3, "score": 1}, {"id": 4}]
    snapshot = list(records)
    controller = TableController(_columns(), records)
    controller.request_sort("score")
    assert [r["id"] for r in controller.view()] == [2, 4, 3, 1]
    controller.request_sort("score")
    assert [r["id"] for r in controller.view()] == [1, 3, 2, 4]
    assert records == snapshot


def test_numeric_sort_is_not_lexicographic():
    records = [{"id": i, "score": s} for i, s in enumerate([10, 9, 100, 1])]
    controller = TableController(_columns(), records)
    controller.request_sort("score")
    assert [r["score"] for r in controller.view()] == [1, 9, 10, 100]


def test_sort_state_survives_data_changes(users):
    controller = TableController(_columns(), users)
    controller.request_sort("name")
    controller.set_data(users + [{"id": 4, "name": "Aaron Ames"}])
    assert controller.sort_state.column_key == "name"
    assert _names(controller.view())[0] == "Aaron Ames"


def test_derive_view_is_pure(users):
    schema = ColumnSchema(_columns())
    state = SortState("name", SortDirection.ASCENDING)
    first = derive_view(users, state, schema)
    second = derive_view(users, state, schema)
    assert first == second
    assert first is not second
    assert _names(users) == ["John Doe", "Jane Smith", "Bob Johnson"]


def test_derive_view_with_column_missing_from_schema(users):
    schema = ColumnSchema([ColumnDescriptor("email", sortable=True)])
    assert derive_view(users, SortState("name", SortDirection.ASCENDING), schema) == users


def test_view_returns_copy(users):
    controller = TableController(_columns(), users)
    controller.view().clear()
    assert len(controller.view()) == 3


def test_sort_changes_published_on_bus(users):
    bus = EventBus()
    seen = []
    bus.subscribe(TableEvent.SORT_CHANGED, lambda e: seen.append(e.payload))
    controller = TableController(_columns(), users, event_bus=bus)
    controller.request_sort("name")
    controller.request_sort("role")
    assert seen == [SortState("name", SortDirection.ASCENDING)]


def test_sort_survives_nul_characters_in_values():
    records = [{"id": 1, "name": "a\x00b"}, {"id": 2, "name": "Amy"}]
    controller = TableController(_columns(), records)
    controller.request_sort("name")
    assert [r["id"] for r in controller.view()] == [1, 2]


def test_accented_names_sort_next_to_base_letter():
    records = [{"id": i, "name": n} for i, n in enumerate(["Zoe", "Émile", "Frank"])]
    controller = TableController(_columns(), records)
    controller.request_sort("name")
    assert _names(controller.view()) == ["Émile", "Frank", "Zoe"]

# tests/test_commands.py

from __future__ import annotations

from taskpad.cli.commands import CommandRegistry, registry
from taskpad.connectors.console_connector import handle_line
from taskpad.storage.snapshot import deserialize
from taskpad.tasks.task_models import Task


def test_command_registry_routes_and_aliases(state) -> None:
    reg = CommandRegistry()
    called: list[str] = []

    def handler(state, rest):
        called.append(rest)
        return "ok"

    reg.register("a", handler, "a", aliases=["alpha"])

    assert reg.handle(state, "/a  two  spaces") == "ok"
    assert reg.handle(state, "/ALPHA") == "ok"
    assert called == [" two  spaces", ""]


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_state_starts_from_fixture(state) -> None:
    assert [t.id for t in state.store.tasks] == ["f1", "f2"]
    assert "1. [ ] Fixture one" in registry.handle(state, "/list")
    assert "2. [x] Fixture two" in registry.handle(state, "/ls")


def test_add_toggle_remove_by_position(state, slots) -> None:
    assert registry.handle(state, "/add Call mom") == "Added #3: Call mom"
    assert registry.handle(state, "/add    ") == "Nothing to add."

    assert registry.handle(state, "/toggle 3") == "Done: Call mom"
    assert registry.handle(state, "/rm f1") == "Deleted: Fixture one"
    assert "No such task" in registry.handle(state, "/rm 99")

    assert [t.title for t in state.store.tasks] == ["Fixture two", "Call mom"]
    assert deserialize(slots.data["tasks"]) == list(state.store.tasks)
    assert len(slots.writes) == 3


def test_plain_text_adds_or_updates_draft(state) -> None:
    assert handle_line(state, "Water plants") == "Added #3: Water plants"
    assert handle_line(state, "   ") is None

    registry.handle(state, "/edit 3")
    assert state.store.is_editing("t1")
    handle_line(state, "Water the plants")
    assert "(editing" in registry.handle(state, "/list")

    assert registry.handle(state, "/save") == "Saved: Water the plants"
    assert state.store.get("t1").title == "Water the plants"


def test_save_blank_keeps_edit_open_then_cancel(state, slots) -> None:
    registry.handle(state, "/edit 1")
    handle_line(state, "/save")  # draft is the current title, so this saves
    writes = len(slots.writes)

    registry.handle(state, "/edit 1")
    state.store.update_draft("   ")
    assert registry.handle(state, "/save") == "Title cannot be empty."
    assert state.store.is_editing("f1")

    assert registry.handle(state, "/cancel") == "Edit cancelled."
    assert not state.store.is_editing()
    assert state.store.get("f1").title == "Fixture one"
    assert len(slots.writes) == writes
    assert registry.handle(state, "/save") == "Not editing anything. Use /edit <n> first."


def test_save_with_inline_title(state) -> None:
    registry.handle(state, "/edit 2")
    assert registry.handle(state, "/save Fixture 2") == "Saved: Fixture 2"
    assert state.store.tasks[1].completed is True


def test_empty_list_and_status(state) -> None:
    registry.handle(state, "/rm 1")
    registry.handle(state, "/rm 1")
    assert registry.handle(state, "/list") == "No tasks found."

    status = registry.handle(state, "/status")
    assert "slot 'tasks'" in status
    assert "0 total" in status


def test_handler_crash_is_reported(state, monkeypatch) -> None:
    def boom(task_id):
        raise RuntimeError("boom")

    monkeypatch.setattr(state.store, "toggle", boom)
    assert handle_line(state, "/toggle 1") == "Internal error while handling a command."


def test_non_ascii_digits_are_not_positions(state) -> None:
    assert handle_line(state, "/toggle ²") == "No such task: ²"
    assert [t.completed for t in state.store.tasks] == [False, True]


def test_numbers_are_positions_and_numeric_ids_need_prefix(state) -> None:
    # Numeric ids like the bundled fixture's, after the first task was deleted.
    state.store.load([Task(id="2", title="Two"), Task(id="3", title="Three")], [])

    assert registry.handle(state, "/toggle 3") == "No such task: 3"
    assert registry.handle(state, "/toggle 2") == "Done: Three"
    assert registry.handle(state, "/toggle id:2") == "Done: Two"
    assert registry.handle(state, "/rm id:9") == "No such task: id:9"
    assert "/toggle <n|id:ID>" in registry.handle(state, "/help")

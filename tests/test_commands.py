# tests/test_commands.py

from __future__ import annotations

from todo_keeper.cli.commands import CommandRegistry, registry

from .fakes import ScriptedConfirmer


def _texts(state) -> list[str]:
    return [t.text for t in state.task_store.tasks]


def test_command_registry_routes_aliases(state) -> None:
    reg = CommandRegistry()
    called: list[list[str]] = []

    def h(state, args):
        called.append(args)
        return "ok"

    reg.register("go", h, "go somewhere", aliases=["g"])

    assert reg.handle(state, "/go x y") == "ok"
    assert reg.handle(state, "/G z") == "ok"
    assert called == [["x", "y"], ["z"]]
    assert "/go - go somewhere" in reg.build_help()


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_add_and_list(state) -> None:
    assert registry.handle(state, "/add   buy milk ") == "Saved: buy milk"
    assert "empty" in (registry.handle(state, "/add") or "")

    listing = registry.handle(state, "/list") or ""
    assert "1. [ ] buy milk" in listing
    assert listing.endswith("Total todos: 1 | Selected: 0")


def test_list_when_empty(state) -> None:
    assert registry.handle(state, "/ls") == "No todos yet. Add one above!"


def test_select_by_position_toggles(state) -> None:
    for text in ("a", "b", "c"):
        state.task_store.add_task(text)

    reply = registry.handle(state, "/select 1 3") or ""
    assert "Selected: a" in reply and "Selected: c" in reply
    assert state.task_store.selected_count == 2
    assert "[x] a" in (registry.handle(state, "/list") or "")

    reply = registry.handle(state, "/sel 1") or ""
    assert "Unselected: a" in reply
    assert state.task_store.selected_count == 1


def test_select_rejects_bad_positions_without_partial_toggle(state) -> None:
    state.task_store.add_task("a")
    assert "No todo at position" in (registry.handle(state, "/select 1 9") or "")
    assert "No todo at position" in (registry.handle(state, "/select zero") or "")
    assert state.task_store.selected_count == 0
    assert "Usage" in (registry.handle(state, "/select") or "")


def test_delete_selected_command(state, confirmer: ScriptedConfirmer) -> None:
    for text in ("a", "b", "c"):
        state.task_store.add_task(text)
    assert "Nothing selected" in (registry.handle(state, "/delete") or "")

    registry.handle(state, "/select 1 3")
    reply = registry.handle(state, "/del") or ""

    assert reply.startswith("Deleted 2 todo(s).")
    assert _texts(state) == ["b"]
    assert confirmer.prompts == ["Are you sure you want to delete 2 selected todo(s)?"]


def test_delete_selected_command_declined(state, confirmer: ScriptedConfirmer) -> None:
    confirmer.answer = False
    state.task_store.add_task("a")
    registry.handle(state, "/select 1")

    assert "Cancelled" in (registry.handle(state, "/delete") or "")
    assert _texts(state) == ["a"]
    assert state.task_store.selected_count == 1


def test_rm_deletes_without_prompt(state, confirmer: ScriptedConfirmer) -> None:
    state.task_store.add_task("a")
    state.task_store.add_task("b")
    registry.handle(state, "/select 1 2")

    reply = registry.handle(state, "/rm 1") or ""

    assert reply.startswith("Deleted: a")
    assert _texts(state) == ["b"]
    assert state.task_store.selected_count == 1
    assert confirmer.prompts == []
    assert "Usage" in (registry.handle(state, "/rm") or "")
    assert "No todo at position" in (registry.handle(state, "/rm 5") or "")


def test_flush_command(state, mirror, confirmer: ScriptedConfirmer) -> None:
    assert registry.handle(state, "/flush") == "The list is already empty."
    assert confirmer.prompts == []

    state.task_store.add_task("a")
    assert registry.handle(state, "/clear") == "All todos deleted."
    assert _texts(state) == []
    assert "todos" not in mirror.data


def test_count_command(state) -> None:
    state.task_store.add_task("a")
    state.task_store.add_task("b")
    registry.handle(state, "/select 2")
    assert registry.handle(state, "/count") == "Total todos: 2 | Selected: 1"
    assert registry.handle(state, "/status") == "Total todos: 2 | Selected: 1"


def test_help_lists_commands(state) -> None:
    text = registry.handle(state, "/help") or ""
    for name in ("/list", "/add", "/select", "/delete", "/rm", "/flush", "/count"):
        assert name in text


def test_delete_of_stale_selection_reports_zero_not_cancelled(state, confirmer: ScriptedConfirmer) -> None:
    state.task_store.add_task("a")
    state.task_store.toggle_select(999)

    reply = registry.handle(state, "/delete") or ""

    assert reply.startswith("Deleted 0 todo(s).")
    assert "Cancelled" not in reply
    assert state.task_store.selected_count == 0
    assert _texts(state) == ["a"]
    assert len(confirmer.prompts) == 1

# src/taskpad/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_models import Task

CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        The handler receives the raw text after "/command " so that task
        titles keep their spacing.
        """
        if not line.startswith("/"):
            return None

        body = line[1:]
        name, _, rest = body.partition(" ")
        name = name.strip().lower()
        if not name:
            return "Empty command. Use /help to list available commands."

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, rest)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()

ID_PREFIX = "id:"


def resolve_task(state: AppState, ref: str) -> Task | None:
    """
    Find a task by reference:
    - "3"      -> 1-based position in the list (never an id)
    - "id:3"   -> task whose id is "3"
    - anything else is looked up as an id
    """
    ref = ref.strip()
    if not ref:
        return None
    if ref.startswith(ID_PREFIX):
        return state.store.get(ref[len(ID_PREFIX) :])
    if ref.isdecimal():
        tasks = state.store.tasks
        pos = int(ref)
        return tasks[pos - 1] if 1 <= pos <= len(tasks) else None
    return state.store.get(ref)


def render_tasks(state: AppState) -> str:
    store = state.store
    if not len(store):
        return "No tasks found."

    lines: list[str] = []
    draft = store.draft
    for i, task in enumerate(store.tasks, start=1):
        mark = "x" if task.completed else " "
        if draft is not None and draft.task_id == task.id:
            lines.append(f"{i:>3}. [{mark}] {draft.text}  (editing: /save or /cancel)")
        else:
            lines.append(f"{i:>3}. [{mark}] {task.title}")
    return "\n".join(lines)


def cmd_help(state: AppState, rest: str) -> str:
    return registry.build_help()


def cmd_list(state: AppState, rest: str) -> str:
    return render_tasks(state)


def cmd_add(state: AppState, rest: str) -> str:
    task = state.store.add(rest)
    if task is None:
        return "Nothing to add."
    return f"Added #{len(state.store)}: {task.title}"


def cmd_toggle(state: AppState, rest: str) -> str:
    task = resolve_task(state, rest)
    if task is None:
        return f"No such task: {rest.strip() or '(none given)'}"
    updated = state.store.toggle(task.id)
    if updated is None:
        return f"No such task: {rest.strip()}"
    return f"{'Done' if updated.completed else 'Not done'}: {updated.title}"


def cmd_remove(state: AppState, rest: str) -> str:
    task = resolve_task(state, rest)
    if task is None:
        return f"No such task: {rest.strip() or '(none given)'}"
    removed = state.store.remove(task.id)
    if removed is None:
        return f"No such task: {rest.strip()}"
    return f"Deleted: {removed.title}"


def cmd_edit(state: AppState, rest: str) -> str:
    """
    /edit <n|id:ID> -> start editing; type the new title, then /save or /cancel
    """
    task = resolve_task(state, rest)
    if task is None:
        return f"No such task: {rest.strip() or '(none given)'}"
    state.store.begin_edit(task.id, task.title)
    return (
        f"Editing: {task.title}\n"
        "Type the new title, then /save (or /cancel)."
    )


def cmd_save(state: AppState, rest: str) -> str:
    store = state.store
    if store.draft is None:
        return "Not editing anything. Use /edit <n> first."
    if rest.strip():
        store.update_draft(rest)
    updated = store.commit_edit()
    if store.draft is not None:
        return "Title cannot be empty."
    if updated is None:
        return "That task no longer exists; edit dropped."
    return f"Saved: {updated.title}"


def cmd_cancel(state: AppState, rest: str) -> str:
    if state.store.draft is None:
        return "Not editing anything."
    state.store.cancel_edit()
    return "Edit cancelled."


def cmd_status(state: AppState, rest: str) -> str:
    store = state.store
    done = sum(1 for t in store.tasks if t.completed)
    db_path = getattr(state.settings, "storage_db_path", "?")
    draft = store.draft
    editing = "no"
    if draft is not None:
        target = store.get(draft.task_id)
        editing = f"yes ({target.title if target else draft.task_id})"
    return (
        "Status:\n"
        f"  Storage: {db_path} (slot '{state.mirror.key}')\n"
        f"  Tasks: {len(store)} total, {done} done, {len(store) - done} open\n"
        f"  Editing: {editing}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "list",
    cmd_list,
    help_text="Show the task list (n in /toggle, /rm, /edit is the number shown here).",
    aliases=["ls"],
)
registry.register("add", cmd_add, help_text="Add a task: /add <title> (or just type the title).")
registry.register("toggle", cmd_toggle, help_text="Mark done/not done: /toggle <n|id:ID>.", aliases=["t"])
registry.register("rm", cmd_remove, help_text="Delete a task: /rm <n|id:ID>.", aliases=["del", "delete"])
registry.register("edit", cmd_edit, help_text="Start editing a title: /edit <n|id:ID>.", aliases=["e"])
registry.register("save", cmd_save, help_text="Save the edited title: /save [new title].")
registry.register("cancel", cmd_cancel, help_text="Discard the current edit.")
registry.register("status", cmd_status, help_text="Show storage and task counts.")

"""
In-memory commander backend.

CommandStore holds committed records for the whole process; each InMemoryCommanderRepo
stages its own writes and applies them to the store in save_changes.
"""

from threading import Lock
from typing import Callable, Dict, List, Tuple
from framework.logging.logger import get_logger
from .models import Command
from .repository import ICommanderRepo, command_not_found


class CommandStore:
    """Process-wide committed state; ids start at 1."""

    def __init__(self) -> None:
        self._commands: Dict[int, Command] = {}
        self._next_id = 1
        self._lock = Lock()

    def get(self, id: int):
        with self._lock:
            command = self._commands.get(id)
            return command.copy_record() if command else None

    def snapshot(self) -> List[Command]:
        with self._lock:
            return [command.copy_record() for command in self._commands.values()]

    def contains(self, id: int) -> bool:
        with self._lock:
            return id in self._commands

    def apply(self, operations: List[Tuple[str, Command]]) -> int:
        """Apply staged operations in order; return how many changed the store."""
        handlers: Dict[str, Callable[[Command], bool]] = {
            "create": self._insert,
            "update": self._replace,
            "delete": self._remove,
        }
        with self._lock:
            return sum(1 for op, command in operations if handlers[op](command))

    def _insert(self, command: Command) -> bool:
        command.id = self._next_id
        self._next_id += 1
        self._commands[command.id] = command.copy_record()
        return True

    def _replace(self, command: Command) -> bool:
        # Deleted by another request since it was staged
        if command.id not in self._commands:
            return False
        self._commands[command.id] = command.copy_record()
        return True

    def _remove(self, command: Command) -> bool:
        return self._commands.pop(command.id, None) is not None


class InMemoryCommanderRepo(ICommanderRepo):
    """Commander repository over a CommandStore; one instance per request."""

    def __init__(self, store: CommandStore):
        self.store = store
        self._pending: List[Tuple[str, Command]] = []

    async def create_command(self, command: Command) -> None:
        if command is None:
            raise ValueError("command must not be None")
        self._pending.append(("create", command))

    async def delete_command(self, command: Command) -> None:
        if command is None:
            raise ValueError("command must not be None")
        self._ensure_exists(command.id)
        self._pending.append(("delete", command))

    async def update_command(self, command: Command) -> None:
        if command is None:
            raise ValueError("command must not be None")
        self._ensure_exists(command.id)
        self._pending.append(("update", command.copy_record()))

    async def get_command_by_id(self, id: int) -> Command:
        command = self.store.get(id)
        if command is None:
            raise command_not_found(id)
        return command

    async def get_all_commands(self) -> List[Command]:
        return self.store.snapshot()

    async def save_changes(self) -> bool:
        pending, self._pending = self._pending, []
        applied = self.store.apply(pending)
        get_logger(__name__).debug(f"Applied {applied} of {len(pending)} staged command change(s)")
        return applied > 0

    def _ensure_exists(self, id: int) -> None:
        if id is None or not self.store.contains(id):
            raise command_not_found(id)

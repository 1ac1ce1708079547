"""Read-only stand-in for the commander repository, serving fixed sample commands."""

from typing import List
from framework.exceptions.handler import UnsupportedOperationException
from .models import Command
from .repository import ICommanderRepo


class MockCommanderRepo(ICommanderRepo):
    """Read-only stub with fixed sample data, for smoke testing without a database."""

    async def create_command(self, command: Command) -> None:
        raise UnsupportedOperationException("create_command is not supported by the mock repository")

    async def delete_command(self, command: Command) -> None:
        raise UnsupportedOperationException("delete_command is not supported by the mock repository")

    async def update_command(self, command: Command) -> None:
        raise UnsupportedOperationException("update_command is not supported by the mock repository")

    async def get_all_commands(self) -> List[Command]:
        return [
            Command(id=0, how_to="Drive a car", line="Pass the driving test", platform="Car"),
            Command(id=1, how_to="Ride a horse", line="Make the horse calm", platform="Horse"),
            Command(id=2, how_to="Play football", line="Discipline & hard work", platform="Ground"),
        ]

    async def get_command_by_id(self, id: int) -> Command:
        # Not a lookup: the same record comes back whatever id is asked for
        return Command(id=0, how_to="Drive a car", line="Pass the driving test", platform="Ground")

    async def save_changes(self) -> bool:
        raise UnsupportedOperationException("save_changes is not supported by the mock repository")

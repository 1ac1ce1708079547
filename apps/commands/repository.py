"""Commander repository interface and its SQL implementation."""

from abc import ABC, abstractmethod
from typing import List
from framework.logging.logger import get_logger
from framework.exceptions.handler import NotFoundException
from framework.repository.base import BaseRepository
from framework.repository.unit_of_work import UnitOfWork
from .models import Command


class ICommanderRepo(ABC):
    """
    Persistence contract for Command records.

    Writes are only staged by create/update/delete; save_changes makes them durable.
    """

    @abstractmethod
    async def create_command(self, command: Command) -> None:
        """Stage an insert; command.id is set in place once save_changes succeeds."""

    @abstractmethod
    async def delete_command(self, command: Command) -> None:
        """Stage removal of the record with command.id; NotFoundException if absent."""

    @abstractmethod
    async def update_command(self, command: Command) -> None:
        """Stage a full replace of the record with command.id; NotFoundException if absent."""

    @abstractmethod
    async def get_command_by_id(self, id: int) -> Command:
        """Return the record with id; NotFoundException if absent."""

    @abstractmethod
    async def get_all_commands(self) -> List[Command]:
        """Return every record, in no particular order."""

    @abstractmethod
    async def save_changes(self) -> bool:
        """Commit staged changes; True if at least one row was written."""


def command_not_found(id: int) -> NotFoundException:
    return NotFoundException(f"Command {id} not found", detail={"id": id})


class SqlCommanderRepo(BaseRepository[Command], ICommanderRepo):
    """Commander repository over an SQLModel session; reads hit the database immediately."""

    def __init__(self, uow: UnitOfWork):
        super().__init__(uow, Command)

    async def create_command(self, command: Command) -> None:
        if command is None:
            raise ValueError("command must not be None")
        await self.create(command)

    async def delete_command(self, command: Command) -> None:
        if command is None:
            raise ValueError("command must not be None")
        if not await self.delete(command.id):
            raise command_not_found(command.id)

    async def update_command(self, command: Command) -> None:
        if command is None:
            raise ValueError("command must not be None")
        if await self.update(command) is None:
            raise command_not_found(command.id)

    async def get_command_by_id(self, id: int) -> Command:
        command = await self.get_by_id(id)
        if command is None:
            raise command_not_found(id)
        return command

    async def get_all_commands(self) -> List[Command]:
        return await self.get_all()

    async def save_changes(self) -> bool:
        rows = await self.uow.commit()
        get_logger(__name__).debug(f"Committed {rows} command row(s)")
        return rows > 0

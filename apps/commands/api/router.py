from typing import AsyncGenerator
from fastapi import APIRouter, Depends, Request, status
from loguru import logger
from framework.config import RepoBackend
from framework.database.manager import DatabaseManager
from framework.repository.unit_of_work import UnitOfWork
from framework.response import ResponseModel
from ..memory_repository import InMemoryCommanderRepo
from ..mock_repository import MockCommanderRepo
from ..repository import ICommanderRepo, SqlCommanderRepo
from ..schemas import CommandCreateDto, CommandReadDto, CommandUpdateDto

router = APIRouter()

async def get_db():
    manager = DatabaseManager.get_instance()
    async for session in manager.sql.get_session():
        yield session

async def get_commander_repo(request: Request) -> AsyncGenerator[ICommanderRepo, None]:
    """Dependency: a fresh repository for this request, from the backend chosen at startup."""
    backend = request.app.state.repo_backend
    if backend == RepoBackend.MOCK:
        yield MockCommanderRepo()
    elif backend == RepoBackend.MEMORY:
        yield InMemoryCommanderRepo(request.app.state.command_store)
    else:
        async for session in get_db():
            yield UnitOfWork(session).get_repository(SqlCommanderRepo)

@router.get("")
async def get_all_commands(repo: ICommanderRepo = Depends(get_commander_repo)):
    """List every command."""
    commands = await repo.get_all_commands()
    return ResponseModel.success(data=[CommandReadDto.to_response(c) for c in commands])

@router.get("/{id}")
async def get_command_by_id(id: int, repo: ICommanderRepo = Depends(get_commander_repo)):
    """Get one command; 404 if it does not exist."""
    command = await repo.get_command_by_id(id)
    return ResponseModel.success(data=CommandReadDto.to_response(command))

@router.post("", status_code=status.HTTP_201_CREATED)
async def create_command(
    data: CommandCreateDto,
    repo: ICommanderRepo = Depends(get_commander_repo)
):
    """Create a command; the response carries the assigned id."""
    command = data.to_command()
    await repo.create_command(command)
    await repo.save_changes()
    logger.info(f"Command {command.id} created")
    return ResponseModel.success(data=CommandReadDto.to_response(command), code=201)

@router.put("/{id}")
async def update_command(
    id: int,
    data: CommandUpdateDto,
    repo: ICommanderRepo = Depends(get_commander_repo)
):
    """Replace every field of a command."""
    command = await repo.get_command_by_id(id)
    data.apply_to(command)
    await repo.update_command(command)
    await repo.save_changes()
    logger.info(f"Command {id} updated")
    return ResponseModel.success(data=CommandReadDto.to_response(command))

@router.delete("/{id}")
async def delete_command(id: int, repo: ICommanderRepo = Depends(get_commander_repo)):
    """Delete a command."""
    command = await repo.get_command_by_id(id)
    await repo.delete_command(command)
    await repo.save_changes()
    logger.info(f"Command {id} deleted")
    return ResponseModel.success()

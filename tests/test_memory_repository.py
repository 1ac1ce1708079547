"""In-memory repository: staged writes applied to a shared store on save_changes."""
import pytest
from framework.exceptions.handler import NotFoundException
from apps.commands.models import Command
from apps.commands.memory_repository import CommandStore, InMemoryCommanderRepo


@pytest.fixture
def store() -> CommandStore:
    return CommandStore()


@pytest.fixture
def repo(store: CommandStore) -> InMemoryCommanderRepo:
    return InMemoryCommanderRepo(store)


async def seed(repo: InMemoryCommanderRepo, *how_tos: str) -> list[Command]:
    commands = [Command(how_to=h, line=f"{h} line", platform="Shell") for h in how_tos]
    for command in commands:
        await repo.create_command(command)
    await repo.save_changes()
    return commands


@pytest.mark.asyncio
async def test_create_assigns_ids_on_save(repo: InMemoryCommanderRepo):
    first = Command(how_to="a", line="b", platform="c")
    second = Command(how_to="d", line="e", platform="f")
    await repo.create_command(first)
    await repo.create_command(second)

    assert first.id is None
    assert await repo.get_all_commands() == []

    assert await repo.save_changes() is True
    assert (first.id, second.id) == (1, 2)

    stored = await repo.get_command_by_id(2)
    assert (stored.how_to, stored.line, stored.platform) == ("d", "e", "f")


@pytest.mark.asyncio
async def test_reads_return_copies(repo: InMemoryCommanderRepo):
    [command] = await seed(repo, "copy")

    fetched = await repo.get_command_by_id(command.id)
    fetched.line = "mutated"
    command.line = "mutated too"

    assert (await repo.get_command_by_id(command.id)).line == "copy line"


@pytest.mark.asyncio
async def test_update_replaces_record(repo: InMemoryCommanderRepo):
    [command] = await seed(repo, "before")

    await repo.update_command(Command(id=command.id, how_to="after", line="new", platform="Other"))
    assert (await repo.get_command_by_id(command.id)).how_to == "before"

    assert await repo.save_changes() is True
    stored = await repo.get_command_by_id(command.id)
    assert (stored.how_to, stored.line, stored.platform) == ("after", "new", "Other")


@pytest.mark.asyncio
async def test_delete_removes_record(repo: InMemoryCommanderRepo):
    keep, drop = await seed(repo, "keep", "drop")

    await repo.delete_command(drop)
    assert await repo.save_changes() is True

    with pytest.raises(NotFoundException):
        await repo.get_command_by_id(drop.id)
    assert [c.id for c in await repo.get_all_commands()] == [keep.id]


@pytest.mark.asyncio
@pytest.mark.parametrize("operation", ["update_command", "delete_command"])
async def test_unknown_id_raises_not_found(repo: InMemoryCommanderRepo, operation: str):
    with pytest.raises(NotFoundException):
        await getattr(repo, operation)(Command(id=42, how_to="a", line="b", platform="c"))


@pytest.mark.asyncio
async def test_get_unknown_id_raises_not_found(repo: InMemoryCommanderRepo):
    with pytest.raises(NotFoundException):
        await repo.get_command_by_id(1)


@pytest.mark.asyncio
async def test_save_changes_without_staged_work(repo: InMemoryCommanderRepo):
    assert await repo.save_changes() is False


@pytest.mark.asyncio
async def test_store_is_shared_between_repositories(store: CommandStore, repo: InMemoryCommanderRepo):
    [command] = await seed(repo, "shared")
    other = InMemoryCommanderRepo(store)

    assert (await other.get_command_by_id(command.id)).how_to == "shared"


@pytest.mark.asyncio
async def test_update_of_concurrently_deleted_record_is_skipped(store: CommandStore, repo: InMemoryCommanderRepo):
    [command] = await seed(repo, "race")
    other = InMemoryCommanderRepo(store)

    await repo.update_command(Command(id=command.id, how_to="x", line="y", platform="z"))
    await other.delete_command(command)
    await other.save_changes()

    assert await repo.save_changes() is False

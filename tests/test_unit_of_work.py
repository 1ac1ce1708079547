"""UnitOfWork transaction boundary."""
import pytest
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from framework.repository.unit_of_work import UnitOfWork
from apps.commands.models import Command
from apps.commands.repository import SqlCommanderRepo


def test_session_required():
    with pytest.raises(ValueError):
        UnitOfWork(None)


@pytest.mark.asyncio
async def test_get_repository_shares_session(async_session: AsyncSession):
    uow = UnitOfWork(async_session)
    repo = uow.get_repository(SqlCommanderRepo)

    assert repo.uow is uow
    assert repo.session is async_session


@pytest.mark.asyncio
async def test_context_manager_commits(async_session: AsyncSession):
    async with UnitOfWork(async_session) as uow:
        uow.session.add(Command(how_to="a", line="b", platform="c"))

    result = await async_session.exec(select(Command))
    assert len(result.all()) == 1


@pytest.mark.asyncio
async def test_context_manager_rolls_back_on_error(async_session: AsyncSession):
    with pytest.raises(RuntimeError):
        async with UnitOfWork(async_session) as uow:
            uow.session.add(Command(how_to="a", line="b", platform="c"))
            await uow.flush()
            raise RuntimeError("boom")

    result = await async_session.exec(select(Command))
    assert result.all() == []


@pytest.mark.asyncio
async def test_counter_ignores_commits_made_outside(async_session: AsyncSession):
    uow = UnitOfWork(async_session)
    async_session.add(Command(how_to="a", line="b", platform="c"))
    await async_session.commit()

    assert await uow.commit() == 0


@pytest.mark.asyncio
async def test_hooks_registered_once(async_session: AsyncSession):
    UnitOfWork(async_session)
    uow = UnitOfWork(async_session)
    async_session.add(Command(how_to="a", line="b", platform="c"))

    assert await uow.commit() == 1

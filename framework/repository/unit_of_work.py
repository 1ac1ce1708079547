"""
Unit of Work: owns the session and the transaction boundary.
"""

from sqlalchemy import event
from sqlalchemy.orm import Session
from sqlmodel.ext.asyncio.session import AsyncSession

# Session.info key holding rows written by flushes in the current transaction
ROWS_FLUSHED_KEY = "uow_rows_flushed"


def _count_flushed_rows(session: Session, flush_context) -> None:
    # new/dirty/deleted still hold the pre-flush state inside after_flush
    modified = [obj for obj in session.dirty if session.is_modified(obj, include_collections=False)]
    written = len(session.new) + len(session.deleted) + len(modified)
    session.info[ROWS_FLUSHED_KEY] = session.info.get(ROWS_FLUSHED_KEY, 0) + written


def _reset_flushed_rows(session: Session) -> None:
    session.info.pop(ROWS_FLUSHED_KEY, None)


_SESSION_HOOKS = (
    ("after_flush", _count_flushed_rows),
    ("after_commit", _reset_flushed_rows),
    ("after_rollback", _reset_flushed_rows),
)


class UnitOfWork:
    """Shares one session between repositories and commits their staged changes together."""

    def __init__(self, session: AsyncSession):
        if session is None:
            raise ValueError("Session must be provided.")

        self.session = session
        sync_session = session.sync_session
        for name, hook in _SESSION_HOOKS:
            if not event.contains(sync_session, name, hook):
                event.listen(sync_session, name, hook)

    def get_repository(self, repo_class):
        """Create a repository bound to this unit of work."""
        return repo_class(self)

    async def commit(self) -> int:
        """Flush and commit all staged changes; return the number of rows written."""
        try:
            await self.session.flush()
            written = self.session.info.get(ROWS_FLUSHED_KEY, 0)
            await self.session.commit()
        except Exception:
            await self.rollback()
            raise
        return written

    async def rollback(self) -> None:
        """Rollback all changes."""
        await self.session.rollback()

    async def flush(self) -> None:
        """Flush session (e.g. to get auto-increment IDs)."""
        await self.session.flush()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            await self.rollback()
        else:
            await self.commit()

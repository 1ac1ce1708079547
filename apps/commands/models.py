from typing import Optional
from sqlalchemy import Column, Integer, String, Text
from sqlmodel import SQLModel, Field


class Command(SQLModel, table=True):
    """A how-to with the command line that performs it on a given platform."""
    __tablename__ = "Commands"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column("Id", Integer, primary_key=True, autoincrement=True),
    )
    how_to: str = Field(sa_column=Column("HowTo", String(250), nullable=False))
    line: str = Field(sa_column=Column("Line", Text, nullable=False))
    platform: str = Field(sa_column=Column("Platform", Text, nullable=False))

    def copy_record(self) -> "Command":
        """Detached copy carrying the same field values."""
        return Command(id=self.id, how_to=self.how_to, line=self.line, platform=self.platform)

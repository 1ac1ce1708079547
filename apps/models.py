"""
Model registration for migrations: import all models that should be migrated by Alembic here.
alembic/env.py reads SQLModel.metadata after importing this module.
"""
from apps.commands.models import Command

__all__ = ["Command"]

"""
Unit of Work: owns the session shared by repositories and its transaction boundary.
"""

from typing import Dict, Optional, Type, TypeVar
from sqlmodel.ext.asyncio.session import AsyncSession
from .base import BaseRepository

R = TypeVar("R", bound=BaseRepository)


class UnitOfWork:
    """Hands out repositories bound to one session; commits or rolls back as a whole."""

    def __init__(self, session: Optional[AsyncSession] = None):
        if session is None:
            raise ValueError("Session must be provided. Pass the request-scoped session explicitly.")

        self.session = session
        self._repositories: Dict[str, BaseRepository] = {}

    def get_repository(self, repo_class: Type[R]) -> R:
        """Get or create a repository instance (cached per class)."""
        cache_key = repo_class.__name__
        if cache_key not in self._repositories:
            self._repositories[cache_key] = repo_class(self.session)
        return self._repositories[cache_key]

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()


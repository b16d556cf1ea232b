"""Department repository implementation."""

from typing import Optional
from framework.repository.base import BaseRepository
from .models import Department


class DepartmentRepository(BaseRepository[Department]):
    """Department repository."""

    def __init__(self, session):
        super().__init__(session, Department)

    async def get_by_name(self, name: str) -> Optional[Department]:
        """Find department by name."""
        return await self.find_one(name=name)

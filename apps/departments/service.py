from typing import List
from framework.logging.logger import get_logger
from framework.repository.unit_of_work import UnitOfWork
from .exceptions import DepartmentNotFound
from .models import MAX_DEPARTMENT_ID, Department
from .repository import DepartmentRepository

logger = get_logger("department_service")

def _storable(department_id: int) -> bool:
    return 1 <= department_id <= MAX_DEPARTMENT_ID

class DepartmentService:
    """Department CRUD facade; create always inserts, lookups and deletes require the row."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    @property
    def repo(self) -> DepartmentRepository:
        return self.uow.get_repository(DepartmentRepository)

    async def create(self, department: Department) -> Department:
        """Persist as a new row; any caller-supplied id is dropped first."""
        department.id = None
        try:
            saved = await self.repo.save(department)
            await self.uow.commit()
        except Exception:
            await self.uow.rollback()
            raise
        logger.info(f"Department {saved.id} created: {saved.name}")
        return saved

    async def get_all(self) -> List[Department]:
        return await self.repo.find_all()

    async def get_by_id(self, department_id: int) -> Department:
        department = None
        if _storable(department_id):
            department = await self.repo.find_by_id(department_id)
        if department is None:
            logger.warning(f"Department {department_id} not found")
            raise DepartmentNotFound(department_id)
        return department

    async def delete(self, department_id: int) -> None:
        """Delete an existing department.

        The existence check and the delete are separate statements; a
        concurrent delete in between makes the second one a no-op.
        """
        if not _storable(department_id) or not await self.repo.exists_by_id(department_id):
            logger.warning(f"Department {department_id} not found")
            raise DepartmentNotFound(department_id)
        try:
            await self.repo.delete_by_id(department_id)
            await self.uow.commit()
        except Exception:
            await self.uow.rollback()
            raise
        logger.info(f"Department {department_id} deleted")

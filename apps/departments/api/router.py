from fastapi import APIRouter, Depends, Path
from sqlmodel.ext.asyncio.session import AsyncSession
from framework.database.manager import DatabaseManager
from framework.repository.unit_of_work import UnitOfWork
from framework.response import ResponseModel
from ..models import MAX_DEPARTMENT_ID, Department, DepartmentCreate, DepartmentRead
from ..service import DepartmentService

router = APIRouter()

# Ids beyond a signed 64-bit integer cannot exist in the store
DepartmentId = Path(..., ge=1, le=MAX_DEPARTMENT_ID, description="Department id")

async def get_db():
    """Get database session."""
    async for session in DatabaseManager.get_instance().session():
        yield session

def get_uow(
    db: AsyncSession = Depends(get_db)
) -> UnitOfWork:
    """Dependency: create UnitOfWork."""
    return UnitOfWork(session=db)

def get_department_service(uow: UnitOfWork = Depends(get_uow)) -> DepartmentService:
    """Dependency: create DepartmentService."""
    return DepartmentService(uow)

def to_read(department: Department) -> dict:
    return DepartmentRead.model_validate(department.model_dump()).model_dump()

@router.post("")
async def create_department(
    payload: DepartmentCreate,
    service: DepartmentService = Depends(get_department_service)
):
    """Create a department; an id in the payload is ignored."""
    department = await service.create(Department.model_validate(payload))
    return ResponseModel.success(data=to_read(department))

@router.get("")
async def list_departments(
    service: DepartmentService = Depends(get_department_service)
):
    departments = await service.get_all()
    return ResponseModel.success(data=[to_read(d) for d in departments])

@router.get("/{department_id}")
async def get_department(
    department_id: int = DepartmentId,
    service: DepartmentService = Depends(get_department_service)
):
    department = await service.get_by_id(department_id)
    return ResponseModel.success(data=to_read(department))

@router.delete("/{department_id}")
async def delete_department(
    department_id: int = DepartmentId,
    service: DepartmentService = Depends(get_department_service)
):
    await service.delete(department_id)
    return ResponseModel.success(data={"id": department_id})

from sqlmodel import SQLModel, Field
from typing import Optional

# Primary keys are signed 64-bit integers in every supported store
MAX_DEPARTMENT_ID = 2**63 - 1

class DepartmentBase(SQLModel):
    name: str = Field(index=True, max_length=100, description="Department name")
    description: Optional[str] = Field(default=None, max_length=255, description="Free-text description")

class Department(DepartmentBase, table=True):
    """Department model; id is assigned by the store on insert."""
    __tablename__ = "departments"

    id: Optional[int] = Field(default=None, primary_key=True)

class DepartmentCreate(DepartmentBase):
    """Create payload; a supplied id is accepted but discarded."""
    id: Optional[int] = None

class DepartmentRead(DepartmentBase):
    id: int

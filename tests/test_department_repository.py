"""Department repository test cases."""
import pytest
from sqlmodel.ext.asyncio.session import AsyncSession
from apps.departments.models import Department
from apps.departments.repository import DepartmentRepository


class TestSave:
    """save() inserts new rows and updates existing ones."""

    @pytest.mark.asyncio
    async def test_save_assigns_id(self, department_repo: DepartmentRepository):
        department = await department_repo.save(Department(name="Eng"))

        assert department.id is not None
        assert await department_repo.exists_by_id(department.id)

    @pytest.mark.asyncio
    async def test_save_with_existing_id_updates(
        self,
        department_repo: DepartmentRepository,
        sample_department: Department
    ):
        updated = await department_repo.save(
            Department(id=sample_department.id, name="Platform")
        )

        assert updated.id == sample_department.id
        assert await department_repo.count() == 1
        found = await department_repo.find_by_id(sample_department.id)
        assert found.name == "Platform"


class TestQueries:
    """Read primitives."""

    @pytest.mark.asyncio
    async def test_find_all_returns_list_in_id_order(self, department_repo: DepartmentRepository):
        for name in ("Eng", "Sales", "Ops"):
            await department_repo.save(Department(name=name))

        departments = await department_repo.find_all()

        assert isinstance(departments, list)
        assert [d.name for d in departments] == ["Eng", "Sales", "Ops"]
        assert [d.id for d in departments] == sorted(d.id for d in departments)

    @pytest.mark.asyncio
    async def test_find_all_empty(self, department_repo: DepartmentRepository):
        assert await department_repo.find_all() == []

    @pytest.mark.asyncio
    async def test_find_by_id_missing_returns_none(self, department_repo: DepartmentRepository):
        assert await department_repo.find_by_id(404) is None

    @pytest.mark.asyncio
    async def test_exists_by_id(
        self,
        department_repo: DepartmentRepository,
        sample_department: Department
    ):
        assert await department_repo.exists_by_id(sample_department.id) is True
        assert await department_repo.exists_by_id(sample_department.id + 1) is False

    @pytest.mark.asyncio
    async def test_get_by_name(
        self,
        department_repo: DepartmentRepository,
        sample_department: Department
    ):
        found = await department_repo.get_by_name("Engineering")

        assert found is not None
        assert found.id == sample_department.id
        assert await department_repo.get_by_name("Marketing") is None


class TestDeleteById:
    """delete_by_id() removes rows and ignores missing ones."""

    @pytest.mark.asyncio
    async def test_delete_existing(
        self,
        department_repo: DepartmentRepository,
        async_session: AsyncSession,
        sample_department: Department
    ):
        await department_repo.delete_by_id(sample_department.id)
        await async_session.commit()

        assert await department_repo.exists_by_id(sample_department.id) is False
        assert await department_repo.find_by_id(sample_department.id) is None

    @pytest.mark.asyncio
    async def test_delete_missing_is_noop(
        self,
        department_repo: DepartmentRepository,
        sample_department: Department
    ):
        await department_repo.delete_by_id(sample_department.id + 100)

        assert await department_repo.count() == 1


class TestFilters:
    """find_one()/count() reject unknown field names."""

    @pytest.mark.asyncio
    async def test_find_one_unknown_field(
        self,
        department_repo: DepartmentRepository,
        sample_department: Department
    ):
        with pytest.raises(AttributeError, match="nmae"):
            await department_repo.find_one(nmae="Engineering")

    @pytest.mark.asyncio
    async def test_count_unknown_field(self, department_repo: DepartmentRepository):
        with pytest.raises(AttributeError):
            await department_repo.count(title="Eng")

    @pytest.mark.asyncio
    async def test_count_by_field(
        self,
        department_repo: DepartmentRepository,
        sample_department: Department
    ):
        await department_repo.save(Department(name="Sales"))

        assert await department_repo.count(name="Sales") == 1
        assert await department_repo.count() == 2

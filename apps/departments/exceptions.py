from framework.exceptions.handler import NotFoundException

class DepartmentNotFound(NotFoundException):
    """No department row exists for the given id."""
    def __init__(self, department_id: int):
        super().__init__(f"Department not found: {department_id}")
        self.department_id = department_id

"""Employee domain service."""

from typing import Optional

from fleetledger.database.base import Database
from fleetledger.domain.entities import Employee as EmployeeEntity
from fleetledger.domain.errors import ValidationError


class EmployeeService:
    """Service for managing employees that transactions can be attributed to."""

    def __init__(self, db: Database):
        """Initialize employee service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_employee(self, name: str, employee_id: Optional[str] = None) -> str:
        """Create a new employee.

        Returns:
            Employee ID

        Raises:
            ValidationError: If the name is blank or the ID is taken
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Employee name cannot be empty")
        if employee_id and self.db.employee_exists(employee_id):
            raise ValidationError(f"Employee with ID '{employee_id}' already exists")
        return self.db.create_employee(name=name, employee_id=employee_id or None)

    def list_employees(self) -> list[EmployeeEntity]:
        return self.db.list_employees()

"""
Org Tree Kernel: Employee Factory Helpers
"""

from __future__ import annotations

from .domain_types import Employee, validate_employee_id


def create_employee(
    employee_id: int,
    name: str,
    subordinates: list[Employee] | None = None,
) -> Employee:
    """Create an Employee with sensible defaults."""
    validate_employee_id(employee_id)
    return Employee(
        id=employee_id,
        name=name,
        subordinates=list(subordinates or []),
    )

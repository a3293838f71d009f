"""
Org Tree Kernel: Tree Construction from Nested Data

pydantic models validating a nested employee payload before it is turned
into Employee nodes. Accepts both ``id`` and the legacy ``uniqueId`` key.
"""

from __future__ import annotations

from typing import Any, Dict, List, Set

from pydantic import BaseModel, ConfigDict, Field, StrictInt, model_validator

from .domain_types import Employee


class EmployeeModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    id: StrictInt = Field(alias="uniqueId")
    name: str
    subordinates: List["EmployeeModel"] = Field(default_factory=list)

    def to_employee(self) -> Employee:
        return Employee(
            id=self.id,
            name=self.name,
            subordinates=[s.to_employee() for s in self.subordinates],
        )


EmployeeModel.model_rebuild()


class OrgChartModel(BaseModel):
    ceo: EmployeeModel

    @model_validator(mode="after")
    def _unique_ids(self) -> "OrgChartModel":
        seen: Set[int] = set()
        stack: List[EmployeeModel] = [self.ceo]
        while stack:
            node = stack.pop()
            if node.id in seen:
                raise ValueError(f"duplicate employee id {node.id}")
            seen.add(node.id)
            stack.extend(node.subordinates)
        return self


def build_employee_tree(data: Dict[str, Any]) -> Employee:
    """
    Validate a nested ``{id|uniqueId, name, subordinates}`` payload and
    build the Employee tree. Raises pydantic.ValidationError.
    """
    return OrgChartModel.model_validate({"ceo": data}).ceo.to_employee()

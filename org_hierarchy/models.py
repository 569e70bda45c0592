from __future__ import annotations

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class Employee(BaseModel):
    """Tree node - one employee plus the subordinates it owns."""

    id: int
    name: str
    role: str  # "position" in the menu
    children: list[Employee] = Field(default_factory=list)

    def __repr_args__(self):
        # children shown as a count
        yield "id", self.id
        yield "name", self.name
        yield "role", self.role
        yield "children", len(self.children)

    def to_record(self) -> EmployeeRecord:
        return EmployeeRecord(id=self.id, name=self.name, role=self.role)


class EmployeeRecord(BaseModel):
    """Snapshot returned by lookups; never aliases a tree node."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    role: str


class EmployeeSpec(BaseModel):
    """Bulk-construction input: an employee and everyone reporting to them."""

    id: int
    name: str
    role: str
    subordinates: list[EmployeeSpec] = Field(default_factory=list)


class HierarchyLine(NamedTuple):
    depth: int
    id: int
    name: str
    role: str


Employee.model_rebuild()
EmployeeSpec.model_rebuild()

"""Staff records: a plain employee and the specialised roles."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Employee:
    """A member of staff with an identifier, a name and a salary."""

    employee_id: str
    first_name: str
    last_name: str
    salary: float

    def role(self) -> str:
        """Name of the role this record stands for."""
        return "Empleado"


@dataclass
class Manager(Employee):
    """An employee who is paid a bonus."""

    bonus: float = 0.0

    def role(self) -> str:
        return "Gerente"


@dataclass
class Developer(Employee):
    """An employee paid by the number of lines written."""

    lines_written: int = 0
    price_per_line: float = 0.0

    def role(self) -> str:
        return "Desarrollador"


@dataclass
class Teacher(Employee):
    """An employee with a professional title, a class and a section."""

    title: str = ""
    assigned_class: str = ""
    assigned_section: str = ""

    def role(self) -> str:
        return "Maestro"
"""The staff table: validation of new entries and the rows they produce."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from plantilla.dialogs import ALL_FIELDS_REQUIRED, TeacherDetails, ValidationError, read_bonus

FIELDS_REQUIRED = "Todos los campos son obligatorios"
INVALID_SALARY = "El salario debe ser un número válido"
DUPLICATE_ID = "El ID ya existe"
DEVELOPER_DETAILS_REQUIRED = "Faltan las líneas hechas o el precio por línea"

COLUMNS = (
    "ID",
    "Nombre",
    "Apellido",
    "Rol",
    "Salario",
    "Bono",
    "Lineas Hechas",
    "Precio x Linea",
    "Titulo Profesional",
    "Clase Asignada",
    "Seccion Asignada",
)

_HIDDEN_COMBINATION = ("Blood", "Interactive", "Ultra", "Kill")


class Role(Enum):
    """The kinds of staff that can be entered."""

    EMPLOYEE = "Empleado"
    MANAGER = "Gerente"
    DEVELOPER = "Desarrollador"
    TEACHER = "Maestro"


_SOUNDTRACKS = {
    Role.EMPLOYEE: "Tenebre Rosso Sangue(Synthwave).wav",
    Role.MANAGER: "Tenebre Rosso Sangue(cover).wav",
    Role.DEVELOPER: "Tenebre Rosso Sangue(Og).wav",
}


class Row(NamedTuple):
    """One line of the staff table, every cell as displayed text."""

    employee_id: str
    first_name: str
    last_name: str
    role: str
    salary: str
    bonus: str
    lines: str
    price_per_line: str
    title: str
    assigned_class: str
    assigned_section: str


def is_secret_combination(employee_id: str, first_name: str, last_name: str, salary_text: str) -> bool:
    """Whether the four fields spell out the hidden combination."""
    return (employee_id, first_name, last_name, salary_text) == _HIDDEN_COMBINATION


def soundtrack_for(role: Role | str) -> str | None:
    """The sound file played for the hidden combination, if the role has one."""
    return _SOUNDTRACKS.get(Role(role))


def _parse_salary(text: str) -> float:
    cleaned = text.strip()
    if "_" in cleaned:
        raise ValidationError(INVALID_SALARY)
    try:
        return float(cleaned)
    except ValueError:
        raise ValidationError(INVALID_SALARY) from None


class Registry:
    """An ordered table of staff rows with unique identifiers."""

    def __init__(self) -> None:
        self._rows: list[Row] = []

    def _validate(self, employee_id: str, first_name: str, last_name: str, salary_text: str) -> float:
        """Check the common fields and return the parsed salary."""
        if not all((employee_id, first_name, last_name, salary_text)):
            raise ValidationError(FIELDS_REQUIRED)
        salary = _parse_salary(salary_text)
        if employee_id in self:
            raise ValidationError(DUPLICATE_ID)
        return salary

    def add(
        self,
        employee_id: str,
        first_name: str,
        last_name: str,
        salary_text: str,
        role: Role | str = Role.EMPLOYEE,
        bonus: str | None = None,
        lines: int | None = None,
        price_per_line: float | None = None,
        teacher: TeacherDetails | None = None,
    ) -> Row:
        """Validate an entry, append it to the table and return its row."""
        salary = self._validate(employee_id, first_name, last_name, salary_text)
        role = Role(role)

        bonus_cell, lines_cell, price_cell = "0", "0", "0"
        title = assigned_class = assigned_section = ""

        if role is Role.MANAGER:
            bonus_cell = read_bonus(bonus)
        elif role is Role.DEVELOPER:
            if lines is None or price_per_line is None:
                raise ValidationError(DEVELOPER_DETAILS_REQUIRED)
            lines_cell = str(int(lines))
            price_cell = f"{float(price_per_line):.2f}"
        elif role is Role.TEACHER:
            if teacher is None:
                raise ValidationError(ALL_FIELDS_REQUIRED)
            title = teacher.title
            assigned_class = teacher.assigned_class
            assigned_section = teacher.assigned_section

        row = Row(
            employee_id,
            first_name,
            last_name,
            role.value,
            f"{salary:.2f}",
            bonus_cell,
            lines_cell,
            price_cell,
            title,
            assigned_class,
            assigned_section,
        )
        self._rows.append(row)
        return row

    def rows(self) -> tuple[Row, ...]:
        """All rows in the order they were added."""
        return tuple(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, employee_id: object) -> bool:
        return any(row.employee_id == employee_id for row in self._rows)
import pytest

from plantilla.dialogs import TeacherDetails, ValidationError
from plantilla.registry import (
    COLUMNS,
    DUPLICATE_ID,
    FIELDS_REQUIRED,
    INVALID_SALARY,
    Registry,
    Role,
    Row,
    is_secret_combination,
    soundtrack_for,
)


def test_employee_row_has_zero_extras():
    registry = Registry()
    row = registry.add("1", "Ana", "Lopez", "1500")
    assert row.role == "Empleado"
    assert row.salary == "1500.00"
    assert (row.bonus, row.lines, row.price_per_line) == ("0", "0", "0")
    assert (row.title, row.assigned_class, row.assigned_section) == ("", "", "")


def test_row_has_one_cell_per_column():
    registry = Registry()
    row = registry.add("1", "Ana", "Lopez", "1500")
    assert len(row) == len(COLUMNS)


def test_rows_keep_insertion_order_and_len():
    registry = Registry()
    first = registry.add("1", "Ana", "Lopez", "100")
    second = registry.add("2", "Luis", "Perez", "200")
    assert registry.rows() == (first, second)
    assert len(registry) == 2
    assert "1" in registry
    assert "3" not in registry


@pytest.mark.parametrize(
    "fields",
    [
        ("", "Ana", "Lopez", "100"),
        ("1", "", "Lopez", "100"),
        ("1", "Ana", "", "100"),
        ("1", "Ana", "Lopez", ""),
    ],
)
def test_missing_field_is_rejected(fields):
    registry = Registry()
    with pytest.raises(ValidationError, match=FIELDS_REQUIRED):
        registry.add(*fields)
    assert len(registry) == 0


@pytest.mark.parametrize("salary", ["abc", "1_000", "  ", "12x"])
def test_invalid_salary_is_rejected(salary):
    registry = Registry()
    with pytest.raises(ValidationError, match=INVALID_SALARY):
        registry.add("1", "Ana", "Lopez", salary)


def test_duplicate_id_is_rejected():
    registry = Registry()
    registry.add("7", "Ana", "Lopez", "100")
    with pytest.raises(ValidationError, match=DUPLICATE_ID):
        registry.add("7", "Luis", "Perez", "200")
    assert len(registry) == 1


def test_missing_fields_reported_before_duplicate():
    registry = Registry()
    registry.add("7", "Ana", "Lopez", "100")
    with pytest.raises(ValidationError, match=FIELDS_REQUIRED):
        registry.add("7", "", "Perez", "200")


def test_manager_keeps_bonus_text():
    registry = Registry()
    row = registry.add("1", "Ana", "Lopez", "100", Role.MANAGER, bonus="250 extra")
    assert row.role == "Gerente"
    assert row.bonus == "250 extra"
    assert (row.lines, row.price_per_line) == ("0", "0")


def test_manager_without_bonus_is_rejected():
    registry = Registry()
    with pytest.raises(ValidationError, match="Por favor, agregue un bono."):
        registry.add("1", "Ana", "Lopez", "100", Role.MANAGER, bonus="   ")
    assert "1" not in registry


def test_developer_formats_lines_and_price():
    registry = Registry()
    row = registry.add("1", "Ana", "Lopez", "100", "Desarrollador", lines=10, price_per_line=2.5)
    assert row.role == "Desarrollador"
    assert row.lines == "10"
    assert row.price_per_line == "2.50"
    assert row.bonus == "0"


def test_developer_requires_details():
    registry = Registry()
    with pytest.raises(ValidationError):
        registry.add("1", "Ana", "Lopez", "100", Role.DEVELOPER, lines=3)
    assert len(registry) == 0


def test_teacher_row_carries_details():
    registry = Registry()
    details = TeacherDetails("Licenciada", "Fisica", "B")
    row = registry.add("1", "Ana", "Lopez", "100", Role.TEACHER, teacher=details)
    assert row.role == "Maestro"
    assert (row.title, row.assigned_class, row.assigned_section) == ("Licenciada", "Fisica", "B")


def test_teacher_without_details_is_rejected():
    registry = Registry()
    with pytest.raises(ValidationError, match="Por favor, llene todos los campos."):
        registry.add("1", "Ana", "Lopez", "100", Role.TEACHER)


def test_row_is_a_tuple_of_cells():
    row = Row("1", "Ana", "Lopez", "Empleado", "1.00", "0", "0", "0", "", "", "")
    assert list(row)[:3] == ["1", "Ana", "Lopez"]


def test_secret_combination():
    assert is_secret_combination("Blood", "Interactive", "Ultra", "Kill")
    assert not is_secret_combination("Blood", "Interactive", "Ultra", "kill")


def test_soundtracks():
    assert soundtrack_for(Role.EMPLOYEE) == "Tenebre Rosso Sangue(Synthwave).wav"
    assert soundtrack_for("Gerente") == "Tenebre Rosso Sangue(cover).wav"
    assert soundtrack_for(Role.DEVELOPER) == "Tenebre Rosso Sangue(Og).wav"
    assert soundtrack_for(Role.TEACHER) is None
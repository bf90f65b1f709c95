# plantilla

A small staff register. It keeps one table of people. Each person has an
ID, a first name, a last name, a role and a salary, plus the extra details
that the role needs:

- **Empleado**: no extra details.
- **Gerente**: a bonus, which must not be empty or blank.
- **Desarrollador**: the number of lines written and the price per line.
- **Maestro**: a professional title, an assigned class and an assigned
  section. All three are required.

The ID, first name, last name and salary must not be empty. The salary
must parse as a number, and surrounding spaces are ignored. IDs must be
unique. Salaries and prices per line are shown with two decimals. Cells
that do not apply to a role hold `"0"` for bonus, lines and price, and
an empty string for the teacher fields.

## Installation

```
pip install .
```

## Command line

```
plantilla
```

This starts an interactive session on the terminal. It asks for the ID,
first name, last name, salary and role. An empty role means `Empleado`,
and role names are matched without regard to case. It then asks for any
extra details the role needs and asks again until they are valid. After
each person is added it prints the whole table, with columns separated
by ` | `. A message in Spanish explains any entry that is refused. The
session ends at the end of input.

One fixed combination of ID, first name, last name and salary is not
added to the table. The session prints the name of a sound file for that
role instead.

## Library use

```python
from plantilla.registry import Registry, Role
from plantilla.dialogs import read_bonus, read_teacher_details

registry = Registry()
registry.add("1", "Ana", "Pérez", "1500", Role.EMPLOYEE)
registry.add("2", "Luis", "Gómez", "2500", Role.MANAGER, bonus=read_bonus("300"))
registry.add("3", "Sara", "León", "2000", "Desarrollador", lines=1200, price_per_line=0.5)

teacher = read_teacher_details("Licenciada", "Matemáticas", "B")
registry.add("4", "Eva", "Ruiz", "1800", Role.TEACHER, teacher=teacher)

for row in registry.rows():
    print(row)

assert "2" in registry
assert len(registry) == 4
```

- `plantilla.registry.Registry.add` checks an entry, appends it, and
  returns its `Row`. This is a named tuple of eleven text cells, in the
  order of `plantilla.registry.COLUMNS`. The role may be a `Role` or its
  Spanish name.
- `plantilla.dialogs.ValidationError`, a subclass of `ValueError`, is
  raised for missing fields, an invalid salary, a duplicate ID, a blank
  bonus, or missing developer or teacher details.
- `read_bonus` and `read_teacher_details` in `plantilla.dialogs` check
  the extra details before they are passed on. `TeacherDetails` holds a
  teacher's three fields.
- `is_secret_combination` and `soundtrack_for` in `plantilla.registry`
  recognise the fixed combination and name its sound file.

The model classes `Employee`, `Manager`, `Developer` and `Teacher` are in
`plantilla.models`. Each one reports its role name through `role()`.

## What it does not do

- The table lives in memory only. Nothing is saved, and the table is
  empty when a new session starts.
- There is no graphical window. The front end works only on the terminal.
- No sound is played. The session only prints the file name.

## Tests

```
pip install .[test]
pytest
```
"""Interactive entry of staff records on the terminal."""

from __future__ import annotations

import argparse
import sys
from typing import Any

from plantilla.dialogs import ValidationError, read_bonus, read_teacher_details
from plantilla.registry import COLUMNS, Registry, Role, is_secret_combination, soundtrack_for

INVALID_ROLE = "Rol no válido"
INVALID_NUMBER = "Ingrese un número válido."
_ROLE_PROMPT = "Rol [" + "/".join(role.value for role in Role) + "] (Empleado): "


def _ask(prompt: str) -> str:
    sys.stdout.write(prompt)
    sys.stdout.flush()
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line.rstrip("\r\n")


def _parse_role(text: str) -> Role | None:
    wanted = text.strip().casefold()
    if not wanted:
        return Role.EMPLOYEE
    return next((role for role in Role if role.value.casefold() == wanted), None)


def _ask_until_valid(collect):
    while True:
        try:
            return collect()
        except ValidationError as error:
            print(error)
        except ValueError:
            print(INVALID_NUMBER)


def _ask_details(role: Role) -> dict[str, Any]:
    if role is Role.MANAGER:
        bonus = _ask_until_valid(lambda: read_bonus(_ask("Ingrese un bono: ")))
        return {"bonus": bonus}
    if role is Role.DEVELOPER:
        lines = _ask_until_valid(lambda: int(_ask("Lineas hechas: ")))
        price = _ask_until_valid(lambda: float(_ask("Precio por linea: ")))
        return {"lines": lines, "price_per_line": price}
    if role is Role.TEACHER:
        teacher = _ask_until_valid(
            lambda: read_teacher_details(
                _ask("Titulo: "), _ask("Clase Asignada: "), _ask("Seccion Asignada: ")
            )
        )
        return {"teacher": teacher}
    return {}


def _print_table(registry: Registry) -> None:
    print(" | ".join(COLUMNS))
    for row in registry.rows():
        print(" | ".join(row))


def _enter_one(registry: Registry) -> None:
    employee_id = _ask("ID: ")
    first_name = _ask("Nombre: ")
    last_name = _ask("Apellido: ")
    salary_text = _ask("Salario: ")
    role = _parse_role(_ask(_ROLE_PROMPT))
    if role is None:
        print(INVALID_ROLE)
        return

    if is_secret_combination(employee_id, first_name, last_name, salary_text):
        track = soundtrack_for(role)
        if track is not None:
            print(f"Reproduciendo: {track}")
        return

    try:
        registry._validate(employee_id, first_name, last_name, salary_text)
    except ValidationError as error:
        print(error)
        return

    details = _ask_details(role)
    registry.add(employee_id, first_name, last_name, salary_text, role, **details)
    _print_table(registry)


def main(argv: list[str] | None = None) -> int:
    """Read staff entries from standard input until it ends."""
    parser = argparse.ArgumentParser(
        prog="plantilla",
        description="Registro interactivo de personal.",
    )
    parser.parse_args(argv)
    registry = Registry()
    try:
        while True:
            _enter_one(registry)
    except EOFError:
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
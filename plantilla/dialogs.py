"""Validation of the extra details asked for some roles."""

from __future__ import annotations

from dataclasses import dataclass

BONUS_REQUIRED = "Por favor, agregue un bono."
ALL_FIELDS_REQUIRED = "Por favor, llene todos los campos."


class ValidationError(ValueError):
    """Raised when a required detail is missing."""


@dataclass(frozen=True)
class TeacherDetails:
    """Title, class and section given for a teacher."""

    title: str
    assigned_class: str
    assigned_section: str


def _is_blank(text: str | None) -> bool:
    return not text or text.isspace()


def read_bonus(text: str | None) -> str:
    """Return the bonus as entered, or raise if it is empty or blank."""
    if _is_blank(text):
        raise ValidationError(BONUS_REQUIRED)
    return text


def read_teacher_details(
    title: str | None,
    assigned_class: str | None,
    assigned_section: str | None,
) -> TeacherDetails:
    """Collect the teacher's details, raising if any of them is blank."""
    if any(_is_blank(value) for value in (title, assigned_class, assigned_section)):
        raise ValidationError(ALL_FIELDS_REQUIRED)
    return TeacherDetails(title, assigned_class, assigned_section)
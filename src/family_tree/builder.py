# src/family_tree/builder.py

"""
Tree construction: create detached Person records and link children to parents.

Two policies are supported for invalid input, selected by ``tree.strict`` in
``config/family_tree.yml`` or per builder:

* strict  - raise a ``ValidationError`` subclass and change nothing.
* lenient - log a warning, change nothing, and return ``False``.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional, Union

from family_tree.config import get_config
from family_tree.core.exceptions import (
    InvalidDateError,
    InvalidGenderError,
    InvalidReferenceError,
)
from family_tree.logging import get_logger
from family_tree.models import Gender, Person

log = get_logger(__name__)

ISO_DATE_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01])$")


class TreeBuilder:
    """
    Builds person records and parent-child links under a validation policy.

    Any argument left as ``None`` falls back to the ``tree`` section of the
    configuration.
    """

    def __init__(
        self,
        strict: Optional[bool] = None,
        allowed_genders: Optional[Iterable[str]] = None,
        validate_dates: Optional[bool] = None,
    ):
        settings = get_config().tree

        self.strict = bool(settings["strict"] if strict is None else strict)
        genders = settings["allowed_genders"] if allowed_genders is None else allowed_genders
        self.allowed_genders = frozenset(_gender_code(g) for g in genders)
        self.validate_dates = bool(
            settings["validate_dates"] if validate_dates is None else validate_dates
        )
        self.created = 0

    # ------------------------------------------------------------------ #
    # Person creation
    # ------------------------------------------------------------------ #

    def create_person(
        self, name: str, birth_date: str, gender: Union[str, Gender]
    ) -> Person:
        """
        Return a new, detached Person with no parent and no children.

        In strict mode the gender must be one of ``allowed_genders``; when
        ``validate_dates`` is on, the birth date must look like YYYY-MM-DD.
        """
        code = _gender_code(gender)

        if self.strict and code not in self.allowed_genders:
            raise InvalidGenderError(
                f"Invalid gender {code!r} for {name!r}; "
                f"expected one of {sorted(self.allowed_genders)}"
            )

        if self.validate_dates and not ISO_DATE_RE.match(birth_date or ""):
            raise InvalidDateError(
                f"Invalid birth date {birth_date!r} for {name!r}; expected YYYY-MM-DD"
            )

        person = Person(name=name, birth_date=birth_date, gender=code)
        self.created += 1
        log.debug(f"Created person: {person.label()}")
        return person

    # ------------------------------------------------------------------ #
    # Linking
    # ------------------------------------------------------------------ #

    def add_child(self, parent: Optional[Person], child: Optional[Person]) -> bool:
        """
        Append ``child`` to ``parent.children`` and point it back at ``parent``.

        Returns True when the link was made. Invalid references leave both
        arguments untouched: strict mode raises InvalidReferenceError, lenient
        mode logs a warning and returns False.
        """
        problem = self._link_problem(parent, child)
        if problem is not None:
            if self.strict:
                raise InvalidReferenceError(problem)
            log.warning(f"add_child ignored: {problem}")
            return False

        parent.children.append(child)
        child.parent = parent
        log.debug(f"Linked {child.name!r} under {parent.name!r}")
        return True

    def _link_problem(
        self, parent: Optional[Person], child: Optional[Person]
    ) -> Optional[str]:
        if parent is None and child is None:
            return "parent and child are both missing"
        if parent is None:
            return f"parent is missing for child {child.name!r}"
        if child is None:
            return f"child is missing for parent {parent.name!r}"

        if child is parent:
            return f"{parent.name!r} cannot be its own child"
        if child.parent is not None:
            return f"{child.name!r} already belongs to {child.parent.name!r}"
        return None


def _gender_code(gender: Union[str, Gender]) -> str:
    if isinstance(gender, Gender):
        return gender.value
    return gender


# ---------------------------------------------------------------------------
# Module-level helpers using the configured policy
# ---------------------------------------------------------------------------

def create_person(name: str, birth_date: str, gender: Union[str, Gender]) -> Person:
    return TreeBuilder().create_person(name, birth_date, gender)


def add_child(parent: Optional[Person], child: Optional[Person]) -> bool:
    return TreeBuilder().add_child(parent, child)

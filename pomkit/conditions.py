"""Assertion conditions understood by every driver."""

from __future__ import annotations

from enum import Enum

from pomkit.exceptions import UnknownConditionError


class Condition(str, Enum):
    """Chai-style assertion names accepted by ``should()``."""

    BE_VISIBLE = "be.visible"
    NOT_BE_VISIBLE = "not.be.visible"
    EXIST = "exist"
    NOT_EXIST = "not.exist"
    BE_EMPTY = "be.empty"
    NOT_BE_EMPTY = "not.be.empty"
    HAVE_TEXT = "have.text"
    NOT_HAVE_TEXT = "not.have.text"
    CONTAIN = "contain"
    NOT_CONTAIN = "not.contain"
    HAVE_ATTR = "have.attr"
    NOT_HAVE_ATTR = "not.have.attr"
    HAVE_CLASS = "have.class"
    NOT_HAVE_CLASS = "not.have.class"
    MATCH = "match"
    NOT_MATCH = "not.match"
    BE_ENABLED = "be.enabled"
    BE_DISABLED = "be.disabled"
    NOT_BE_DISABLED = "not.be.disabled"
    HAVE_VALUE = "have.value"
    NOT_HAVE_VALUE = "not.have.value"
    BE_CHECKED = "be.checked"
    NOT_BE_CHECKED = "not.be.checked"


def parse_condition(value: Condition | str) -> Condition:
    """Map a condition name to its ``Condition`` member."""
    if isinstance(value, Condition):
        return value
    try:
        return Condition(value)
    except ValueError:
        raise UnknownConditionError(str(value)) from None

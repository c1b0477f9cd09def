"""Detailed error messages derived from a kind and the property it concerns.

An empty property drops the leading clause and yields the generic phrasing,
e.g. ``"not found"`` instead of ``"The resource foo was not found"``.
"""

from collections.abc import Sequence

from ddderr.kinds import Kind


def required_description(property: str) -> str:
    desc = "required"
    if property:
        desc = f"The property {property} is {desc}"
    return desc


def invalid_format_description(property: str, formats: Sequence[str] = ()) -> str:
    desc = "invalid format, expected [" + ",".join(formats) + "]"
    if property:
        desc = f"The property {property} has an {desc}"
    return desc


def out_of_range_description(property: str, lower: int, upper: int) -> str:
    desc = f"out of range [{lower},{upper})"
    if property:
        desc = f"The property {property} is {desc}"
    return desc


def already_exists_description(resource: str) -> str:
    if not resource:
        return "already exists"
    return f"The resource {resource} already exists"


def not_found_description(resource: str) -> str:
    if not resource:
        return "not found"
    return f"The resource {resource} was not found"


def remote_call_description(resource: str) -> str:
    desc = "Failed to call external resource"
    if resource:
        desc = f"{desc} [{resource}]"
    return desc


def derive_description(
    kind: str,
    property: str,
    *,
    lower: int = 0,
    upper: int = 0,
    formats: Sequence[str] = (),
) -> str:
    """Return the description for ``kind``; kinds without a formula give ``""``."""
    if kind == Kind.REQUIRED:
        return required_description(property)
    if kind == Kind.INVALID_FORMAT:
        return invalid_format_description(property, formats)
    if kind == Kind.OUT_OF_RANGE:
        return out_of_range_description(property, lower, upper)
    if kind == Kind.ALREADY_EXISTS:
        return already_exists_description(property)
    if kind == Kind.NOT_FOUND:
        return not_found_description(property)
    if kind == Kind.FAILED_REMOTE_CALL:
        return remote_call_description(property)
    return ""

"""ddderr error value type.

A DDDError describes one categorized failure: the architectural group that
raised it, the taxonomy kind, the property or resource it concerns and the
human-readable title/description pair. Instances are values: every ``set_*``
method returns an updated copy and leaves the receiver untouched, so an error
can be shared freely and refined at each layer it crosses.

Description and status name are either fixed (set explicitly) or derived from
the kind and property on every access. Fixing one of them through its own
setter makes it immune to later ``set_property`` calls.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ddderr.descriptions import derive_description
from ddderr.kinds import GROUPS, TITLES, Group, Kind
from ddderr.strings import status_name


@dataclass(frozen=True)
class Fixed:
    """Explicitly set field value. ``None`` in its place means derived."""

    value: str


def _restore(cls: type[DDDError], state: dict) -> DDDError:
    err = cls.__new__(cls)
    err.__dict__.update(state)
    err.__cause__ = err._parent
    return err


class DDDError(Exception):
    def __init__(
        self,
        group: Group,
        kind: Kind | str,
        property: str = "",
        title: str = "",
        description: str | None = None,
        status: str | None = None,
        *,
        lower_bound: int = 0,
        upper_bound: int = 0,
        formats: Sequence[str] = (),
        parent: BaseException | None = None,
    ) -> None:
        super().__init__()
        self._group = group
        self._kind = kind
        self._property = property
        self._title = title
        self._description = None if description is None else Fixed(description)
        self._status = None if status is None else Fixed(status)
        self._lower_bound = lower_bound
        self._upper_bound = upper_bound
        self._formats = tuple(formats)
        self._parent = parent
        self.__cause__ = parent

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(group={self._group!s}, kind={self._kind!s}, "
            f"property={self._property!r}, status={self.status!r})"
        )

    def __reduce__(self):
        return _restore, (type(self), dict(self.__dict__))

    def _replace(self, **fields) -> DDDError:
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        if "__notes__" in clone.__dict__:
            clone.__notes__ = list(clone.__notes__)
        for name, value in fields.items():
            setattr(clone, f"_{name}", value)
        clone.__cause__ = clone._parent
        return clone

    # Accessors

    @property
    def group(self) -> Group:
        return self._group

    @property
    def kind(self) -> Kind | str:
        return self._kind

    @property
    def title(self) -> str:
        return self._title

    @property
    def description(self) -> str:
        if self._description is not None:
            return self._description.value
        return derive_description(
            self._kind,
            self._property,
            lower=self._lower_bound,
            upper=self._upper_bound,
            formats=self._formats,
        )

    @property
    def status(self) -> str:
        if self._status is not None:
            return self._status.value
        return status_name(self._property, self._kind)

    @property
    def parent(self) -> BaseException | None:
        """Underlying cause, kept for inspection only. Might be None."""
        return self._parent

    @property
    def lower_bound(self) -> int:
        return self._lower_bound

    @property
    def upper_bound(self) -> int:
        return self._upper_bound

    @property
    def formats(self) -> tuple[str, ...]:
        return self._formats

    @property
    def is_description_fixed(self) -> bool:
        return self._description is not None

    @property
    def is_status_fixed(self) -> bool:
        return self._status is not None

    # Predicates

    def is_domain(self) -> bool:
        return self._group == Group.DOMAIN

    def is_infrastructure(self) -> bool:
        return self._group == Group.INFRASTRUCTURE

    def is_required(self) -> bool:
        return self._kind == Kind.REQUIRED

    def is_invalid_format(self) -> bool:
        return self._kind == Kind.INVALID_FORMAT

    def is_out_of_range(self) -> bool:
        return self._kind == Kind.OUT_OF_RANGE

    def is_already_exists(self) -> bool:
        return self._kind == Kind.ALREADY_EXISTS

    def is_not_found(self) -> bool:
        return self._kind == Kind.NOT_FOUND

    def is_remote_call(self) -> bool:
        return self._kind == Kind.FAILED_REMOTE_CALL

    # Mutators, each returning an updated copy

    def set_kind(self, kind: Kind | str) -> DDDError:
        return self._replace(kind=kind)

    def set_title(self, title: str) -> DDDError:
        return self._replace(title=title)

    def set_property(self, property: str) -> DDDError:
        """Change the property. Derived description and status follow it."""
        return self._replace(property=property)

    def set_description(self, description: str) -> DDDError:
        return self._replace(description=Fixed(description))

    def set_status(self, status: str) -> DDDError:
        return self._replace(status=Fixed(status))

    def set_parent(self, parent: BaseException | None) -> DDDError:
        return self._replace(parent=parent)

    # Defined last: the name shadows the builtin decorator inside the class body.
    @property
    def property(self) -> str:
        return self._property


def new_domain(title: str, description: str) -> DDDError:
    """Generic domain error with a caller-supplied title and description."""
    return DDDError(Group.DOMAIN, Kind.UNKNOWN, "", title, description, "")


def new_infrastructure(title: str, description: str) -> DDDError:
    """Generic infrastructure error with a caller-supplied title and description."""
    return DDDError(
        Group.INFRASTRUCTURE, Kind.UNKNOWN_INFRASTRUCTURE, "", title, description, ""
    )


def _new(kind: Kind, property: str, **aux) -> DDDError:
    return DDDError(GROUPS[kind], kind, property, TITLES[kind], **aux)


def new_required(property: str) -> DDDError:
    """e.g. ``The property foo is required``"""
    return _new(Kind.REQUIRED, property)


def new_invalid_format(property: str, *formats: str) -> DDDError:
    """e.g. ``The property foo has an invalid format, expected [jpeg,gif]``"""
    return _new(Kind.INVALID_FORMAT, property, formats=formats)


def new_out_of_range(property: str, lower_bound: int, upper_bound: int) -> DDDError:
    """e.g. ``The property foo is out of range [8,256)``"""
    return _new(
        Kind.OUT_OF_RANGE, property, lower_bound=lower_bound, upper_bound=upper_bound
    )


def new_already_exists(resource: str) -> DDDError:
    return _new(Kind.ALREADY_EXISTS, resource)


def new_not_found(resource: str) -> DDDError:
    return _new(Kind.NOT_FOUND, resource)


def new_remote_call(resource: str) -> DDDError:
    """Network call to an external resource failed (database, another service)."""
    return _new(Kind.FAILED_REMOTE_CALL, resource)


def is_domain(exc: BaseException | None) -> bool:
    return isinstance(exc, DDDError) and exc.is_domain()


def is_infrastructure(exc: BaseException | None) -> bool:
    return isinstance(exc, DDDError) and exc.is_infrastructure()


def get_description(exc: BaseException | None) -> str:
    if exc is None:
        return ""
    if isinstance(exc, DDDError):
        return exc.description
    return str(exc)


def get_parent_description(exc: BaseException | None) -> str:
    """Description of the wrapped cause, or ``""`` when there is none."""
    if not isinstance(exc, DDDError):
        return ""
    return get_description(exc.parent)

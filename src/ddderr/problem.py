"""RFC 7807 problem details built from ddderr errors.

See https://datatracker.ietf.org/doc/html/rfc7807 for the meaning of each
field. ``status`` carries the machine-friendly status name (e.g.
``FooNotFound``) while ``status_code`` carries the HTTP status.
"""

from http import HTTPStatus

from pydantic import BaseModel, ConfigDict

from ddderr.errors import DDDError


class Problem(BaseModel):
    type: str = ""
    title: str = ""
    status: str = ""
    status_code: int = 0
    detail: str = ""
    instance: str = ""

    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> dict:
        """Serializable form without empty fields."""
        return self.model_dump(exclude_defaults=True)


def http_status_code(err: DDDError) -> int:
    if err.is_already_exists():
        return HTTPStatus.CONFLICT.value
    if err.is_not_found():
        return HTTPStatus.NOT_FOUND.value
    if err.is_invalid_format() or err.is_required() or err.is_out_of_range() or err.is_domain():
        return HTTPStatus.BAD_REQUEST.value
    if err.is_remote_call():
        return HTTPStatus.BAD_GATEWAY.value
    return HTTPStatus.INTERNAL_SERVER_ERROR.value


def reason_phrase(status_code: int) -> str:
    return HTTPStatus(status_code).phrase


def build_problem(type_override: str, instance: str, err: BaseException | None) -> Problem:
    if err is None:
        return Problem()

    if not isinstance(err, DDDError):
        code = HTTPStatus.INTERNAL_SERVER_ERROR
        return Problem(
            type=type_override or code.phrase,
            title=str(err),
            status=type_override or code.phrase,
            status_code=code.value,
            detail=str(err),
            instance=instance,
        )

    code = http_status_code(err)
    phrase = reason_phrase(code)
    return Problem(
        type=type_override or phrase,
        title=err.title,
        status=err.status or phrase,
        status_code=code,
        detail=err.description,
        instance=instance,
    )

"""ddderr: domain-driven error taxonomy with RFC 7807 problem mapping."""

from ddderr.errors import (
    DDDError,
    Fixed,
    get_description,
    get_parent_description,
    is_domain,
    is_infrastructure,
    new_already_exists,
    new_domain,
    new_infrastructure,
    new_invalid_format,
    new_not_found,
    new_out_of_range,
    new_remote_call,
    new_required,
)
from ddderr.kinds import Group, Kind
from ddderr.problem import Problem, build_problem, http_status_code
from ddderr.strings import sanitize_to_identifier

__all__ = [
    "DDDError",
    "Fixed",
    "Group",
    "Kind",
    "Problem",
    "build_problem",
    "get_description",
    "get_parent_description",
    "http_status_code",
    "is_domain",
    "is_infrastructure",
    "new_already_exists",
    "new_domain",
    "new_infrastructure",
    "new_invalid_format",
    "new_not_found",
    "new_out_of_range",
    "new_remote_call",
    "new_required",
    "sanitize_to_identifier",
]

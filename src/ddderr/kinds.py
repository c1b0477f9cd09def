"""Error taxonomy: architectural groups and the kinds that belong to them."""

from enum import StrEnum


class Group(StrEnum):
    DOMAIN = "Domain"
    INFRASTRUCTURE = "Infrastructure"


class Kind(StrEnum):
    UNKNOWN = "UnknownDomain"
    REQUIRED = "Required"
    INVALID_FORMAT = "InvalidFormat"
    OUT_OF_RANGE = "OutOfRange"
    ALREADY_EXISTS = "AlreadyExists"
    NOT_FOUND = "NotFound"
    FAILED_REMOTE_CALL = "FailedRemoteCall"
    UNKNOWN_INFRASTRUCTURE = "UnknownInfrastructure"


# Suffix appended to the sanitized property to build a status name.
STATUS_LABELS: dict[Kind, str] = {
    Kind.UNKNOWN: "UnknownDomain",
    Kind.REQUIRED: "IsRequired",
    Kind.INVALID_FORMAT: "InvalidFormat",
    Kind.OUT_OF_RANGE: "OutOfRange",
    Kind.ALREADY_EXISTS: "AlreadyExists",
    Kind.NOT_FOUND: "NotFound",
    Kind.FAILED_REMOTE_CALL: "FailedRemoteCall",
    Kind.UNKNOWN_INFRASTRUCTURE: "UnknownInfrastructure",
}

TITLES: dict[Kind, str] = {
    Kind.REQUIRED: "Missing property",
    Kind.INVALID_FORMAT: "Property is not a valid format",
    Kind.OUT_OF_RANGE: "Property is out of the specified range",
    Kind.ALREADY_EXISTS: "Resource already exists",
    Kind.NOT_FOUND: "Resource not found",
    Kind.FAILED_REMOTE_CALL: "Remote call failed",
}

GROUPS: dict[Kind, Group] = {
    Kind.UNKNOWN: Group.DOMAIN,
    Kind.REQUIRED: Group.DOMAIN,
    Kind.INVALID_FORMAT: Group.DOMAIN,
    Kind.OUT_OF_RANGE: Group.DOMAIN,
    Kind.ALREADY_EXISTS: Group.DOMAIN,
    Kind.NOT_FOUND: Group.DOMAIN,
    Kind.FAILED_REMOTE_CALL: Group.INFRASTRUCTURE,
    Kind.UNKNOWN_INFRASTRUCTURE: Group.INFRASTRUCTURE,
}


def status_label(kind: str) -> str:
    """Label for a kind; custom kinds set through ``set_kind`` label themselves."""
    try:
        return STATUS_LABELS[Kind(kind)]
    except ValueError:
        return str(kind)

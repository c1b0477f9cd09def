"""String helpers for machine-friendly status names."""

from ddderr.kinds import status_label


def sanitize_to_identifier(value: str) -> str:
    """Compact a property name into a title-cased identifier.

    Non-letter characters are dropped. The first letter of the string and
    every letter that follows a dropped character are upper-cased, so
    ``"foo_bar-baz"`` becomes ``"FooBarBaz"``.
    """
    chars: list[str] = []
    capitalize = True
    for ch in value:
        if not ch.isalpha():
            capitalize = True
            continue
        if capitalize:
            upper = ch.upper()
            # Letters without a single-character upper case (e.g. "ß") stay as they are
            ch = upper if len(upper) == 1 else ch
        chars.append(ch)
        capitalize = False
    return "".join(chars)


def status_name(property: str, kind: str) -> str:
    label = status_label(kind)
    if not property:
        return label
    return sanitize_to_identifier(property) + label

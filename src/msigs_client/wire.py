"""Canonical wire encoding for request parameters."""

from __future__ import annotations

import re

from .exceptions import MsigsClientError, MsigsClientErrorCodes

MAX_NAME_LENGTH = 13
UINT64_MAX = 2**64 - 1

_NAME_BODY = re.compile(r"^[.1-5a-z]{0,12}$")
_NAME_LAST = re.compile(r"^[.1-5a-j]$")


def encode_name(value: str) -> str:
    """Validate an account or proposal name and return its canonical form.

    Names are at most 13 characters from ``.12345a-z``; the 13th character
    only has four bits available and is limited to ``.12345a-j``. Trailing
    dots carry no value and are dropped.
    """
    name = str(value)
    if len(name) > MAX_NAME_LENGTH:
        raise MsigsClientError(
            code=MsigsClientErrorCodes.INVALID_NAME,
            message=f"invalid name {name!r}: longer than {MAX_NAME_LENGTH} characters",
        )
    head, tail = name[:12], name[12:]
    if not _NAME_BODY.match(head) or (tail and not _NAME_LAST.match(tail)):
        raise MsigsClientError(
            code=MsigsClientErrorCodes.INVALID_NAME,
            message=f"invalid name {name!r}: unsupported character",
        )
    return name.rstrip(".")


def encode_uint64(value: int | str) -> int:
    """Convert a version sequence number to an unsigned 64-bit integer."""
    try:
        number = int(value)
    except (TypeError, ValueError) as e:
        raise MsigsClientError(
            code=MsigsClientErrorCodes.INVALID_INTEGER,
            message=f"invalid uint64: {value!r}",
            cause=e,
        ) from e
    if number < 0 or number > UINT64_MAX:
        raise MsigsClientError(
            code=MsigsClientErrorCodes.INVALID_INTEGER,
            message=f"invalid uint64: {value!r} is out of range",
        )
    return number


def encode_int32(value: int) -> int:
    """Pass an offset or limit through unchanged; range checks belong to the service."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise MsigsClientError(
            code=MsigsClientErrorCodes.INVALID_INTEGER,
            message=f"invalid integer: {value!r}",
        )
    return value

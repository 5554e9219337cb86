"""Primitive value codecs for METS attributes.

Enumerated attributes map to the closed sets in :mod:`schemas.enums`,
timestamps follow the xs:dateTime lexical profile, and IDREFS attributes
are whitespace-separated identifier lists. Numeric fields accept ASCII
digits only.
"""

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import TypeVar

from schemas.common import Timestamp

from .exceptions import InvalidEnumerationError, InvalidValueError, UnparseableTimestampError

E = TypeVar("E", bound=Enum)

_TIMESTAMP_RE = re.compile(
    r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
    r"T(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
    r"(?:\.(?P<fraction>[0-9]+))?"
    r"(?P<tz>Z|[+-][0-9]{2}:[0-9]{2})?"
)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def decode_enum(enum_cls: type[E], token: str, attribute: str | None = None) -> E:
    """Return the member of *enum_cls* whose wire token is exactly *token*.

    Raises:
        InvalidEnumerationError: If no member matches
    """
    try:
        return enum_cls(token)
    except ValueError as e:
        raise InvalidEnumerationError(attribute, token, enum_cls.__name__) from e


def encode_enum(member: Enum) -> str:
    return member.value


def parse_idrefs(value: str) -> list[str]:
    """Split an IDREFS attribute value on runs of whitespace."""
    return value.split()


def join_idrefs(values: list[str]) -> str:
    return " ".join(values)


def decode_int(value: str, attribute: str | None = None) -> int:
    """Decode an xs:integer attribute value.

    Raises:
        InvalidValueError: If *value* is not an integer
    """
    text = value.strip()
    if not _INTEGER_RE.fullmatch(text):
        where = f" in @{attribute}" if attribute else ""
        raise InvalidValueError(f"Invalid integer{where}: {value!r}", attribute, value)
    return int(text)


@dataclass(frozen=True)
class TimestampCodec:
    """Codec for xs:dateTime values.

    Accepts ``YYYY-MM-DDThh:mm:ss[.fraction][Z|(+|-)hh:mm]``. Decoding keeps
    the lexical text next to the parsed datetime and encoding writes that
    text back untouched, so no timezone or precision normalisation ever
    happens to a value read from a document. Only values minted from a
    datetime (the header dates stamped at write time) get new text, in
    the form produced by :meth:`format`.

    Instances are immutable and safe to share between threads.

    Attributes:
        utc_designator: Format a zero offset as ``Z`` rather than ``+00:00``
    """

    utc_designator: bool = True

    def decode(self, text: str, attribute: str | None = None) -> Timestamp:
        """Parse *text* into a Timestamp.

        Raises:
            UnparseableTimestampError: If *text* does not match the profile
        """
        match = _TIMESTAMP_RE.fullmatch(text.strip())
        if match is None:
            raise UnparseableTimestampError(text, attribute)

        fraction = match.group("fraction") or ""
        microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0

        try:
            value = datetime(
                int(match.group("year")),
                int(match.group("month")),
                int(match.group("day")),
                int(match.group("hour")),
                int(match.group("minute")),
                int(match.group("second")),
                microsecond,
                tzinfo=self._decode_offset(match.group("tz")),
            )
        except ValueError as e:
            raise UnparseableTimestampError(text, attribute) from e
        return Timestamp(text=text, value=value)

    def encode(self, timestamp: Timestamp) -> str:
        return timestamp.text

    def stamp(self, value: datetime) -> Timestamp:
        """Wrap a datetime minted by the caller, e.g. the current time."""
        return Timestamp(text=self.format(value), value=value)

    def format(self, value: datetime) -> str:
        """Render *value* in the canonical lexical form.

        The fraction is printed only when non-zero and without trailing
        zeros. Naive values get no offset.
        """
        text = (
            f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
            f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        )
        if value.microsecond:
            text += "." + f"{value.microsecond:06d}".rstrip("0")

        offset = value.utcoffset()
        if offset is None:
            return text
        if offset == timedelta(0) and self.utc_designator:
            return text + "Z"

        sign = "-" if offset < timedelta(0) else "+"
        minutes = abs(offset) // timedelta(minutes=1)
        return text + f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"

    def _decode_offset(self, tz: str | None) -> timezone | None:
        if tz is None:
            return None
        if tz == "Z":
            return timezone.utc

        hours, minutes = tz[1:].split(":")
        if int(hours) > 14 or int(minutes) > 59:
            raise ValueError(f"offset out of range: {tz}")
        delta = timedelta(hours=int(hours), minutes=int(minutes))
        return timezone(-delta if tz[0] == "-" else delta)

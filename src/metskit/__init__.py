"""Read and write METS documents as typed entity trees."""

from .codecs import TimestampCodec
from .exceptions import (
    InvalidEnumerationError,
    InvalidValueError,
    MalformedInputError,
    MetsError,
    MissingRequiredFieldError,
    UnparseableTimestampError,
)
from .idgen import IDGenerator
from .io import MetsReader, MetsWriter, read, write
from .marshal import Marshaller
from .unmarshal import Unmarshaller
from .validation import build_id_index, validate

__all__ = [
    "MetsReader",
    "MetsWriter",
    "read",
    "write",
    "Marshaller",
    "Unmarshaller",
    "TimestampCodec",
    "IDGenerator",
    "build_id_index",
    "validate",
    "MetsError",
    "MalformedInputError",
    "InvalidValueError",
    "InvalidEnumerationError",
    "UnparseableTimestampError",
    "MissingRequiredFieldError",
]

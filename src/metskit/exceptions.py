"""Custom exceptions for reading and writing METS documents."""


class MetsError(Exception):
    """Base exception for all METS errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class MalformedInputError(MetsError):
    """Raised when input bytes are not a well-formed METS XML document."""

    pass


class InvalidValueError(MetsError):
    """Raised when an attribute value cannot be decoded."""

    def __init__(self, message: str, attribute: str | None, value: str, *args, **kwargs):
        self.attribute = attribute
        self.value = value
        super().__init__(message, *args, **kwargs)


class InvalidEnumerationError(InvalidValueError):
    """Raised when a token is not a member of an attribute's closed value set."""

    def __init__(self, attribute: str | None, value: str, enum_name: str):
        self.enum_name = enum_name
        where = f" in @{attribute}" if attribute else ""
        super().__init__(
            f"Invalid {enum_name} value{where}: {value!r}", attribute, value
        )


class UnparseableTimestampError(InvalidValueError):
    """Raised when a timestamp does not match the xs:dateTime profile."""

    def __init__(self, value: str, attribute: str | None = None):
        where = f" in @{attribute}" if attribute else ""
        super().__init__(f"Unparseable timestamp{where}: {value!r}", attribute, value)


class MissingRequiredFieldError(MetsError):
    """Raised when an element lacks a field the model cannot do without."""

    def __init__(self, element: str, field: str):
        self.element = element
        self.field = field
        super().__init__(f"<{element}> is missing required {field}")

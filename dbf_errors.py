"""
Exceptions raised by the DBF/FPT reader.

All of them derive from DBFError so callers can catch the whole family.
I/O failures from the underlying file objects are not wrapped; they
propagate as the OSError the file object raised.
"""


class DBFError(Exception):
    """Base class for all DBF reader errors."""


class DBFEOFError(DBFError):
    """The record pointer is at (or was moved past) the end of the table."""

    def __init__(self, message: str = "EOF"):
        super().__init__(message)


class DBFBOFError(DBFError):
    """The record pointer was moved before the first record."""

    def __init__(self, message: str = "BOF"):
        super().__init__(message)


class DBFIncompleteReadError(DBFError):
    """Fewer bytes were returned than requested from a DBF or FPT file."""

    def __init__(self, expected: int, actual: int, what: str = "data"):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Incomplete read of {what}: expected {expected} bytes, got {actual}")


class DBFInvalidFieldError(DBFError):
    """A field position outside of 0..field_count-1 was used."""

    def __init__(self, fieldpos: int):
        self.fieldpos = fieldpos
        super().__init__(f"Invalid field pos: {fieldpos}")


class DBFNoFPTFileError(DBFError):
    """The table needs a memo (FPT) file but none was opened."""

    def __init__(self, message: str = "No FPT file"):
        super().__init__(message)


class DBFNoDBFFileError(DBFError):
    """A disk file operation was requested on a table opened from a stream."""

    def __init__(self, message: str = "No DBF file"):
        super().__init__(message)


class DBFUnsupportedVersionError(DBFError):
    """The file version byte was rejected by the version check."""

    def __init__(self, version: int):
        self.version = version
        super().__init__(f"Untested DBF file version: {version} ({version:x} hex)")


class DBFUnsupportedFieldTypeError(DBFError):
    """A field descriptor uses a type tag the decoder does not know."""

    def __init__(self, field_type: str):
        self.field_type = field_type
        super().__init__(f"Unsupported fieldtype: {field_type}")


class DBFInvalidRecordError(DBFError):
    """A record does not start with a valid deletion flag."""


class DBFFieldDecodeError(DBFError):
    """The raw bytes of a field could not be converted to a value."""

    def __init__(self, field_name: str, fieldpos: int, reason: str):
        self.field_name = field_name
        self.fieldpos = fieldpos
        super().__init__(f"error on field {field_name} (column {fieldpos}): {reason}")


class DBFInvalidUTF8Error(DBFError):
    """A strict UTF-8 decoder was given invalid UTF-8 data."""

    def __init__(self, message: str = "invalid UTF-8 data"):
        super().__init__(message)


class DBFCloseError(DBFError):
    """Closing the DBF and/or FPT file failed.

    Both handles are always closed; every failure is kept in ``errors``
    as (file kind, exception) pairs.
    """

    def __init__(self, errors):
        self.errors = list(errors)
        parts = [f"Error closing {kind}: {err}" for kind, err in self.errors]
        super().__init__("; ".join(parts))

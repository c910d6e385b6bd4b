"""
Reader for Visual FoxPro (.DBF) tables and their memo (.FPT) files.

The table is never loaded into memory: the header and field descriptors
are parsed once at open time, after which records and single fields are
read on demand by seeking to their byte offset. Field bytes are converted
to Python values (str, int, float, bool, date, datetime, bytes) according
to the field type.
"""

import base64
import datetime
import json
import logging
import os
import struct
from dataclasses import dataclass, field as dataclass_field
from typing import List, Dict, Any, Optional, BinaryIO, Tuple, Callable, Iterator

from dbf_errors import (
    DBFError, DBFEOFError, DBFBOFError, DBFIncompleteReadError,
    DBFInvalidFieldError, DBFNoFPTFileError, DBFNoDBFFileError,
    DBFUnsupportedVersionError, DBFUnsupportedFieldTypeError,
    DBFInvalidRecordError, DBFFieldDecodeError, DBFCloseError
)
from fpt_module import read_fpt_header, fpt_read_block
from jd_module import jd_to_ymd


logger = logging.getLogger(__name__)

# Constants
DBF_HEADER_SIZE = 32
DBF_FIELD_DESCRIPTOR_SIZE = 32
DBF_HEADER_TERMINATOR = 0x0D
DBF_BACKLINK_SIZE = 263
# Header + terminator + backlink; the field descriptors come on top of this
DBF_HEADER_OVERHEAD = DBF_HEADER_SIZE + 1 + DBF_BACKLINK_SIZE
DBF_RECORD_ACTIVE = 0x20
DBF_RECORD_DELETED = 0x2A
DBF_FLAG_HAS_MEMO = 0x02
DBF_VALID_VERSIONS = (0x30, 0x31)  # Visual FoxPro, Visual FoxPro with autoincrement

# Values returned for blank or unusable D and T fields
DBF_ZERO_DATE = datetime.date(1, 1, 1)
DBF_ZERO_DATETIME = datetime.datetime(1, 1, 1, tzinfo=datetime.timezone.utc)


# Data structures
@dataclass
class DBFColumn:
    """Represents a column/field descriptor in a DBF file."""
    name: str  # Field name (max 10 chars)
    field_type: str  # 'C', 'N', 'M', etc.
    length: int  # Field length in bytes
    decimals: int  # Number of decimal places (for numeric)
    offset: int = 0  # offset within record; first field starts at 1
    flags: int = 0  # Field flags (system, nullable, binary, autoincrement)
    autoinc_next: int = 0  # Next autoincrement value
    autoinc_step: int = 0  # Autoincrement step


@dataclass
class DBFHeader:
    """Represents the header of a DBF file."""
    version: int = 0  # File type, 0x30 for Visual FoxPro
    year: int = 0  # Last update year (2 digits, since 2000)
    month: int = 0  # Last update month
    day: int = 0  # Last update day
    record_count: int = 0  # Number of records
    header_size: int = 0  # Position of the first record
    record_size: int = 0  # Record size in bytes, including the delete flag
    table_flags: int = 0  # 0x01 has CDX, 0x02 has memo, 0x04 is a database
    code_page: int = 0  # Code page mark
    fields: List[DBFColumn] = None  # Field descriptors
    field_count: int = 0  # Number of field descriptors read

    def __post_init__(self):
        if self.fields is None:
            self.fields = []


@dataclass
class DBFRecord:
    """A decoded record. Values are in field order."""
    deleted: bool = False
    values: List[Any] = dataclass_field(default_factory=list)

    def field(self, pos: int) -> Any:
        """Get a field value by zero-based field position."""
        if pos < 0 or pos >= len(self.values):
            raise DBFInvalidFieldError(pos)
        return self.values[pos]


class DBFFile:
    """An open DBF table (and its memo file) plus the record pointer."""
    def __init__(self):
        self.file = None
        self.fpt_file = None
        self.header = DBFHeader()
        self.fpt_header = None
        self.decoder = None
        self.recno = 0  # record pointer, moved by dbf_file_goto / dbf_file_skip
        self.owns_files = False  # True when opened from disk by dbf_file_open
        self.is_open = False


# Header parsing
def valid_file_version(version: int) -> bool:
    """Default file version check: only accept Visual FoxPro tables."""
    return version in DBF_VALID_VERSIONS


def _read_exact(file: BinaryIO, size: int, what: str) -> bytes:
    buf = file.read(size)
    if len(buf) < size:
        raise DBFIncompleteReadError(size, len(buf), what)
    return buf


def read_dbf_header(file: BinaryIO) -> DBFHeader:
    """Read the fixed 32 byte DBF header (little-endian) from offset 0."""
    file.seek(0)
    buf = _read_exact(file, DBF_HEADER_SIZE, "DBF header")

    header = DBFHeader()
    (header.version, header.year, header.month, header.day,
     header.record_count, header.header_size, header.record_size,
     header.table_flags, header.code_page) = struct.unpack("<4BLHH16xBB2x", buf)
    return header


def read_dbf_fields(file: BinaryIO) -> List[DBFColumn]:
    """
    Read the field descriptors, starting at offset 32.

    Descriptors are read until the header terminator (0x0D) is found in
    place of the next descriptor.
    """
    fields = []
    offset = DBF_HEADER_SIZE
    while True:
        # Peek 1 byte
        file.seek(offset)
        peek_byte = _read_exact(file, 1, "field descriptor")
        if peek_byte[0] == DBF_HEADER_TERMINATOR:
            break

        # Rewind and read descriptor
        file.seek(offset)
        field_buf = _read_exact(file, DBF_FIELD_DESCRIPTOR_SIZE, "field descriptor")
        (name, field_type, pos, length, decimals,
         flags, autoinc_next, autoinc_step) = struct.unpack("<11scLBBBLB8x", field_buf)

        fields.append(DBFColumn(
            name=name.split(b'\x00', 1)[0].decode('latin-1'),
            field_type=field_type.decode('latin-1'),
            length=length,
            decimals=decimals,
            offset=pos,
            flags=flags,
            autoinc_next=autoinc_next,
            autoinc_step=autoinc_step
        ))
        offset += DBF_FIELD_DESCRIPTOR_SIZE

    return fields


def dbf_header_modified(header: DBFHeader) -> datetime.date:
    """Last update date. The year is stored in 2 digits, 2000 is added."""
    return datetime.date(2000 + header.year, header.month, header.day)


def dbf_header_calc_field_count(header: DBFHeader) -> int:
    """Number of fields computed from the header alone."""
    return (header.header_size - DBF_HEADER_OVERHEAD) // DBF_FIELD_DESCRIPTOR_SIZE


def dbf_header_file_size(header: DBFHeader) -> int:
    """File size computed from the header alone."""
    return (DBF_HEADER_OVERHEAD
            + dbf_header_calc_field_count(header) * DBF_FIELD_DESCRIPTOR_SIZE
            + header.record_count * header.record_size)


def _check_record_size(header: DBFHeader) -> None:
    expected = 1 + sum(field.length for field in header.fields)
    if expected != header.record_size:
        logger.warning(
            "Record size in header (%d) does not match the field lengths (%d)",
            header.record_size, expected
        )


# Opening and closing
def dbf_fpt_filename(filename: str) -> str:
    """
    Name of the memo file belonging to a DBF file.

    The memo file has the same name with an .FPT extension, upper case if the
    DBF extension is upper case, lower case otherwise.
    """
    root, ext = os.path.splitext(filename)
    fpt_ext = '.FPT' if ext.upper() == ext else '.fpt'
    return root + fpt_ext


def _prepare_dbf(file: BinaryIO, decoder, version_check: Callable[[int], bool]) -> DBFFile:
    if decoder is None:
        raise ValueError("A text decoder is required")

    header = read_dbf_header(file)

    # Check if the file version is expected, pass another version_check if needed
    if not version_check(header.version):
        raise DBFUnsupportedVersionError(header.version)

    header.fields = read_dbf_fields(file)
    header.field_count = len(header.fields)
    _check_record_size(header)

    dbf = DBFFile()
    dbf.file = file
    dbf.header = header
    dbf.decoder = decoder
    dbf.is_open = True

    logger.debug(
        "Opened DBF: version 0x%02X, %d records of %d bytes, %d fields",
        header.version, header.record_count, header.record_size, header.field_count
    )
    return dbf


def _prepare_fpt(dbf: DBFFile, fpt_file: BinaryIO) -> None:
    dbf.fpt_header = read_fpt_header(fpt_file)
    dbf.fpt_file = fpt_file


def dbf_has_memo_file(header: DBFHeader) -> bool:
    """Check if the table flags say there is a memo file."""
    return (header.table_flags & DBF_FLAG_HAS_MEMO) != 0


def dbf_file_open(filename: str, decoder,
                  version_check: Callable[[int], bool] = valid_file_version) -> DBFFile:
    """
    Open an existing DBF file (and its FPT file if the header asks for one).

    The caller is responsible for calling dbf_file_close.

    Args:
        filename: The path to the DBF file
        decoder: Text decoder for C and text M fields (see decoder_module)
        version_check: Predicate accepting or rejecting the file version byte

    Returns:
        A DBFFile object representing the opened file
    """
    filename = os.path.normpath(filename)
    file = open(filename, "rb")

    try:
        dbf = _prepare_dbf(file, decoder, version_check)
        dbf.owns_files = True

        if dbf_has_memo_file(dbf.header):
            fpt_filename = dbf_fpt_filename(filename)
            try:
                fpt_file = open(fpt_filename, "rb")
            except FileNotFoundError as e:
                raise DBFNoFPTFileError(f"No FPT file: {fpt_filename}") from e

            try:
                _prepare_fpt(dbf, fpt_file)
            except Exception:
                fpt_file.close()
                raise

        return dbf
    except Exception:
        file.close()
        raise


def dbf_stream_open(dbf_source: BinaryIO, fpt_source: Optional[BinaryIO], decoder,
                    version_check: Callable[[int], bool] = valid_file_version) -> DBFFile:
    """
    Open a DBF table from seekable binary streams, e.g. io.BytesIO.

    The streams stay owned by the caller and are not closed by
    dbf_file_close. fpt_source is optional, but must be given when the
    table flags say there is a memo file.
    """
    dbf = _prepare_dbf(dbf_source, decoder, version_check)

    if dbf_has_memo_file(dbf.header):
        if fpt_source is None:
            raise DBFNoFPTFileError()
        _prepare_fpt(dbf, fpt_source)

    return dbf


def dbf_file_close(dbf: DBFFile) -> None:
    """
    Close a DBF file and its memo file.

    Both files are closed even if closing one of them fails; the failures
    are raised together as a DBFCloseError.
    """
    if not dbf or not dbf.is_open:
        return

    errors = []
    if dbf.owns_files:
        for kind, file in (("DBF", dbf.file), ("FPT", dbf.fpt_file)):
            if file is None:
                continue
            try:
                file.close()
            except OSError as e:
                errors.append((kind, e))

    dbf.file = None
    dbf.fpt_file = None
    dbf.is_open = False

    if errors:
        raise DBFCloseError(errors)


def _check_open(dbf: DBFFile) -> None:
    if not dbf or not dbf.is_open:
        raise DBFNoDBFFileError("DBF file is not open")


def dbf_file_stat(dbf: DBFFile) -> os.stat_result:
    """Stat of the DBF file on disk."""
    if not dbf or not dbf.owns_files or dbf.file is None:
        raise DBFNoDBFFileError()
    return os.fstat(dbf.file.fileno())


def dbf_file_stat_fpt(dbf: DBFFile) -> os.stat_result:
    """Stat of the FPT file on disk."""
    if not dbf or not dbf.owns_files or dbf.fpt_file is None:
        raise DBFNoFPTFileError()
    return os.fstat(dbf.fpt_file.fileno())


# Table information
def dbf_file_header(dbf: DBFFile) -> DBFHeader:
    return dbf.header


def dbf_file_num_records(dbf: DBFFile) -> int:
    return dbf.header.record_count


def dbf_file_num_fields(dbf: DBFFile) -> int:
    return len(dbf.header.fields)


def dbf_file_field_names(dbf: DBFFile) -> List[str]:
    return [field.name for field in dbf.header.fields]


def dbf_file_field_pos(dbf: DBFFile, field_name: str) -> int:
    """Zero-based position of a field, or -1 if there is no such field."""
    for i, field in enumerate(dbf.header.fields):
        if field.name == field_name:
            return i
    return -1


# Record pointer
def dbf_file_goto(dbf: DBFFile, recno: int) -> None:
    """
    Move the record pointer to record recno (zero-based).

    Raises DBFEOFError if recno is past the last record; the pointer is then
    left at record_count (EOF).
    """
    record_count = dbf.header.record_count
    if recno >= record_count:
        dbf.recno = record_count
        raise DBFEOFError()
    if recno < 0:
        dbf.recno = 0
        raise DBFBOFError()
    dbf.recno = recno


def dbf_file_skip(dbf: DBFFile, offset: int) -> None:
    """
    Move the record pointer by offset records (may be negative).

    Deleted records are not skipped. When the new position would be past
    the last record the pointer is left at EOF and DBFEOFError is raised;
    when it would be before the first record the pointer is left at 0 and
    DBFBOFError is raised.
    """
    record_count = dbf.header.record_count
    new_recno = dbf.recno + offset
    if new_recno >= record_count:
        dbf.recno = record_count
        raise DBFEOFError()
    if new_recno < 0:
        dbf.recno = 0
        raise DBFBOFError()
    dbf.recno = new_recno


def dbf_file_eof(dbf: DBFFile) -> bool:
    return dbf.recno >= dbf.header.record_count


def dbf_file_bof(dbf: DBFFile) -> bool:
    return dbf.recno == 0


def dbf_file_recno(dbf: DBFFile) -> int:
    return dbf.recno


# Raw reads
def _record_offset(dbf: DBFFile, recno: int) -> int:
    return dbf.header.header_size + recno * dbf.header.record_size


def _check_recno(dbf: DBFFile, recno: int) -> None:
    if recno >= dbf.header.record_count:
        raise DBFEOFError()
    if recno < 0:
        raise DBFBOFError()


def _check_fieldpos(dbf: DBFFile, fieldpos: int) -> None:
    if fieldpos < 0 or fieldpos >= len(dbf.header.fields):
        raise DBFInvalidFieldError(fieldpos)


def _read_record_bytes(dbf: DBFFile, recno: int) -> bytes:
    _check_open(dbf)
    _check_recno(dbf, recno)
    dbf.file.seek(_record_offset(dbf, recno))
    return _read_exact(dbf.file, dbf.header.record_size, f"record {recno}")


def _read_field_bytes(dbf: DBFFile, recno: int, fieldpos: int) -> bytes:
    _check_open(dbf)
    _check_recno(dbf, recno)
    _check_fieldpos(dbf, fieldpos)
    field = dbf.header.fields[fieldpos]
    dbf.file.seek(_record_offset(dbf, recno) + field.offset)
    return _read_exact(dbf.file, field.length, f"field {field.name} of record {recno}")


def dbf_file_read_memo(dbf: DBFFile, block: int) -> Tuple[bytes, bool]:
    """
    Read a memo from the FPT file.

    Returns:
        Tuple of (data, is_text)
    """
    if dbf.fpt_file is None:
        raise DBFNoFPTFileError()
    return fpt_read_block(dbf.fpt_file, dbf.fpt_header, block)


# Field decoding
def _decode_text(dbf: DBFFile, raw: bytes) -> str:
    return dbf.decoder.decode(raw)


def _decode_character(dbf: DBFFile, raw: bytes, field: DBFColumn) -> str:
    # C values are not trimmed
    return _decode_text(dbf, raw)


def _decode_memo(dbf: DBFFile, raw: bytes, field: DBFColumn) -> Any:
    # M values hold the block number in the FPT file
    block = struct.unpack("<L", raw)[0]
    data, is_text = dbf_file_read_memo(dbf, block)
    if is_text:
        return _decode_text(dbf, data)
    return data


def _decode_integer(dbf: DBFFile, raw: bytes, field: DBFColumn) -> int:
    return struct.unpack("<l", raw)[0]


def _decode_double(dbf: DBFFile, raw: bytes, field: DBFColumn) -> float:
    return struct.unpack("<d", raw)[0]


def _decode_currency(dbf: DBFFile, raw: bytes, field: DBFColumn) -> float:
    # Y values are 64 bit integers with 4 implied decimal places
    return struct.unpack("<q", raw)[0] / 10000


def _numeric_text(raw: bytes) -> str:
    text = raw.decode('ascii').strip()
    # int() and float() would accept "1_000"
    if '_' in text:
        raise ValueError(f"invalid number {text!r}")
    return text


def _parse_int(raw: bytes) -> int:
    text = _numeric_text(raw)
    if not text:
        return 0
    return int(text, 10)


def _parse_float(raw: bytes) -> float:
    text = _numeric_text(raw)
    if not text:
        return 0.0
    return float(text)


def _decode_numeric(dbf: DBFFile, raw: bytes, field: DBFColumn) -> Any:
    # N values without decimals are ints, with decimals the same as F
    if field.decimals == 0:
        return _parse_int(raw)
    return _parse_float(raw)


def _decode_float(dbf: DBFFile, raw: bytes, field: DBFColumn) -> float:
    return _parse_float(raw)


def _decode_date(dbf: DBFFile, raw: bytes, field: DBFColumn) -> datetime.date:
    # D values are stored as YYYYMMDD
    if raw == b' ' * 8:
        return DBF_ZERO_DATE
    text = raw.decode('ascii')
    if len(text) != 8 or not text.isdigit():
        raise ValueError(f"invalid date {text!r}")
    return datetime.date(int(text[0:4]), int(text[4:6]), int(text[6:8]))


def _decode_datetime(dbf: DBFFile, raw: bytes, field: DBFColumn) -> datetime.datetime:
    # T values are a Julian day number followed by milliseconds since midnight
    julian, msec = struct.unpack("<LL", raw)
    if julian == 0 and msec == 0:
        return DBF_ZERO_DATETIME

    year, month, day = jd_to_ymd(julian)
    if 1 <= year <= 9999:
        value = datetime.datetime(year, month, day, tzinfo=datetime.timezone.utc)
        try:
            return value + datetime.timedelta(milliseconds=msec)
        except OverflowError:
            pass

    # Some tables contain garbage in T fields; read those as blank
    logger.warning("Field %s: invalid datetime (julian day %d, %d ms), using blank value",
                   field.name, julian, msec)
    return DBF_ZERO_DATETIME


def _decode_logical(dbf: DBFFile, raw: bytes, field: DBFColumn) -> bool:
    # Only 'T' is true; 'F', '?' and blank are all false
    return raw == b'T'


def _decode_varbinary(dbf: DBFFile, raw: bytes, field: DBFColumn) -> bytes:
    return bytes(raw)


DBF_FIELD_DECODERS: Dict[str, Callable[[DBFFile, bytes, DBFColumn], Any]] = {
    'C': _decode_character,
    'M': _decode_memo,
    'I': _decode_integer,
    'B': _decode_double,
    'Y': _decode_currency,
    'N': _decode_numeric,
    'F': _decode_float,
    'D': _decode_date,
    'T': _decode_datetime,
    'L': _decode_logical,
    'V': _decode_varbinary,
}


def dbf_field_data_to_value(dbf: DBFFile, raw: bytes, fieldpos: int) -> Any:
    """
    Convert the raw bytes of a field to a Python value.

    C and text M fields go through the table's decoder; M fields read their
    data from the FPT file.

    Args:
        dbf: The DBF file object
        raw: Raw field bytes (field.length bytes)
        fieldpos: Zero-based field position

    Returns:
        str, int, float, bool, date, datetime or bytes depending on the type
    """
    _check_fieldpos(dbf, fieldpos)
    field = dbf.header.fields[fieldpos]

    decode = DBF_FIELD_DECODERS.get(field.field_type)
    if decode is None:
        raise DBFUnsupportedFieldTypeError(field.field_type)

    try:
        return decode(dbf, raw, field)
    except (ValueError, struct.error) as e:
        raise DBFFieldDecodeError(field.name, fieldpos, str(e)) from e


def _bytes_to_record(dbf: DBFFile, data: bytes) -> DBFRecord:
    # A record starts with the delete flag, a space or '*'
    flag = data[0]
    if flag not in (DBF_RECORD_ACTIVE, DBF_RECORD_DELETED):
        raise DBFInvalidRecordError(
            f"Invalid record data, no delete flag found at beginning of record (0x{flag:02X})"
        )

    record = DBFRecord(deleted=(flag == DBF_RECORD_DELETED))
    for i, field in enumerate(dbf.header.fields):
        raw = data[field.offset:field.offset + field.length]
        record.values.append(dbf_field_data_to_value(dbf, raw, i))
    return record


# Reading records and fields
def dbf_file_read_record_at(dbf: DBFFile, recno: int) -> DBFRecord:
    """Read and decode the complete record recno. The record pointer is not moved."""
    return _bytes_to_record(dbf, _read_record_bytes(dbf, recno))


def dbf_file_read_record(dbf: DBFFile) -> DBFRecord:
    """Read and decode the record at the record pointer."""
    return dbf_file_read_record_at(dbf, dbf.recno)


def dbf_file_read_field_at(dbf: DBFFile, recno: int, fieldpos: int) -> Any:
    """Read a single field of record recno without reading the whole record."""
    raw = _read_field_bytes(dbf, recno, fieldpos)
    return dbf_field_data_to_value(dbf, raw, fieldpos)


def dbf_file_read_field(dbf: DBFFile, fieldpos: int) -> Any:
    """Read a single field of the record at the record pointer."""
    return dbf_file_read_field_at(dbf, dbf.recno, fieldpos)


def dbf_file_deleted_at(dbf: DBFFile, recno: int) -> bool:
    """Check the delete flag of record recno. Only the flag byte is read."""
    _check_open(dbf)
    _check_recno(dbf, recno)
    dbf.file.seek(_record_offset(dbf, recno))
    flag = _read_exact(dbf.file, 1, f"delete flag of record {recno}")
    return flag[0] == DBF_RECORD_DELETED


def dbf_file_deleted(dbf: DBFFile) -> bool:
    return dbf_file_deleted_at(dbf, dbf.recno)


def dbf_file_iter_records(dbf: DBFFile, skip_deleted: bool = False) -> Iterator[Tuple[int, DBFRecord]]:
    """
    Iterate over the table from the first record, moving the record pointer.

    Yields:
        Tuples of (recno, record)
    """
    try:
        dbf_file_goto(dbf, 0)
    except DBFEOFError:
        return

    while True:
        recno = dbf.recno
        if not (skip_deleted and dbf_file_deleted_at(dbf, recno)):
            yield recno, dbf_file_read_record_at(dbf, recno)
        try:
            dbf_file_skip(dbf, 1)
        except DBFEOFError:
            return


# Map and JSON output
def dbf_record_to_map(dbf: DBFFile, record: DBFRecord) -> Dict[str, Any]:
    """Map field names to the values of a decoded record."""
    return {field.name: value for field, value in zip(dbf.header.fields, record.values)}


def dbf_file_record_to_map(dbf: DBFFile, recno: Optional[int] = None) -> Dict[str, Any]:
    """
    Read a record as a dict of field name to value.

    Args:
        dbf: The DBF file object
        recno: Record to read, None for the record at the record pointer

    Returns:
        Dict of field name to value
    """
    if recno is None:
        recno = dbf.recno
    return dbf_record_to_map(dbf, dbf_file_read_record_at(dbf, recno))


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime.datetime):
        return value.isoformat(timespec='milliseconds').replace('+00:00', 'Z')
    if isinstance(value, datetime.date):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(value).decode('ascii')
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def dbf_file_record_to_json(dbf: DBFFile, recno: Optional[int] = None, trim_spaces: bool = False) -> str:
    """
    Read a record as a JSON object.

    Keys are sorted, dates are written as YYYY-MM-DD, datetimes as ISO 8601
    in UTC and binary values as base64.

    Args:
        dbf: The DBF file object
        recno: Record to read, None for the record at the record pointer
        trim_spaces: Strip surrounding whitespace from string values

    Returns:
        JSON text
    """
    values = dbf_file_record_to_map(dbf, recno)
    if trim_spaces:
        values = {name: value.strip() if isinstance(value, str) else value
                  for name, value in values.items()}
    return json.dumps(values, sort_keys=True, separators=(',', ':'),
                      ensure_ascii=False, allow_nan=False, default=_json_default)


# Export functions
__all__ = [
    'DBFColumn', 'DBFHeader', 'DBFRecord', 'DBFFile', 'DBFError',
    'DBF_HEADER_SIZE', 'DBF_FIELD_DESCRIPTOR_SIZE', 'DBF_HEADER_TERMINATOR',
    'DBF_BACKLINK_SIZE', 'DBF_HEADER_OVERHEAD',
    'DBF_RECORD_ACTIVE', 'DBF_RECORD_DELETED', 'DBF_FLAG_HAS_MEMO',
    'DBF_VALID_VERSIONS',
    'DBF_ZERO_DATE', 'DBF_ZERO_DATETIME', 'DBF_FIELD_DECODERS',
    'valid_file_version', 'read_dbf_header', 'read_dbf_fields',
    'dbf_header_modified', 'dbf_header_calc_field_count', 'dbf_header_file_size',
    'dbf_fpt_filename', 'dbf_has_memo_file',
    'dbf_file_open', 'dbf_stream_open', 'dbf_file_close',
    'dbf_file_stat', 'dbf_file_stat_fpt',
    'dbf_file_header', 'dbf_file_num_records', 'dbf_file_num_fields',
    'dbf_file_field_names', 'dbf_file_field_pos',
    'dbf_file_goto', 'dbf_file_skip', 'dbf_file_eof', 'dbf_file_bof', 'dbf_file_recno',
    'dbf_file_read_memo', 'dbf_field_data_to_value',
    'dbf_file_read_record', 'dbf_file_read_record_at',
    'dbf_file_read_field', 'dbf_file_read_field_at',
    'dbf_file_deleted', 'dbf_file_deleted_at', 'dbf_file_iter_records',
    'dbf_record_to_map', 'dbf_file_record_to_map', 'dbf_file_record_to_json',
]

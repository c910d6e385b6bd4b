"""
Character set decoders for C (character) and text M (memo) fields.

The reader never decodes text itself; it calls the decode() method of the
decoder passed to dbf_file_open / dbf_stream_open. Any object with a
matching decode() method can be used.
"""

import codecs
from typing import Dict, Protocol

from dbf_errors import DBFInvalidUTF8Error


# Visual FoxPro code page marks (header byte 29) and their Python codecs
DBF_CODE_PAGES: Dict[int, str] = {
    0x01: 'cp437',
    0x02: 'cp850',
    0x03: 'cp1252',
    0x04: 'mac_roman',
    0x64: 'cp852',
    0x65: 'cp866',
    0x66: 'cp865',
    0x67: 'cp861',
    0x6A: 'cp737',
    0x6B: 'cp857',
    0x96: 'mac_cyrillic',
    0x97: 'mac_latin2',
    0x98: 'mac_greek',
    0xC8: 'cp1250',
    0xC9: 'cp1251',
    0xCA: 'cp1254',
    0xCB: 'cp1253',
}


class TextDecoder(Protocol):
    """Anything that turns raw field bytes into text."""

    def decode(self, data: bytes) -> str:
        ...


class UTF8Decoder:
    """Assumes the DBF is already UTF-8; invalid bytes are replaced, never rejected."""

    def decode(self, data: bytes) -> str:
        return data.decode('utf-8', errors='replace')


class UTF8Validator:
    """Strict UTF-8: raises DBFInvalidUTF8Error on invalid input."""

    def decode(self, data: bytes) -> str:
        try:
            return data.decode('utf-8')
        except UnicodeDecodeError:
            raise DBFInvalidUTF8Error() from None


class CodePageDecoder:
    """
    Decodes data stored in a legacy code page.

    Data that is already valid UTF-8 is returned as-is, so tables that were
    partially converted still read correctly. Bytes the code page leaves
    undefined are replaced with U+FFFD.
    """

    def __init__(self, codepage: str):
        # Fail early on an unknown codec name
        self.codepage = codecs.lookup(codepage).name

    def decode(self, data: bytes) -> str:
        try:
            return data.decode('utf-8')
        except UnicodeDecodeError:
            pass
        return data.decode(self.codepage, errors='replace')

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.codepage!r})"


class Win1250Decoder(CodePageDecoder):
    """Translates a Windows-1250 (Central European) DBF to text."""

    def __init__(self):
        super().__init__('cp1250')


def decoder_for_code_page(mark: int):
    """
    Pick a decoder for the code page mark stored in the DBF header.

    Args:
        mark: Code page mark byte (DBFHeader.code_page)

    Returns:
        A CodePageDecoder for known marks, a UTF8Decoder otherwise
    """
    codepage = DBF_CODE_PAGES.get(mark)
    if codepage is None:
        return UTF8Decoder()
    return CodePageDecoder(codepage)


__all__ = [
    'DBF_CODE_PAGES', 'TextDecoder',
    'UTF8Decoder', 'UTF8Validator', 'CodePageDecoder', 'Win1250Decoder',
    'decoder_for_code_page',
]

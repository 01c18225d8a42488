'''Development code for a TLE propagation package
TLEParser class definition'''

from typing import List, Union
from .errors import TLEParserError, ParserErrorReason
from .tle import TLE, TLE_LINE_LENGTH
from .utils import split_tle_lines


class TLEParser:
    """
    Parses raw buffers into TLE models.

    A buffer holds one element set as three lines: a title followed by the
    two 69-character data lines. Blank lines and surrounding whitespace are
    ignored. Failures raise TLEParserError; its ``reason`` is one of
    ParserErrorReason.EMPTY, ENCODING_ERROR, WRONG_LINE_COUNT (with
    ``line_count``) or INVALID_LINE_LENGTH.
    """

    def parse(self, data: Union[bytes, bytearray, str]) -> TLE:
        """
        Parse a buffer into a TLE model.

        Parameters
        ----------
        data : bytes
            ASCII-encoded buffer holding exactly one element set

        Returns
        -------
        TLE
        """
        lines = self._lines(data, 'ascii')

        if len(lines) != 3:
            raise TLEParserError(ParserErrorReason.WRONG_LINE_COUNT,
                                 f"Expected 3 lines, got {len(lines)}",
                                 line_count=len(lines))

        return self._build(lines)

    def parse_collection(self, data: Union[bytes, bytearray, str],
                         encoding: str = 'ascii') -> List[TLE]:
        """
        Parse a buffer holding several element sets.

        Parameters
        ----------
        data : bytes
            Buffer of title/line 1/line 2 triplets
        encoding : str, optional
            Text encoding of the buffer (default 'ascii')

        Returns
        -------
        list of TLE
            In buffer order
        """
        lines = self._lines(data, encoding)

        if len(lines) % 3 != 0:
            raise TLEParserError(ParserErrorReason.WRONG_LINE_COUNT,
                                 f"Expected a multiple of 3 lines, got {len(lines)}",
                                 line_count=len(lines))

        return [self._build(lines[i:i + 3]) for i in range(0, len(lines), 3)]

    @staticmethod
    def _lines(data, encoding: str) -> List[str]:
        if not data:
            raise TLEParserError(ParserErrorReason.EMPTY, "Buffer is empty")
        try:
            if isinstance(data, str):
                # Text must still be representable in the requested encoding
                data.encode(encoding)
                text = data
            else:
                text = bytes(data).decode(encoding)
        except (UnicodeError, LookupError) as exc:
            raise TLEParserError(ParserErrorReason.ENCODING_ERROR,
                                 f"Buffer is not {encoding} encoded") from exc
        return split_tle_lines(text)

    @staticmethod
    def _build(lines: List[str]) -> TLE:
        if not all(len(line) == TLE_LINE_LENGTH for line in lines[1:]):
            raise TLEParserError(ParserErrorReason.INVALID_LINE_LENGTH,
                                 f"TLE data lines must be {TLE_LINE_LENGTH} characters long")
        return TLE(lines[0], lines[1], lines[2])

'''Development code for a TLE propagation package
TLEDecoder class definition'''

from pathlib import Path
from typing import List, Union
from .errors import TLEDecodingError, DecodingErrorReason
from .tle import TLE, TLE_LINE_LENGTH
from .utils import split_tle_lines


class TLEDecoder:
    """
    Decodes ASCII buffers into TLE values.

    Each element set is three non-blank lines: a title line followed by two
    69-character data lines. The decoder checks the encoding, the line count
    and the data line lengths, and reports failures as TLEDecodingError whose
    ``reason`` is a DecodingErrorReason.

    Examples
    --------
    >>> decoder = TLEDecoder()
    >>> tle = decoder.decode(b"ISS (ZARYA)\\n1 25544U ...\\n2 25544 ...")
    >>> tles = decoder.decode_collection(Path("stations.txt").read_bytes())
    """

    def decode(self, data: Union[bytes, bytearray, str]) -> TLE:
        """
        Decode a single TLE.

        Parameters
        ----------
        data : bytes
            ASCII buffer with exactly three non-blank lines

        Raises
        ------
        TLEDecodingError
            ENCODING_ERROR, WRONG_LINE_COUNT (an empty buffer has 0 lines)
            or INVALID_LINE_LENGTH
        """
        lines = self._lines(data)
        if len(lines) != 3:
            raise TLEDecodingError(DecodingErrorReason.WRONG_LINE_COUNT,
                                   f"Expected 3 lines, got {len(lines)}",
                                   line_count=len(lines))
        return self._decode_triplet(lines)

    def decode_collection(self, data: Union[bytes, bytearray, str]) -> List[TLE]:
        """
        Decode one or more TLEs, in buffer order.

        The buffer must hold a multiple of three non-blank lines; an empty
        buffer decodes to an empty list.
        """
        lines = self._lines(data)
        if len(lines) % 3 != 0:
            raise TLEDecodingError(DecodingErrorReason.WRONG_LINE_COUNT,
                                   f"Expected a multiple of 3 lines, got {len(lines)}",
                                   line_count=len(lines))
        return [self._decode_triplet(lines[i:i + 3]) for i in range(0, len(lines), 3)]

    def decode_file(self, path: Union[str, Path]) -> List[TLE]:
        """Decode every TLE stored in a file."""
        return self.decode_collection(Path(path).read_bytes())

    @staticmethod
    def _lines(data) -> List[str]:
        if isinstance(data, str):
            if not data.isascii():
                raise TLEDecodingError(DecodingErrorReason.ENCODING_ERROR,
                                       "The provided data is not ASCII")
            text = data
        else:
            try:
                text = bytes(data).decode('ascii')
            except UnicodeDecodeError as exc:
                raise TLEDecodingError(DecodingErrorReason.ENCODING_ERROR,
                                       "The provided data is not decodable to ASCII") from exc
        return split_tle_lines(text)

    @staticmethod
    def _decode_triplet(lines: List[str]) -> TLE:
        title, first_line, second_line = lines
        if len(first_line) != TLE_LINE_LENGTH or len(second_line) != TLE_LINE_LENGTH:
            raise TLEDecodingError(
                DecodingErrorReason.INVALID_LINE_LENGTH,
                f"TLE '{title}' has data lines of {len(first_line)} and "
                f"{len(second_line)} characters, expected {TLE_LINE_LENGTH}"
            )
        return TLE(title, first_line, second_line)

'''Development code for a TLE propagation package
TLEEncoder class definition'''

from typing import Iterable
from .errors import TLEEncodingError, EncodingErrorReason
from .tle import TLE


class TLEEncoder:
    """
    Encodes TLE values into ASCII buffers.

    The output is the title, first line and second line joined by newlines,
    without a trailing newline, so that TLEDecoder.decode() reads it back.
    """

    def encode(self, tle: TLE) -> bytes:
        """
        Encode a single TLE.

        Raises
        ------
        TLEEncodingError
            CANNOT_ENCODE_IN_ASCII if any line holds non-ASCII characters
        """
        return self._to_ascii("\n".join(tle.to_list()))

    def encode_collection(self, tles: Iterable[TLE]) -> bytes:
        """Encode several TLEs back to back."""
        return self._to_ascii("\n".join("\n".join(tle.to_list()) for tle in tles))

    @staticmethod
    def _to_ascii(text: str) -> bytes:
        try:
            return text.encode('ascii')
        except UnicodeEncodeError as exc:
            raise TLEEncodingError(EncodingErrorReason.CANNOT_ENCODE_IN_ASCII,
                                   "TLE cannot be represented in ASCII") from exc

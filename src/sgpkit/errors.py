'''Development code for a TLE propagation package
Exception hierarchy and error codes'''

from enum import Enum, IntEnum
from typing import Optional

# Error domain shared by every SGPKitError
SGPKIT_ERROR_DOMAIN = "it.calogerosanfilippo.SPGKitError"


class ErrorCode(IntEnum):
    """Flat error taxonomy reported by the propagation adapter."""
    TLE_ERROR = 0
    SATELLITE_ERROR = 1
    GENERIC_ERROR = 2


class SGPKitError(Exception):
    """
    Base exception for SGPKit errors.

    Every error raised by the package carries a ``code`` from ErrorCode and
    the package ``domain`` so callers can dispatch on either the exception
    class or the numeric code.
    """
    code = ErrorCode.GENERIC_ERROR
    domain = SGPKIT_ERROR_DOMAIN

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code.name}, message={self.message!r})"


class TLEError(SGPKitError, ValueError):
    """The TLE record is malformed or rejected by the engine."""
    code = ErrorCode.TLE_ERROR


class SatelliteError(SGPKitError, RuntimeError):
    """
    Propagation failed for this satellite at the requested time.

    Parameters
    ----------
    message : str
        Human readable description (the engine's message where available)
    engine_code : int, optional
        Raw SGP4 error code (1-6) when the failure came from the engine
    """
    code = ErrorCode.SATELLITE_ERROR

    def __init__(self, message: str = "", engine_code: Optional[int] = None):
        super().__init__(message)
        self.engine_code = engine_code


class GenericError(SGPKitError):
    """Unclassified failure: bad call arguments or unexpected engine errors."""
    code = ErrorCode.GENERIC_ERROR


# ========== CODEC ERRORS ==========
class ParserErrorReason(Enum):
    EMPTY = 'empty'
    ENCODING_ERROR = 'encoding'
    WRONG_LINE_COUNT = 'line_count'
    INVALID_LINE_LENGTH = 'line_length'


class DecodingErrorReason(Enum):
    ENCODING_ERROR = 'encoding'
    WRONG_LINE_COUNT = 'line_count'
    INVALID_LINE_LENGTH = 'line_length'


class EncodingErrorReason(Enum):
    CANNOT_ENCODE_IN_ASCII = 'ascii'


class _ReasonError(TLEError):
    """TLEError that records which codec check failed."""

    def __init__(self, reason, message: str = "", line_count: Optional[int] = None):
        super().__init__(message or reason.name.lower().replace('_', ' '))
        self.reason = reason
        self.line_count = line_count

    def __repr__(self) -> str:
        if self.line_count is None:
            return f"{type(self).__name__}({self.reason.name})"
        return f"{type(self).__name__}({self.reason.name}, line_count={self.line_count})"


class TLEParserError(_ReasonError):
    """Raised by TLEParser; ``reason`` is a ParserErrorReason."""


class TLEDecodingError(_ReasonError):
    """Raised by TLEDecoder; ``reason`` is a DecodingErrorReason."""


class TLEEncodingError(_ReasonError):
    """Raised by TLEEncoder; ``reason`` is an EncodingErrorReason."""

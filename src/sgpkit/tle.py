'''Development code for a TLE propagation package
TLE class definition'''

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Sequence, Tuple
from .errors import TLEError
from .utils import validation_error

# Every TLE data line is exactly this many characters (checksum included)
TLE_LINE_LENGTH = 69

# Alpha-5 catalog numbers skip I and O
_ALPHA5 = "ABCDEFGHJKLMNPQRSTUVWXYZ"


@dataclass(frozen=True)
class TLE:
    """
    Immutable container for a Two-Line Element set.

    A TLE consists of three lines: an optional title line followed by two
    data lines that are each exactly 69 characters long. Data lines are
    stored exactly as given and the title is stripped; construction only
    checks that both data lines are present and have the right length.

    Parameters
    ----------
    title : str
        The title (line 0) of the TLE set. May be empty; surrounding
        whitespace is removed.
    first_line : str
        The first data line (line 1). Must be exactly 69 characters.
    second_line : str
        The second data line (line 2). Must be exactly 69 characters.

    Raises
    ------
    TLEError
        If a data line is empty or not 69 characters long.

    Examples
    --------
    >>> tle = TLE(
    ...     title="ISS (ZARYA)",
    ...     first_line="1 25544U 98067A   24060.51736111  .00016717  00000-0  30270-3 0  9991",
    ...     second_line="2 25544  51.6431  57.2546 0004487  58.7657  56.7570 15.49688911439444",
    ... )
    >>> tle.satellite_number
    25544
    """
    title: str
    first_line: str
    second_line: str

    def __post_init__(self):
        if not isinstance(self.title, str):
            raise TLEError(f"TLE title must be a string, got {type(self.title).__name__}")
        # Title padding is not significant in TLE files
        object.__setattr__(self, 'title', self.title.strip())
        for line in (self.first_line, self.second_line):
            if not isinstance(line, str):
                raise TLEError(f"TLE lines must be strings, got {type(line).__name__}")
        if not self.first_line or not self.second_line:
            raise TLEError("TLE lines cannot be empty")
        if (len(self.first_line) != TLE_LINE_LENGTH
                or len(self.second_line) != TLE_LINE_LENGTH):
            raise TLEError(
                f"TLE lines must be {TLE_LINE_LENGTH} characters long, got "
                f"{len(self.first_line)} and {len(self.second_line)}"
            )

    # ========== ALTERNATE CONSTRUCTORS ==========
    @classmethod
    def from_lines(cls, first_line: str, second_line: str) -> "TLE":
        """Create a TLE with an empty title."""
        return cls("", first_line, second_line)

    @classmethod
    def from_list(cls, values: Sequence[str]) -> "TLE":
        """
        Create a TLE from its unkeyed representation.

        Parameters
        ----------
        values : sequence of str
            Exactly three strings: [title, first_line, second_line]
        """
        if len(values) != 3:
            raise TLEError(f"Expected [title, first_line, second_line], got {len(values)} values")
        return cls(values[0], values[1], values[2])

    def to_list(self) -> List[str]:
        """Unkeyed representation: [title, first_line, second_line]."""
        return [self.title, self.first_line, self.second_line]

    @property
    def lines(self) -> Tuple[str, str, str]:
        return (self.title, self.first_line, self.second_line)

    # ========== VALIDATION ==========
    def validate(self) -> "TLE":
        """
        Check line numbers and catalog numbers.

        Goes through validation_error, so failures raise TLEError when
        config.STRICT_VALIDATION is set and warn otherwise. Checksums are
        not verified.

        Returns
        -------
        TLE
            self, to allow chaining
        """
        if self.first_line[0] != '1':
            validation_error(f"TLE line 1 must start with '1', got '{self.first_line[0]}'")
        if self.second_line[0] != '2':
            validation_error(f"TLE line 2 must start with '2', got '{self.second_line[0]}'")
        if self.first_line[2:7] != self.second_line[2:7]:
            validation_error(
                f"Catalog number mismatch: line 1 has '{self.first_line[2:7]}', "
                f"line 2 has '{self.second_line[2:7]}'"
            )
        return self

    # ========== FIELD ACCESS ==========
    # Fixed-column fields; parse failures surface as TLEError
    @property
    def satellite_number(self) -> int:
        """NORAD catalog number (alpha-5 aware)"""
        field = self.first_line[2:7].strip()
        if field and field[0].isalpha():
            prefix = field[0].upper()
            if prefix not in _ALPHA5:
                raise TLEError(f"Invalid alpha-5 catalog number '{field}'")
            return (_ALPHA5.index(prefix) + 10) * 10000 + self._int(field[1:], "catalog number")
        return self._int(field, "catalog number")

    @property
    def classification(self) -> str:
        """Classification character (U, C or S)"""
        return self.first_line[7]

    @property
    def international_designator(self) -> str:
        return self.first_line[9:17].strip()

    @property
    def epoch(self) -> datetime:
        """Element set epoch as a timezone-aware UTC datetime"""
        year = self._int(self.first_line[18:20], "epoch year")
        day = self._float(self.first_line[20:32], "epoch day")
        year += 2000 if year < 57 else 1900
        start = datetime(year, 1, 1, tzinfo=timezone.utc)
        return start + timedelta(days=day - 1.0)

    @property
    def bstar(self) -> float:
        """B* drag term [1/earth radii]"""
        field = self.first_line[53:61].strip()
        try:
            sign = -1.0 if field.startswith('-') else 1.0
            digits = field.lstrip('+-')
            mantissa, exponent = digits[:-2], digits[-2:]
            return sign * float("0." + mantissa) * 10.0 ** int(exponent)
        except ValueError as exc:
            raise TLEError(f"Cannot parse B* term '{field}'") from exc

    @property
    def inclination(self) -> float:
        """Inclination [deg]"""
        return self._float(self.second_line[8:16], "inclination")

    @property
    def raan(self) -> float:
        """Right ascension of the ascending node [deg]"""
        return self._float(self.second_line[17:25], "RAAN")

    @property
    def eccentricity(self) -> float:
        """Eccentricity (implied leading decimal point)"""
        return self._float("0." + self.second_line[26:33].strip(), "eccentricity")

    @property
    def arg_perigee(self) -> float:
        """Argument of perigee [deg]"""
        return self._float(self.second_line[34:42], "argument of perigee")

    @property
    def mean_anomaly(self) -> float:
        """Mean anomaly [deg]"""
        return self._float(self.second_line[43:51], "mean anomaly")

    @property
    def mean_motion(self) -> float:
        """Mean motion [rev/day]"""
        return self._float(self.second_line[52:63], "mean motion")

    def fields(self) -> Dict[str, Any]:
        """
        Parse every orbital field of the element set.

        Returns
        -------
        dict
            satellite_number, classification, international_designator,
            epoch, bstar, inclination, raan, eccentricity, arg_perigee,
            mean_anomaly, mean_motion

        Raises
        ------
        TLEError
            If any field cannot be parsed
        """
        return {
            'satellite_number': self.satellite_number,
            'classification': self.classification,
            'international_designator': self.international_designator,
            'epoch': self.epoch,
            'bstar': self.bstar,
            'inclination': self.inclination,
            'raan': self.raan,
            'eccentricity': self.eccentricity,
            'arg_perigee': self.arg_perigee,
            'mean_anomaly': self.mean_anomaly,
            'mean_motion': self.mean_motion,
        }

    @staticmethod
    def _int(field: str, name: str) -> int:
        try:
            return int(field.strip())
        except ValueError as exc:
            raise TLEError(f"Cannot parse {name} from '{field}'") from exc

    @staticmethod
    def _float(field: str, name: str) -> float:
        try:
            return float(field.strip())
        except ValueError as exc:
            raise TLEError(f"Cannot parse {name} from '{field}'") from exc

    # ========== SPECIAL METHODS ==========
    def __str__(self):
        return "\n".join(self.lines) if self.title else "\n".join(self.lines[1:])

import re

import numpy as np

from logging_config import get_logger
from tle_io.keplerelement import KeplerElements

logger = get_logger(__name__)

SECONDS_PER_DAY = 86400.0
TLE_LINE_LENGTH = 69

# plain fixed-point decimal, no exponent, nan, inf or underscores
_DECIMAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)")
_ECC_DIGITS = re.compile(r"\d{1,7}")


class TLEParseError(ValueError):
    """Malformed TLE text: missing line, bad column, bad checksum."""


def line_checksum(line):
    """modulo 10 sum over the first 68 columns, '-' counts as 1"""
    s = 0
    for c in line[:68]:
        if c.isdigit():
            s += int(c)
        elif c == "-":
            s += 1
    return s % 10


def validate(line1, line2):
    """Raise TLEParseError if either line fails the NORAD format checks."""
    for num, line in ((1, line1), (2, line2)):
        if not line.startswith(str(num)):
            raise TLEParseError(f"line {num} should start with {num} (found: {line[:1]!r})")

        if len(line) != TLE_LINE_LENGTH:
            raise TLEParseError(
                f"line {num} has incorrect length ({len(line)}, must be {TLE_LINE_LENGTH})"
            )

        computed = line_checksum(line)
        if not line[68].isdigit() or computed != int(line[68]):
            raise TLEParseError(
                f"checksum mismatch in line {num} (computed: {computed}, expected: {line[68]})"
            )

    if line1[2:7] != line2[2:7]:
        raise TLEParseError(
            f"line 1 satellite number ({line1[2:7]}) does not match line 2 ({line2[2:7]})"
        )


def _field(line, start, stop, name):
    text = line[start:stop].strip()
    if not text:
        raise TLEParseError(f"{name} missing at columns [{start},{stop})")
    if not _DECIMAL.fullmatch(text):
        raise TLEParseError(f"{name} is not numeric at columns [{start},{stop}): {text!r}")
    value = float(text)
    if not np.isfinite(value):
        raise TLEParseError(f"{name} is not finite at columns [{start},{stop}): {text!r}")
    return value


class TLEConverter:

    @staticmethod
    def parse(lines, check=False):
        """
        Parse a 2-line element set and return KeplerElements (SI, angles in degrees).
        Expects: lines[0] = line 1, lines[1] = line 2 (a RawTLE works too).
        check=True also validates line numbers, lengths and checksums.
        """
        lines = list(lines)
        if len(lines) < 2:
            raise TLEParseError("Expected two TLE lines (line 1 and line 2).")
        l1 = lines[0].rstrip("\n")
        l2 = lines[1].rstrip("\n")

        if check:
            validate(l1, l2)

        i_deg        = _field(l2, 8, 16, "inclination")
        raan_deg     = _field(l2, 17, 25, "RAAN")             # RAAN (Ω)
        ecc_raw      = _field(l2, 26, 33, "eccentricity")     # 7 digits, no decimal
        w_deg        = _field(l2, 34, 42, "argument of perigee")  # ω
        M_deg        = _field(l2, 43, 51, "mean anomaly")     # M
        mmotion_rev  = _field(l2, 52, 63, "mean motion")      # rev/day

        if not _ECC_DIGITS.fullmatch(l2[26:33].strip()):
            raise TLEParseError(f"eccentricity must be 7 plain digits: {l2[26:33]!r}")
        e = ecc_raw * 1e-7
        if not 0.0 <= e < 1.0:
            raise TLEParseError(f"eccentricity {e} outside [0, 1)")

        if mmotion_rev <= 0.0:
            raise TLEParseError(f"mean motion must be positive, got {mmotion_rev} rev/day")

        # Mean motion (rad/s)
        n = mmotion_rev * 2.0 * np.pi / SECONDS_PER_DAY

        # Semi-major axis from n (consistent with KeplerElements.MU_E units: m^3/s^2)
        a = (KeplerElements.MU_E / (n**2)) ** (1.0 / 3.0)

        logger.debug("parsed line 2: i=%s raan=%s e=%s w=%s M=%s n=%s rev/day",
                     i_deg, raan_deg, e, w_deg, M_deg, mmotion_rev)

        return KeplerElements(i_deg=i_deg, raan_deg=raan_deg, e=e, w_deg=w_deg,
                              M_deg=M_deg, n=n, a=a)

    @staticmethod
    def parse_epoch_fields(line1):
        """line 1 -> (2 digit epoch year, fractional day of year)"""
        l1 = line1.rstrip("\n")
        year = _field(l1, 18, 20, "epoch year")
        day = _field(l1, 20, 32, "epoch day")
        return int(year), day

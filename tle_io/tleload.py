# read tle text into name + two element lines

from dataclasses import dataclass
from pathlib import Path

from tle_io.tleconverter import TLEParseError


@dataclass(frozen=True)
class RawTLE:
    name: str
    line1: str
    line2: str

    def __iter__(self):
        # unpacks as [line1, line2] so TLEConverter.parse takes either form
        return iter((self.line1, self.line2))

    def __len__(self):
        return 2


class TLELoader:

    @staticmethod
    def read_lines(text): # returns list[str]
        lines = []
        for ln in text.splitlines():
            if ln.strip():
                lines.append(ln.rstrip())

        if len(lines) < 2:
            raise TLEParseError("TLE must be two lines")

        return lines

    @staticmethod
    def read_tle(text):
        """
        Name line + line 1 + line 2, or a bare two-line set.
        The first line starting with "1 " followed by one starting with "2 " is taken.
        """
        lines = TLELoader.read_lines(text)

        for k in range(len(lines) - 1):
            if lines[k].startswith("1 ") and lines[k + 1].startswith("2 "):
                name = lines[k - 1].strip() if k > 0 else ""
                return RawTLE(name=name, line1=lines[k], line2=lines[k + 1])

        raise TLEParseError("no line 1 / line 2 pair found in TLE text")

    @staticmethod
    def from_file(path):
        return TLELoader.read_tle(Path(path).read_text(encoding="utf-8"))

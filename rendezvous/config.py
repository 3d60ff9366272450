from dataclasses import dataclass, field
from pathlib import Path

import numpy as np

from tle_io.fetch import ISS_TXT_URL


@dataclass
class RendezvousConfig:
    tle_url: str = ISS_TXT_URL
    tle_path: Path = Path("./data/file.txt") # local copy of the downloaded TLE

    timeout: float = 30.0 # s, single GET, no retry

    offline: bool = False # skip download and use tle_path as is
    check_tle: bool = False # verify line lengths and checksums
    plot: bool = False

    # fixed sample positions for the 2D transform, km
    sample_pos1: np.ndarray = field(default_factory=lambda: np.array([1000.0, 2000.0, 500.0]))
    sample_pos2: np.ndarray = field(default_factory=lambda: np.array([2000.0, 3000.0, 1000.0]))

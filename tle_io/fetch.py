"""
Download a TLE text file and keep a local copy.

One blocking HTTP GET, no retries. Failures come back as TLEFetchError so
the caller decides what to print.
"""

from pathlib import Path

import requests

from logging_config import get_logger
from tle_io.tleload import TLELoader

logger = get_logger(__name__)

ISS_TXT_URL = "https://live.ariss.org/iss.txt"


class TLEFetchError(RuntimeError):
    """The TLE source could not be reached or returned an error status."""


def fetch_tle_text(url=ISS_TXT_URL, timeout=30.0):
    logger.debug("GET %s", url)
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as ex:
        raise TLEFetchError(f"Download failed: {ex}") from ex

    resp.encoding = "utf-8"
    return resp.text


def save_tle(text, path):
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    logger.info("TLE file written to %s", path)
    return path


def load_tle(path):
    return TLELoader.from_file(path)


def download_tle(url, path, timeout=30.0):
    """fetch + save, returns the written path"""
    return save_tle(fetch_tle_text(url, timeout=timeout), path)

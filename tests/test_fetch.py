import pytest
import requests

import tle_io.fetch as fetch
from tle_io.fetch import TLEFetchError, download_tle, fetch_tle_text, load_tle

ISS_TEXT = (
    "ISS (ZARYA)\n"
    "1 25544U 98067A   08264.51782528 -.00002182  00000-0 -11606-4 0  2927\n"
    "2 25544  51.6416 247.4627 0006703 130.5360 325.0288 15.72125391563537\n"
)


class FakeResponse:
    def __init__(self, text, status=200):
        self.text = text
        self.status_code = status
        self.encoding = None

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")


def test_fetch_returns_text(monkeypatch):
    calls = []

    def fake_get(url, timeout=None):
        calls.append((url, timeout))
        return FakeResponse(ISS_TEXT)

    monkeypatch.setattr(fetch.requests, "get", fake_get)

    assert fetch_tle_text("https://example.invalid/iss.txt", timeout=5.0) == ISS_TEXT
    assert calls == [("https://example.invalid/iss.txt", 5.0)]


def test_http_error_status_raises(monkeypatch):
    monkeypatch.setattr(fetch.requests, "get", lambda url, timeout=None: FakeResponse("", 404))

    with pytest.raises(TLEFetchError, match="404"):
        fetch_tle_text()


def test_transport_error_is_wrapped(monkeypatch):
    def fake_get(url, timeout=None):
        raise requests.ConnectionError("no route to host")

    monkeypatch.setattr(fetch.requests, "get", fake_get)

    with pytest.raises(TLEFetchError) as info:
        fetch_tle_text()
    assert isinstance(info.value.__cause__, requests.ConnectionError)


def test_download_writes_file_and_load_reads_it(monkeypatch, tmp_path):
    monkeypatch.setattr(fetch.requests, "get", lambda url, timeout=None: FakeResponse(ISS_TEXT))
    path = tmp_path / "data" / "file.txt"

    written = download_tle(fetch.ISS_TXT_URL, path)

    assert written == path
    assert path.read_text(encoding="utf-8") == ISS_TEXT
    assert load_tle(path).name == "ISS (ZARYA)"


def test_failed_download_leaves_no_file(monkeypatch, tmp_path):
    monkeypatch.setattr(fetch.requests, "get", lambda url, timeout=None: FakeResponse("", 500))
    path = tmp_path / "file.txt"

    with pytest.raises(TLEFetchError):
        download_tle(fetch.ISS_TXT_URL, path)
    assert not path.exists()

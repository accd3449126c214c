import io
import zipfile

import pytest
import requests

from nmc_polity_merge.data_collection import sources


class FakeResponse:
    def __init__(self, content: bytes, status_code: int = 200):
        self.content = content
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"status {self.status_code}")


def zipped(name: str, data: bytes) -> bytes:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as archive:
        archive.writestr(f"NMC/{name}", data)
    return buf.getvalue()


def test_fetch_capabilities_extracts_csv(tmp_path, monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append(url)
        return FakeResponse(zipped("nmc.csv", b"ccode,year\n2,1816\n"))

    monkeypatch.setattr(sources.requests, "get", fake_get)
    path = sources.fetch_capabilities(tmp_path, url="https://example.org/nmc.zip", filename="nmc.csv")
    assert path.read_bytes() == b"ccode,year\n2,1816\n"

    # second call finds the file and does not download
    sources.fetch_capabilities(tmp_path, url="https://example.org/nmc.zip", filename="nmc.csv")
    assert len(calls) == 1


def test_fetch_capabilities_missing_member(tmp_path, monkeypatch):
    monkeypatch.setattr(
        sources.requests, "get", lambda url, timeout: FakeResponse(zipped("other.csv", b""))
    )
    with pytest.raises(FileNotFoundError):
        sources.fetch_capabilities(tmp_path, url="https://example.org/nmc.zip", filename="nmc.csv")


def test_fetch_polity_http_error(tmp_path, monkeypatch):
    monkeypatch.setattr(sources.requests, "get", lambda url, timeout: FakeResponse(b"", 404))
    with pytest.raises(requests.HTTPError):
        sources.fetch_polity(tmp_path, url="https://example.org/p5.xls", filename="p5.xls")
    assert not (tmp_path / "p5.xls").exists()


def test_fetch_polity_overwrite(tmp_path, monkeypatch):
    (tmp_path / "p5.xls").write_bytes(b"old")
    monkeypatch.setattr(sources.requests, "get", lambda url, timeout: FakeResponse(b"new"))
    sources.fetch_polity(tmp_path, url="https://example.org/p5.xls", filename="p5.xls", overwrite=True)
    assert (tmp_path / "p5.xls").read_bytes() == b"new"

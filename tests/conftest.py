from __future__ import annotations

import io
import json
import zipfile
from pathlib import Path
from typing import Dict, List, Optional, Union

import pytest
import requests


class FakeResponse:
    def __init__(self, url: str, body: Union[bytes, str], status_code: int = 200):
        self.url = url
        self.status_code = status_code
        self.content = body.encode("utf-8") if isinstance(body, str) else body

    @property
    def text(self) -> str:
        return self.content.decode("utf-8")

    def json(self):
        return json.loads(self.text)

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} for url {self.url}")


class FakeSession:
    """Serves canned bodies keyed by URL and records requests."""

    def __init__(self, routes: Optional[Dict[str, Union[FakeResponse, Exception]]] = None):
        self.routes = dict(routes or {})
        self.calls: List[tuple] = []
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False

    def close(self) -> None:
        self.closed = True

    def get(self, url: str, timeout: Optional[float] = None):
        self.calls.append((url, timeout))
        if url not in self.routes:
            raise requests.ConnectionError(f"no route for {url}")
        r = self.routes[url]
        if isinstance(r, Exception):
            raise r
        return r


def make_zip(members: Dict[str, Optional[str]]) -> bytes:
    """Members ending with '/' (or mapped to None) become directory entries."""

    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        for name, content in members.items():
            if content is None or name.endswith("/"):
                zf.writestr(name if name.endswith("/") else name + "/", "")
            else:
                zf.writestr(name, content)
    return buf.getvalue()


def write_toc(addons_dir: Path, addon: str, version: str, suffix: str = "_Mainline") -> Path:
    folder = addons_dir / addon
    folder.mkdir(parents=True, exist_ok=True)
    toc = folder / f"{addon}{suffix}.toc"
    toc.write_bytes(
        (
            "## Interface: 110002\r\n"
            f"## Title: {addon}\r\n"
            f"## Version: {version}\r\n"
            "## SavedVariables: ElvDB\r\n"
        ).encode("utf-8")
    )
    return toc


@pytest.fixture
def wow_dir(tmp_path: Path) -> Path:
    d = tmp_path / "World of Warcraft" / "_retail_"
    (d / "Interface" / "AddOns").mkdir(parents=True)
    return d


@pytest.fixture
def addons_dir(wow_dir: Path) -> Path:
    return wow_dir / "Interface" / "AddOns"


@pytest.fixture
def write_config(tmp_path: Path):
    def _write(data: dict, name: str = "config.json") -> Path:
        p = tmp_path / name
        if name.endswith((".yaml", ".yml")):
            import yaml

            p.write_text(yaml.safe_dump(data), encoding="utf-8")
        else:
            p.write_text(json.dumps(data), encoding="utf-8")
        return p

    return _write

"""Shared fixtures for site_splitter tests."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from site_splitter.utils import Log


def make_site(site_id: str, **overrides) -> dict:
    site = {
        "compiledCss": "",
        "css": "",
        "id": site_id,
        "js": "",
        "libs": [],
        "name": "",
        "options": {"altCSS": False, "altJS": False, "autoImportant": False, "on": True},
    }
    site.update(overrides)
    return site


@pytest.fixture(autouse=True)
def quiet_log():
    Log.verbose = False
    yield
    Log.verbose = False


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def sample_export() -> dict:
    return {
        "libs": [
            {"name": "jquery", "src": "https://code.jquery.com/jquery.min.js"},
            {"name": "lodash", "src": "https://cdn.jsdelivr.net/npm/lodash/lodash.min.js"},
        ],
        "settings": {"theme": "dark", "nested": {"list": [1, 2, 3], "flag": None}},
        "sites": [
            make_site(
                "https://example.com/*",
                name="Example",
                css="body { color: red; }\n",
                compiledCss="body{color:red!important}",
                js="console.log('hi');\n",
                libs=["jquery"],
            ),
            make_site("*://*.test.org/path", compiledCss="c2", js="alert(1);"),
            make_site("file:///C:\\local\\page.html", css="p { margin: 0 }"),
        ],
    }


def write_export(directory: Path, name: str, data) -> Path:
    path = directory / f"{name}.json"
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path

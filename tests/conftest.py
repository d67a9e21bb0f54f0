"""Shared fixtures for webfox tests."""

import json
import os

import pytest
from click.testing import CliRunner

from webfox import core
from webfox.executor import RequestResult


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def isolate_settings(tmp_path, monkeypatch):
    """Keep ~/.webfox, CWD settings files and WEBFOX_* vars out of tests."""
    fake_global = tmp_path / "fake_home" / ".webfox"
    fake_global.mkdir(parents=True)
    monkeypatch.setattr(core, "GLOBAL_DIR", fake_global)
    monkeypatch.setattr(core, "GLOBAL_CONFIG", fake_global / "config.yaml")
    for name in ("WEBFOX_CONFIG", "WEBFOX_TIMEOUT", "WEBFOX_VERIFY", "WEBFOX_STRICT_FORM"):
        monkeypatch.delenv(name, raising=False)
    return fake_global


@pytest.fixture
def tmp_project(tmp_path):
    original = os.getcwd()
    os.chdir(tmp_path)
    yield tmp_path
    os.chdir(original)


def make_request_result(
    status_code=200,
    body=None,
    headers=None,
    elapsed_ms=42.0,
    error=None,
    raw_text="",
    reason="OK",
):
    """Factory for mock RequestResult objects."""
    r = RequestResult()
    r.status_code = status_code
    r.reason = reason
    r.headers = headers or {}
    r.content_type = r.headers.get("Content-Type", "")
    r.body = body
    r.elapsed_ms = elapsed_ms
    r.error = error
    r.raw_text = raw_text or (
        json.dumps(body) if isinstance(body, dict | list) else str(body or "")
    )
    return r

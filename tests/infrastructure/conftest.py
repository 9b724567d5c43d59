"""Pytest fixtures for stack configuration tests."""

import json
import os
from pathlib import Path
from typing import Any

import pulumi
import pytest

from tracer_iac.configs.constants import ENV_PREFIX


class FakeStackConfig:
    """In-memory stand-in for pulumi.Config (values stored as strings)."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self.values = values or {}

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def get_object(self, key: str) -> Any:
        raw = self.values.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            raise pulumi.ConfigTypeError(key, raw, "JSON object") from exc


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Run each test in an empty directory without TF_VAR_ variables."""
    for key in list(os.environ):
        if key.upper().startswith(ENV_PREFIX):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture
def stack_config():
    """Return a factory for fake Pulumi stack configs."""
    return FakeStackConfig


@pytest.fixture
def required_overrides():
    """Overrides for the two parameters without defaults."""
    return {"vpc_id": "vpc-0abc", "security_group_ids": ["sg-1"]}


@pytest.fixture
def package_root():
    """Return the tracer_iac package directory."""
    return Path(__file__).parent.parent.parent / "tracer_iac"


@pytest.fixture
def python_files_in_package(package_root):
    """Return all Python files in the package."""
    return [f for f in package_root.rglob("*.py") if "__pycache__" not in str(f)]

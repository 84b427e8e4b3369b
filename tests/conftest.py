"""Shared pytest fixtures and configuration for the opencli-spec test suite.

Guidelines
----------
* No network access in any test.
* File-system tests only touch ``tmp_path``.
* Core tests must be pure — no side effects.
* Tests must not depend on OS state.
"""

from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_YAML: str = """\
opencli: "0.1"
info:
  title: dagger
  summary: Build anything
  version: "1.2.0"
  contact:
    name: Dagger team
    email: team@example.com
  license:
    name: Apache License 2.0
    identifier: Apache-2.0
conventions:
  groupOptions: true
  optionArgumentSeparator: "="
options:
  - name: --verbose
    aliases: [-v]
    recursive: true
    description: Increase verbosity
commands:
  - name: build
    aliases: [b]
    description: Build the project
    arguments:
      - name: target
        required: true
        arity:
          minimum: 1
          maximum: 1
        acceptedValues: [debug, release]
    options:
      - name: --jobs
        arguments:
          - name: count
    exitCodes:
      - code: 0
        description: Success
      - code: 2
    commands:
      - name: clean
        hidden: true
    examples:
      - dagger build release
exitCodes:
  - code: 1
    description: Failure
examples:
  - dagger --help
interactive: false
metadata:
  - name: generator
    value:
      tool: hand-written
      tags: [a, b]
"""

SAMPLE_JSON: str = (
    '{"opencli":"0.1","info":{"title":"demo","version":"1.0"},'
    '"commands":[{"name":"build"}]}'
)


@pytest.fixture()
def sample_yaml() -> str:
    return SAMPLE_YAML


@pytest.fixture()
def sample_json() -> str:
    return SAMPLE_JSON


@pytest.fixture()
def yaml_file(tmp_path: Path) -> Path:
    """A UTF-8 YAML document on disk."""
    path = tmp_path / "opencli.yaml"
    path.write_text(SAMPLE_YAML, encoding="utf-8")
    return path


@pytest.fixture()
def json_file(tmp_path: Path) -> Path:
    """A UTF-8 JSON document on disk."""
    path = tmp_path / "opencli.json"
    path.write_text(SAMPLE_JSON, encoding="utf-8")
    return path

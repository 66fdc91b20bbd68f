"""Shared pytest fixtures for npm-watchdog tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from pathlib import Path

import pytest
import structlog

ProjectFactory = Callable[..., Path]


@pytest.fixture
def make_project(tmp_path: Path) -> ProjectFactory:
    """Build a throwaway JS project.

    ``make_project(dependencies={...}, dev_dependencies={...}, files={...})``
    writes ``package.json`` plus every ``relative/path: text`` entry in
    *files* and returns the project root. Pass ``manifest=`` to write raw
    manifest text instead.
    """

    def _make(
        dependencies: dict | None = None,
        dev_dependencies: dict | None = None,
        files: dict[str, str | bytes] | None = None,
        manifest: str | None = None,
        name: str = "project",
    ) -> Path:
        root = tmp_path / name
        root.mkdir()
        if manifest is None:
            data: dict = {"name": name, "version": "1.0.0"}
            if dependencies is not None:
                data["dependencies"] = dependencies
            if dev_dependencies is not None:
                data["devDependencies"] = dev_dependencies
            manifest = json.dumps(data, indent=2)
        (root / "package.json").write_text(manifest, encoding="utf-8")
        for rel, content in (files or {}).items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def scenario_project(make_project: ProjectFactory) -> Path:
    """The express/axios/lodash/typescript example project."""
    return make_project(
        dependencies={"express": "^4.0.0", "axios": "^1.0.0", "lodash": "^4.17.0"},
        dev_dependencies={"typescript": "^5.0.0"},
        files={
            "src/index.js": (
                'const express = require("express");\n'
                'const axios = require("axios");\n'
                'const _ = require("lodash");\n'
                "\n"
                "const app = express();\n"
                'app.get("/", async (req, res) => {\n'
                '  const response = await axios.get("https://example.com/users");\n'
                "  res.json(_.map(response.data, (u) => u.id));\n"
                "});\n"
            ),
            "src/utils.js": (
                'import { format } from "date-fns";\n'
                'import * as eslint from "eslint";\n'
                "\n"
                "export function formatDate(date) {\n"
                '  return format(date, "yyyy-MM-dd");\n'
                "}\n"
            ),
        },
    )


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo any logging configuration a test (or the CLI) installed."""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)

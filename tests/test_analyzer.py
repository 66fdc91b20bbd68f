"""Tests for the usage analyzer."""

from __future__ import annotations

from pathlib import Path

import pytest

from npm_watchdog.exceptions import (
    DirectoryNotFoundError,
    ManifestNotFoundError,
    ManifestParseError,
)
from npm_watchdog.scanner.analyzer import UsageAnalyzer, analyze, classify, collect_used
from npm_watchdog.scanner.discovery import SourceFileDiscoverer
from npm_watchdog.scanner.models import (
    AnalysisStatus,
    DeclaredDependency,
    FileReadWarning,
    FileScan,
)


def _declared(*names: str) -> list[DeclaredDependency]:
    return [DeclaredDependency(name, "^1.0.0") for name in names]


# ── classify ─────────────────────────────────────────────────────────────


class TestClassify:
    def test_buckets_follow_manifest_order(self):
        result = classify(_declared("c", "a", "b", "d"), {"a", "d"})
        assert result.used_packages == ("a", "d")
        assert result.unused_packages == ("c", "b")
        assert result.ignored_packages == ()

    def test_ignore_beats_unused(self):
        result = classify(_declared("a", "b"), {"a"}, ignore=["b"])
        assert result.unused_packages == ()
        assert result.ignored_packages == ("b",)

    def test_ignore_beats_used(self):
        result = classify(_declared("a", "b"), {"a", "b"}, ignore=["a"])
        assert result.used_packages == ("b",)
        assert result.ignored_packages == ("a",)

    def test_undeclared_ignore_entries_dropped(self):
        result = classify(_declared("a"), set(), ignore=["zzz"])
        assert result.ignored_packages == ()
        assert result.unused_packages == ("a",)

    def test_undeclared_detections_not_bucketed(self):
        result = classify(_declared("a"), {"a", "date-fns"})
        assert result.used_packages == ("a",)
        assert "date-fns" in result.detected_packages

    def test_buckets_partition_declared_names(self):
        names = ("a", "b", "c", "d", "e")
        result = classify(_declared(*names), {"a", "c", "e"}, ignore=["c", "d"])
        buckets = [
            set(result.used_packages),
            set(result.unused_packages),
            set(result.ignored_packages),
        ]
        assert set().union(*buckets) == set(names)
        assert sum(len(b) for b in buckets) == len(names)

    def test_total_count(self):
        assert classify(_declared("a", "b", "c"), set()).total_count == 3


class TestCollectUsed:
    def test_resolves_and_dedupes(self):
        scans = [
            FileScan(path="a.js", specifiers=["lodash/fp", "lodash", "@s/p/x"]),
            FileScan(path="b.js", specifiers=["@s/p", "react"]),
        ]
        used, warnings = collect_used(scans)
        assert used == {"lodash", "@s/p", "react"}
        assert warnings == []

    def test_failed_scans_become_warnings(self):
        scans = [
            FileScan(path="ok.js", specifiers=["react"]),
            FileScan(path="bad.js", error="permission denied"),
        ]
        used, warnings = collect_used(scans)
        assert used == {"react"}
        assert warnings == [FileReadWarning(path="bad.js", error="permission denied")]


# ── UsageAnalyzer ────────────────────────────────────────────────────────


class TestUsageAnalyzer:
    def test_end_to_end_scenario(self, scenario_project):
        outcome = analyze(scenario_project)
        assert outcome.status is AnalysisStatus.COMPLETED
        result = outcome.result
        assert result is not None
        assert result.total_count == 4
        assert {"express", "axios", "lodash"} <= set(result.used_packages)
        assert result.unused_packages == ("typescript",)
        assert result.ignored_packages == ()
        assert {"date-fns", "eslint"} <= result.detected_packages
        for bucket in (result.used_packages, result.unused_packages, result.ignored_packages):
            assert "date-fns" not in bucket
            assert "eslint" not in bucket
        assert outcome.files_scanned == 2

    def test_ignore_round_trip(self, scenario_project):
        outcome = analyze(scenario_project, ignore=["typescript"])
        assert outcome.result.unused_packages == ()
        assert outcome.result.ignored_packages == ("typescript",)

    def test_dead_branch_require_counts_as_used(self, make_project):
        root = make_project(
            dependencies={"typescript": "^5.0.0"},
            files={"src/index.js": 'if (false) {\n  require("typescript");\n}\n'},
        )
        outcome = analyze(root)
        assert outcome.result.used_packages == ("typescript",)

    def test_relative_imports_never_used(self, make_project):
        root = make_project(
            dependencies={"x": "1.0.0"},
            files={
                "a.js": 'require("./x");\nrequire("../x");\nrequire("/abs/x");\n',
                "b.ts": 'import x from "./x";\nimport "../x";\n',
            },
        )
        outcome = analyze(root)
        assert outcome.result.unused_packages == ("x",)
        assert outcome.result.detected_packages == frozenset()

    def test_scoped_subpath_import_marks_package_used(self, make_project):
        root = make_project(
            dependencies={"@mui/material": "^5.0.0"},
            files={"App.tsx": 'import Button from "@mui/material/Button";\n'},
        )
        assert analyze(root).result.used_packages == ("@mui/material",)

    def test_node_modules_not_scanned(self, make_project):
        root = make_project(
            dependencies={"left-pad": "1.0.0"},
            files={
                "src/index.js": "console.log(1);\n",
                "node_modules/other/index.js": 'require("left-pad");\n',
            },
        )
        assert analyze(root).result.unused_packages == ("left-pad",)

    def test_unreadable_file_is_skipped_with_warning(self, make_project):
        root = make_project(
            dependencies={"express": "^4.0.0", "axios": "^1.0.0"},
            files={
                "good.js": 'require("express");\n',
                "bad.js": b'\xff\xfe require("axios");\n',
            },
        )
        outcome = analyze(root)
        assert outcome.status is AnalysisStatus.COMPLETED
        assert outcome.result.used_packages == ("express",)
        assert outcome.result.unused_packages == ("axios",)
        assert [Path(w.path).name for w in outcome.warnings] == ["bad.js"]

    def test_no_dependencies_short_circuits_before_discovery(self, make_project):
        class ExplodingDiscoverer(SourceFileDiscoverer):
            def discover(self, root):
                raise AssertionError("discovery must not run")

        root = make_project(dependencies={}, dev_dependencies={}, files={"a.js": ""})
        outcome = UsageAnalyzer(discoverer=ExplodingDiscoverer()).analyze(root)
        assert outcome.status is AnalysisStatus.NO_DEPENDENCIES
        assert outcome.result is None

    def test_no_source_files_short_circuits_before_extraction(self, make_project):
        def exploding_extract(path):
            raise AssertionError("extraction must not run")

        root = make_project(dependencies={"a": "1"}, files={"notes.md": "require('a')"})
        outcome = UsageAnalyzer(extractor=exploding_extract).analyze(root)
        assert outcome.status is AnalysisStatus.NO_SOURCE_FILES
        assert outcome.result is None

    def test_custom_extractor_is_used(self, make_project):
        root = make_project(dependencies={"a": "1", "b": "1"}, files={"x.js": ""})
        analyzer = UsageAnalyzer(extractor=lambda p: FileScan(path=str(p), specifiers=["b/sub"]))
        result = analyzer.analyze(root).result
        assert result.used_packages == ("b",)
        assert result.unused_packages == ("a",)

    def test_accepts_string_root(self, scenario_project):
        assert analyze(str(scenario_project)).status is AnalysisStatus.COMPLETED

    def test_missing_root(self, tmp_path):
        with pytest.raises(DirectoryNotFoundError):
            analyze(tmp_path / "missing")

    def test_missing_manifest(self, tmp_path):
        with pytest.raises(ManifestNotFoundError):
            analyze(tmp_path)

    def test_broken_manifest(self, make_project):
        root = make_project(manifest="{")
        with pytest.raises(ManifestParseError):
            analyze(root)


class TestNonUtf8Sources:
    def test_latin1_byte_in_comment_hides_the_file(self, make_project):
        root = make_project(
            dependencies={"axios": "^1.0.0"},
            files={"legacy.js": b'// se\xf1or\nconst axios = require("axios");\n'},
        )
        outcome = analyze(root)
        assert outcome.result.unused_packages == ("axios",)
        assert [Path(w.path).name for w in outcome.warnings] == ["legacy.js"]
        assert "utf-8" in outcome.warnings[0].error

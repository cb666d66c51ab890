"""Packaging correctness verification for json-pattern-match.

Covers:
- Base install imports without the optional PyHamcrest extra
- py.typed marker and every source module are present in the wheel
- Pytest plugin entry point is registered
- Package metadata is correct

These tests inspect the built wheel and current installation rather than
creating temporary virtualenvs.
"""

from __future__ import annotations

import subprocess
import sys
import zipfile
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent


class TestBaseInstallNoImportError:
    """Verify base install does not depend on optional extras."""

    def test_import_json_pattern_match(self):  # type: ignore[no-untyped-def]
        """Top-level import succeeds."""
        import json_pattern_match

        assert hasattr(json_pattern_match, "find_divergences")
        assert hasattr(json_pattern_match, "match_json")
        assert hasattr(json_pattern_match, "is_match")
        assert hasattr(json_pattern_match, "assert_json_matches")

    def test_is_match_basic(self):  # type: ignore[no-untyped-def]
        """is_match() works with the default configuration."""
        from json_pattern_match import is_match

        assert is_match({"a": 1, "...": "..."}, {"a": 1, "b": 2})

    def test_match_json_basic(self):  # type: ignore[no-untyped-def]
        """match_json() accepts JSON text on both sides."""
        from json_pattern_match import match_json

        result = match_json('{"a": [1, "..."]}', '{"a": [1, 2, 3]}')
        assert result.matched

    def test_integrations_import(self):  # type: ignore[no-untyped-def]
        """integrations package imports whether or not PyHamcrest is installed."""
        import json_pattern_match.integrations as integrations

        assert set(integrations.__all__) <= {"IsMatchingJson", "matches_json"}

    def test_templates_import(self):  # type: ignore[no-untyped-def]
        """templates package exposes the default mustache engine."""
        from json_pattern_match.templates import MustacheEngine, TemplateEngine

        assert isinstance(MustacheEngine(), TemplateEngine)


class TestWheelContents:
    """Verify the built wheel contains required files."""

    @pytest.fixture(scope="class")
    def wheel_path(self, tmp_path_factory: pytest.TempPathFactory) -> Path:
        """Build a fresh wheel and return its path."""
        dist_dir = tmp_path_factory.mktemp("dist")
        result = subprocess.run(
            [
                sys.executable,
                "-m",
                "pip",
                "wheel",
                "--no-deps",
                "--no-build-isolation",
                "-w",
                str(dist_dir),
                str(PROJECT_ROOT),
            ],
            capture_output=True,
            text=True,
        )
        if result.returncode != 0:
            pytest.skip(f"wheel build failed: {result.stderr}")

        wheels = sorted(dist_dir.glob("*.whl"))
        if not wheels:
            pytest.skip(f"No wheel found in {dist_dir}")
        return wheels[-1]

    def test_py_typed_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """py.typed marker must be included in the wheel."""
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            py_typed_files = [n for n in names if n.endswith("py.typed")]
            assert py_typed_files, f"py.typed not found in wheel. Contents: {names}"

    def test_no_pycache_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """__pycache__ directories must not be in the wheel."""
        with zipfile.ZipFile(wheel_path) as zf:
            pycache_files = [n for n in zf.namelist() if "__pycache__" in n]
            assert not pycache_files, f"__pycache__ found in wheel: {pycache_files}"

    def test_all_source_modules_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """All source modules must be present in the wheel."""
        expected_modules = [
            "json_pattern_match/__init__.py",
            "json_pattern_match/api.py",
            "json_pattern_match/codec.py",
            "json_pattern_match/errors.py",
            "json_pattern_match/matcher.py",
            "json_pattern_match/report.py",
            "json_pattern_match/result.py",
            "json_pattern_match/matching/__init__.py",
            "json_pattern_match/matching/assignment.py",
            "json_pattern_match/matching/config.py",
            "json_pattern_match/matching/kinds.py",
            "json_pattern_match/matching/structural.py",
            "json_pattern_match/templates/__init__.py",
            "json_pattern_match/templates/evaluator.py",
            "json_pattern_match/templates/mustache.py",
            "json_pattern_match/templates/protocols.py",
            "json_pattern_match/integrations/__init__.py",
            "json_pattern_match/integrations/_pytest_plugin.py",
            "json_pattern_match/integrations/_hamcrest.py",
        ]
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            for module in expected_modules:
                assert any(module in n for n in names), (
                    f"Module {module} not found in wheel"
                )

    def test_metadata_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """Wheel metadata must include correct package info."""
        with zipfile.ZipFile(wheel_path) as zf:
            metadata_files = [n for n in zf.namelist() if n.endswith("METADATA")]
            assert metadata_files, "No METADATA found in wheel"
            metadata = zf.read(metadata_files[0]).decode()
            assert "json-pattern-match" in metadata.lower()
            assert "0.1.0" in metadata


class TestPytestPluginDiscovery:
    """Verify the pytest plugin is discoverable."""

    def test_entry_point_registered(self):  # type: ignore[no-untyped-def]
        """pytest11 entry point must be registered for json-pattern-match."""
        from importlib.metadata import entry_points

        pytest11_eps = entry_points(group="pytest11")

        jpm_eps = [ep for ep in pytest11_eps if "json_pattern_match" in ep.value]
        assert jpm_eps, (
            f"No pytest11 entry point found for json-pattern-match. "
            f"Available: {[ep.name for ep in pytest11_eps]}"
        )

    def test_fixture_available(self):  # type: ignore[no-untyped-def]
        """assert_json_matches fixture must be importable from plugin."""
        import importlib

        mod = importlib.import_module("json_pattern_match.integrations._pytest_plugin")
        assert hasattr(mod, "assert_json_matches")
        assert callable(mod.assert_json_matches)

    def test_plugin_discovery_via_pytest(self):  # type: ignore[no-untyped-def]
        """pytest --fixtures should list assert_json_matches."""
        result = subprocess.run(
            [sys.executable, "-m", "pytest", "--fixtures", "-q"],
            capture_output=True,
            text=True,
            cwd=str(PROJECT_ROOT),
        )
        assert "assert_json_matches" in result.stdout, (
            f"Fixture not found in pytest fixtures list. stdout: {result.stdout[:500]}"
        )


class TestPackageMetadata:
    """Verify pyproject.toml metadata completeness."""

    def test_version(self):  # type: ignore[no-untyped-def]
        """Package version must be 0.1.0."""
        import json_pattern_match

        assert json_pattern_match.__version__ == "0.1.0"

    def test_all_exports(self):  # type: ignore[no-untyped-def]
        """__all__ must include the documented public API."""
        import json_pattern_match

        expected = {
            "WILDCARD",
            "ArrayOrder",
            "Divergence",
            "DivergenceKind",
            "InvalidJsonError",
            "JsonCodec",
            "JsonCodecConfig",
            "JsonMatcher",
            "JsonPatternMatchError",
            "MatchConfig",
            "MatchResult",
            "MaxDepthExceededError",
            "TemplateExpansionError",
            "UnsupportedValueError",
            "WildcardUsageError",
            "assert_json_matches",
            "find_divergences",
            "is_match",
            "match_json",
        }
        actual = set(json_pattern_match.__all__)
        assert expected == actual, (
            f"Missing: {expected - actual}, Extra: {actual - expected}"
        )

"""Tests for settings loading."""

import json

import pytest

from docguard.domain.exceptions import ConfigurationError
from docguard.infrastructure.config import (
    DEFAULT_CONFIG_FILE,
    DocGuardSettings,
    load_settings,
    resolve_settings,
)
from docguard.schemas import get_config_schema


def _write_json(path, data) -> None:
    path.write_text(json.dumps(data))


class TestLoadSettings:
    """Tests for loading docguard.json."""

    def test_full_settings(self, tmp_path):
        path = tmp_path / "docguard.json"
        _write_json(
            path,
            {
                "docs_dir": "website/docs",
                "extensions": [".md"],
                "section_prefix": "part",
                "intro_file": "index.md",
                "min_sections": 2,
                "min_section_entries": 3,
                "diagram_tags": ["mermaid", "plantuml"],
                "principles": ["structure"],
            },
        )
        settings = load_settings(path)
        assert settings == DocGuardSettings(
            docs_dir="website/docs",
            extensions=(".md",),
            section_prefix="part",
            intro_file="index.md",
            min_sections=2,
            min_section_entries=3,
            diagram_tags=("mermaid", "plantuml"),
            principles=("structure",),
        )

    def test_partial_settings_keep_defaults(self, tmp_path):
        path = tmp_path / "docguard.json"
        _write_json(path, {"docs_dir": "content"})
        settings = load_settings(path)
        assert settings.docs_dir == "content"
        assert settings.extensions == (".md", ".mdx")
        assert settings.min_sections == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Settings file not found"):
            load_settings(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "docguard.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            load_settings(path)

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "docguard.json"
        path.write_bytes(b'{"docs_dir": "caf\xe9"}')
        with pytest.raises(ConfigurationError, match="not UTF-8") as exc_info:
            load_settings(path)
        assert str(path) in str(exc_info.value)

    def test_unreadable_file(self, tmp_path):
        path = tmp_path / "docguard.json"
        path.mkdir()
        with pytest.raises(ConfigurationError, match="Could not read settings file"):
            load_settings(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "docguard.json"
        _write_json(path, ["docs"])
        with pytest.raises(ConfigurationError, match="Expected object"):
            load_settings(path)

    def test_unknown_field(self, tmp_path):
        path = tmp_path / "docguard.json"
        _write_json(path, {"docs": "docs"})
        with pytest.raises(ConfigurationError, match="Invalid settings"):
            load_settings(path)

    def test_wrong_type_reports_location(self, tmp_path):
        path = tmp_path / "docguard.json"
        _write_json(path, {"min_sections": "three"})
        with pytest.raises(ConfigurationError, match="at min_sections"):
            load_settings(path)

    def test_extension_must_start_with_dot(self, tmp_path):
        path = tmp_path / "docguard.json"
        _write_json(path, {"extensions": ["md"]})
        with pytest.raises(ConfigurationError, match="at extensions/0"):
            load_settings(path)


class TestResolveSettings:
    """Tests for settings discovery."""

    def test_defaults_without_file(self, tmp_path):
        assert resolve_settings(None, cwd=tmp_path) == DocGuardSettings()

    def test_discovers_file_in_cwd(self, tmp_path):
        _write_json(tmp_path / DEFAULT_CONFIG_FILE, {"docs_dir": "site/docs"})
        assert resolve_settings(None, cwd=tmp_path).docs_dir == "site/docs"

    def test_explicit_path_must_exist(self, tmp_path):
        with pytest.raises(ConfigurationError):
            resolve_settings(tmp_path / "custom.json", cwd=tmp_path)


class TestOverrides:
    """Tests for command line overrides."""

    def test_overrides_applied(self):
        settings = DocGuardSettings().with_overrides(
            docs_dir="other", principles=("format",)
        )
        assert settings.docs_dir == "other"
        assert settings.principles == ("format",)

    def test_none_and_empty_ignored(self):
        base = DocGuardSettings(docs_dir="content", principles=("format",))
        assert base.with_overrides(docs_dir=None, principles=()) == base


def test_schema_covers_every_setting():
    properties = set(get_config_schema()["properties"])
    assert properties == set(DocGuardSettings.__dataclass_fields__)

"""
Tests for token sets.

Tests cover:
- TokenSet model defaults and validation
- TokenLoader discovery, project overrides and copying
"""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from chuk_mcp_css.constants import TokenTable
from chuk_mcp_css.models.tokens import (
    DEFAULT_DURATIONS,
    DEFAULT_EASINGS,
    DEFAULT_TOKENS,
    TokenSet,
    TokenSetMetadata,
    parse_cubic_bezier,
)
from chuk_mcp_css.tokens import TokenLoader


class TestDefaultTables:
    """Tests for the built-in tables."""

    def test_table_sizes(self):
        """The default set ships 20 durations, 10 easings and 2 widths."""
        assert len(DEFAULT_TOKENS.durations) == 20
        assert len(DEFAULT_TOKENS.easings) == 10
        assert len(DEFAULT_TOKENS.easing_aliases) == 4
        assert len(DEFAULT_TOKENS.widths) == 2

    def test_durations_increase_within_tier(self):
        """short1 < short2 < ... within every tier."""
        for tier in ("short", "medium", "long", "extra-long"):
            values = [DEFAULT_DURATIONS[f"{tier}{step}"] for step in range(1, 6)]
            assert values == sorted(values)
            assert len(set(values)) == len(values)

    def test_easings_are_cubic_beziers(self):
        """Every easing parses to four control points."""
        for curve in DEFAULT_EASINGS.values():
            assert len(parse_cubic_bezier(curve)) == 4

    def test_aliases_point_at_easings(self):
        """Aliases resolve by indirection into the easing table."""
        for target in DEFAULT_TOKENS.easing_aliases.values():
            assert target in DEFAULT_TOKENS.easings
        assert DEFAULT_TOKENS.easing_aliases["ease"] == "standard"

    def test_reference_widths(self):
        assert DEFAULT_TOKENS.widths == {"pc": 1920, "mp": 768}


class TestParseCubicBezier:
    """Tests for parse_cubic_bezier."""

    def test_parse(self):
        assert parse_cubic_bezier("cubic-bezier(0.05, 0.7, 0.1, 1)") == (0.05, 0.7, 0.1, 1.0)

    @pytest.mark.parametrize(
        "curve",
        ["ease", "cubic-bezier(0, 0, 1)", "cubic-bezier(a, b, c, d)", "cubic-bezier(0, 0, 1, 1"],
    )
    def test_invalid(self, curve):
        with pytest.raises(ValueError):
            parse_cubic_bezier(curve)


class TestTokenSet:
    """Tests for TokenSet validation."""

    def test_override_one_table(self):
        """Overriding a table replaces it and keeps the others."""
        tokens = TokenSet(widths={"pad": 1024})
        assert tokens.widths == {"pad": 1024}
        assert tokens.durations == DEFAULT_TOKENS.durations

    def test_override_does_not_touch_defaults(self):
        tokens = TokenSet(**{**DEFAULT_TOKENS.to_yaml_dict(), "widths": {"mp": 750}})
        assert tokens.widths == {"mp": 750}
        assert DEFAULT_TOKENS.widths["mp"] == 768

    def test_tables_copied_from_input(self):
        """Changing the dict a set was built from leaves the set alone."""
        widths = {"mp": 750}
        tokens = TokenSet(widths=widths)
        widths["mp"] = 1
        assert tokens.widths["mp"] == 750

    def test_unknown_schema_rejected(self):
        with pytest.raises(ValidationError):
            TokenSet(schema="tokens/v2")

    def test_negative_duration_rejected(self):
        with pytest.raises(ValidationError):
            TokenSet(durations={"short1": -1}, duration_aliases={})

    def test_malformed_easing_rejected(self):
        with pytest.raises(ValidationError):
            TokenSet(easings={"standard": "ease"}, easing_aliases={})

    def test_non_positive_width_rejected(self):
        with pytest.raises(ValidationError):
            TokenSet(widths={"mp": 0})

    def test_dangling_easing_alias_rejected(self):
        with pytest.raises(ValidationError):
            TokenSet(easing_aliases={"ease": "missing"})

    def test_dangling_duration_alias_rejected(self):
        with pytest.raises(ValidationError):
            TokenSet(duration_aliases={"normal": "missing"})

    def test_frozen(self):
        """Token sets are immutable."""
        with pytest.raises(ValidationError):
            DEFAULT_TOKENS.name = "changed"

    @pytest.mark.parametrize("table", list(TokenTable))
    def test_tables_read_only(self, table: TokenTable):
        """Items cannot be assigned, added or removed on a shared table."""
        values = DEFAULT_TOKENS.get_table(table)
        key = next(iter(values))
        with pytest.raises(TypeError):
            values[key] = values[key]
        with pytest.raises(TypeError):
            values["added"] = values[key]
        with pytest.raises(TypeError):
            del values[key]

    def test_default_tables_read_only(self):
        """Tables taken from the built-in defaults are read-only too."""
        with pytest.raises(TypeError):
            TokenSet().durations["medium4"] = 1
        assert DEFAULT_TOKENS.durations["medium4"] == 360

    def test_get_table(self):
        assert DEFAULT_TOKENS.get_table(TokenTable.WIDTHS) is DEFAULT_TOKENS.widths

    def test_to_yaml_dict(self):
        data = DEFAULT_TOKENS.to_yaml_dict()
        assert data["schema"] == "tokens/v1"
        assert data["durations"]["medium4"] == 360
        assert data["easing_aliases"]["ease-out"] == "standard-decelerate"

    def test_metadata(self):
        meta = TokenSetMetadata.from_token_set(DEFAULT_TOKENS)
        assert meta.name == "default"
        assert meta.table_sizes == {
            "durations": 20,
            "duration_aliases": 3,
            "easings": 10,
            "easing_aliases": 4,
            "widths": 2,
        }


class TestTokenLoader:
    """Tests for TokenLoader."""

    def test_list_library(self, library_path: Path, temp_dir: Path):
        """Lists the packaged token sets."""
        loader = TokenLoader(library_path=library_path, project_path=temp_dir)
        names = [m.name for m in loader.list_token_sets()]
        assert names == ["compact", "default"]

    def test_default_library_path(self):
        """Without arguments the packaged library is used."""
        loader = TokenLoader()
        assert loader.get_token_set("default") is not None

    def test_library_default_matches_constant(self, library_path: Path):
        """The shipped default.yaml takes every table from DEFAULT_TOKENS."""
        loader = TokenLoader(library_path=library_path)
        tokens = loader.get_token_set("default")
        assert tokens is not None
        for table in TokenTable:
            assert tokens.get_table(table) == DEFAULT_TOKENS.get_table(table)

    def test_partial_file_keeps_default_tables(self, library_path: Path):
        """compact.yaml only defines durations and widths."""
        loader = TokenLoader(library_path=library_path)
        tokens = loader.get_token_set("compact")
        assert tokens is not None
        assert tokens.durations["medium4"] == 270
        assert tokens.widths["pad"] == 1024
        assert tokens.easings == DEFAULT_TOKENS.easings

    def test_project_overrides_library(self, library_path: Path, temp_dir: Path):
        """A project file with the same name shadows the library set."""
        (temp_dir / "default.yaml").write_text(
            "name: default\ndescription: Project tokens\nwidths:\n  mp: 750\n"
        )
        loader = TokenLoader(library_path=library_path, project_path=temp_dir)
        tokens = loader.get_token_set("default")
        assert tokens is not None
        assert tokens.description == "Project tokens"
        assert tokens.widths == {"mp": 750}
        assert tokens.durations == DEFAULT_TOKENS.durations

        listed = {m.name: m for m in loader.list_token_sets()}
        assert listed["default"].description == "Project tokens"

    def test_name_defaults_to_file_stem(self, library_path: Path, temp_dir: Path):
        (temp_dir / "brand.yaml").write_text("widths:\n  pc: 1440\n")
        loader = TokenLoader(library_path=library_path, project_path=temp_dir)
        tokens = loader.get_token_set("brand")
        assert tokens is not None
        assert tokens.name == "brand"

    def test_invalid_files_skipped(self, library_path: Path, temp_dir: Path):
        """Malformed YAML and invalid tables are skipped."""
        (temp_dir / "broken.yaml").write_text("durations: [1, 2\n")
        (temp_dir / "bad-width.yaml").write_text("widths:\n  mp: -1\n")
        (temp_dir / "empty.yaml").write_text("")
        (temp_dir / "future.yaml").write_text("schema: tokens/v2\n")
        loader = TokenLoader(library_path=library_path, project_path=temp_dir)

        assert loader.get_token_set("broken") is None
        assert loader.get_token_set("bad-width") is None
        assert loader.get_token_set("empty") is None
        assert loader.get_token_set("future") is None
        assert [m.name for m in loader.list_token_sets()] == ["compact", "default"]

    def test_missing(self, library_path: Path):
        loader = TokenLoader(library_path=library_path)
        assert loader.get_token_set("nonexistent") is None

    def test_cache(self, library_path: Path):
        loader = TokenLoader(library_path=library_path)
        first = loader.get_token_set("default")
        assert loader.get_token_set("default") is first
        loader.clear_cache()
        assert loader.get_token_set("default") is not first

    def test_copy_to_project(self, library_path: Path, temp_dir: Path):
        project = temp_dir / "tokens"
        loader = TokenLoader(library_path=library_path, project_path=project)

        path = loader.copy_to_project("default")
        assert path == project / "default.yaml"
        assert path.exists()

        # The copy lists every table, not just the ones the library file sets
        data = yaml.safe_load(path.read_text())
        assert data["durations"]["medium4"] == 360
        assert data["easing_aliases"]["ease-out"] == "standard-decelerate"
        assert data["widths"] == {"pc": 1920, "mp": 768}
        copied = loader.get_token_set("default")
        assert copied is not None
        assert copied.to_yaml_dict() == DEFAULT_TOKENS.to_yaml_dict()

        with pytest.raises(ValueError, match="already exists"):
            loader.copy_to_project("default")

    def test_copy_missing(self, library_path: Path, temp_dir: Path):
        loader = TokenLoader(library_path=library_path, project_path=temp_dir)
        assert loader.copy_to_project("nonexistent") is None

    def test_copy_without_project(self, library_path: Path):
        loader = TokenLoader(library_path=library_path)
        with pytest.raises(ValueError, match="No project path"):
            loader.copy_to_project("default")

"""
Token set loader - discovers and loads token tables.

Token sets can come from:
1. Built-in library (shipped with package)
2. Project token sets (user's project/tokens directory)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_css.constants import TokenTable
from chuk_mcp_css.models.tokens import DEFAULT_TOKENS, TokenSet, TokenSetMetadata

logger = logging.getLogger(__name__)


class TokenLoader:
    """
    Discovers and loads token set definitions.

    Token sets are loaded from YAML files in the library and project
    directories. Project token sets override library token sets with
    the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the token loader.

        Args:
            library_path: Path to built-in token set library
            project_path: Path to project token sets directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, TokenSet] = {}

    def list_token_sets(self) -> list[TokenSetMetadata]:
        """
        List all available token sets.

        Returns token sets from both library and project, with project
        token sets taking precedence.
        """
        token_sets: dict[str, TokenSetMetadata] = {}

        # Load library token sets
        if self.library_path.exists():
            for path in sorted(self.library_path.glob("*.yaml")):
                tokens = self._load_token_file(path)
                if tokens:
                    token_sets[tokens.name] = TokenSetMetadata.from_token_set(tokens)

        # Load project token sets (override library)
        if self.project_path and self.project_path.exists():
            for path in sorted(self.project_path.glob("*.yaml")):
                tokens = self._load_token_file(path)
                if tokens:
                    token_sets[tokens.name] = TokenSetMetadata.from_token_set(tokens)

        return sorted(token_sets.values(), key=lambda m: m.name)

    def get_token_set(self, name: str) -> TokenSet | None:
        """
        Get a token set by name.

        Project token sets take precedence over library token sets.

        Args:
            name: Token set name

        Returns:
            TokenSet if found, None otherwise
        """
        # Check cache
        if name in self._cache:
            return self._cache[name]

        # Try project first, then fall back to library
        candidates = []
        if self.project_path:
            candidates.append(self.project_path / f"{name}.yaml")
        candidates.append(self.library_path / f"{name}.yaml")

        for path in candidates:
            if path.exists():
                tokens = self._load_token_file(path)
                if tokens:
                    self._cache[name] = tokens
                    return tokens

        return None

    def copy_to_project(self, name: str) -> Path | None:
        """
        Write a library token set into the project for customization.

        The copy spells out every table, including the ones the library
        file leaves to the built-in defaults, so each can be edited.

        Args:
            name: Token set name

        Returns:
            Path to the written file, or None if the library has no
            valid token set of that name

        Raises:
            ValueError: If no project path is configured or the project
                already holds the token set
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        library_file = self.library_path / f"{name}.yaml"
        tokens = self._load_token_file(library_file) if library_file.exists() else None
        if tokens is None:
            return None

        self.project_path.mkdir(parents=True, exist_ok=True)
        dest_file = self.project_path / f"{name}.yaml"
        try:
            with open(dest_file, "x") as f:
                yaml.safe_dump(tokens.to_yaml_dict(), f, default_flow_style=False, sort_keys=False)
        except FileExistsError as e:
            raise ValueError(f"Token set already exists in project: {name}") from e

        self._cache.pop(name, None)
        logger.info(f"Copied token set '{name}' to {dest_file}")
        return dest_file

    def _load_token_file(self, path: Path) -> TokenSet | None:
        """Load a token set from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return self.parse_token_set(data, default_name=path.stem)
        except (OSError, yaml.YAMLError, ValidationError, TypeError, ValueError) as e:
            logger.warning(f"Skipping token set {path}: {e}")
            return None

    def parse_token_set(self, data: dict[str, Any], default_name: str = "unknown") -> TokenSet:
        """
        Parse a token set from YAML data.

        A table present in the data replaces the default table wholesale;
        absent tables keep the defaults.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Token set must be a mapping, got {type(data).__name__}")

        tables = {
            table.value: data[table.value]
            for table in TokenTable
            if data.get(table.value) is not None
        }
        return TokenSet.model_validate(
            {
                **DEFAULT_TOKENS.to_yaml_dict(),
                "schema": data.get("schema", "tokens/v1"),
                "name": data.get("name", default_name),
                "description": data.get("description", ""),
                **tables,
            }
        )

    def clear_cache(self) -> None:
        """Clear the token set cache."""
        self._cache.clear()

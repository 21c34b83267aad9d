"""Load build assistant prompts from TOML files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import tomli as toml


class PromptLoader:
    """Helper to resolve and load a named prompt template."""

    def __init__(self, base_dir: str | Path | None = None) -> None:
        """Initialize loader using the bundled ``prompts`` directory by default."""
        default = Path(__file__).resolve().parent / "prompts"
        self.base: Path = Path(base_dir).resolve() if base_dir else default
        self._cache: Dict[str, Dict[str, Any]] = {}

    def _path_for(self, name: str) -> Path:
        return self.base / f"{name}_prompt.toml"

    def _load(self, name: str) -> Dict[str, Any]:
        if name in self._cache:
            return self._cache[name]
        path = self._path_for(name)
        if not path.exists():
            raise FileNotFoundError(f"Prompt file not found: {path} (cwd={Path.cwd()})")
        with path.open("rb") as f:
            data = toml.load(f)
        self._cache[name] = data
        return data

    def get_template(self, name: str) -> str:
        """Return the ``template`` string of a prompt file."""
        data = self._load(name)
        return data.get("template") or ""

    def get_system_prompt(self, name: str) -> str:
        data = self._load(name)
        return data.get("system") or ""

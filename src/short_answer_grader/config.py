from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml

DEFAULT_SYSTEM_WORD_LIST = "/usr/share/dict/words"


@dataclass(slots=True)
class GraderConfig:
    """Configuration options for the grader and its dictionary loader."""

    dictionary_path: str | None = None
    dictionary_filename: str = "dictionary.txt"
    dictionary_search_dirs: List[str] = field(default_factory=lambda: [".", "src"])
    system_word_list: str | None = DEFAULT_SYSTEM_WORD_LIST
    typo_max_distance: int = 1

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(GraderConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "dictionary_search_dirs" in kwargs:
        search_dirs = kwargs["dictionary_search_dirs"]
        if isinstance(search_dirs, str):
            kwargs["dictionary_search_dirs"] = [search_dirs]
        elif search_dirs is None:
            kwargs["dictionary_search_dirs"] = []
        else:
            kwargs["dictionary_search_dirs"] = [str(item) for item in search_dirs]
    return kwargs


def config_from_dict(data: Mapping[str, Any] | None) -> GraderConfig:
    """Build a GraderConfig from a dictionary-like input."""
    if data is None:
        return GraderConfig()
    return GraderConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> GraderConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> GraderConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return GraderConfig()
    return config_from_yaml(path)

"""``denji.json`` configuration.

Example::

    {
      "$schema": "https://denji-docs.vercel.app/configuration_schema.json",
      "framework": "react",
      "output": "./src/icons.tsx",
      "typescript": true,
      "a11y": "hidden",
      "trackSource": true,
      "hooks": {"postAdd": ["npx biome format --write ./src/icons.tsx"]},
      "react": {"forwardRef": false}
    }

``output`` is either a path (a single registry file) or an object
``{"type": "file" | "folder", "path": ...}``.  Framework specific
options live under a key named after the framework.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError
from .frameworks import framework_registry
from .model import A11Y_NONE

logger = logging.getLogger(__name__)

CONFIG_FILE = "denji.json"
SCHEMA_URL = "https://denji-docs.vercel.app/configuration_schema.json"

HOOK_NAMES = (
    "preAdd", "postAdd", "preRemove", "postRemove",
    "preClear", "postClear", "preList", "postList",
)


class OutputConfig(BaseModel):
    type: Literal["file", "folder"] = "file"
    path: str


class HooksConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    pre_add: List[str] = Field(default_factory=list, alias="preAdd")
    post_add: List[str] = Field(default_factory=list, alias="postAdd")
    pre_remove: List[str] = Field(default_factory=list, alias="preRemove")
    post_remove: List[str] = Field(default_factory=list, alias="postRemove")
    pre_clear: List[str] = Field(default_factory=list, alias="preClear")
    post_clear: List[str] = Field(default_factory=list, alias="postClear")
    pre_list: List[str] = Field(default_factory=list, alias="preList")
    post_list: List[str] = Field(default_factory=list, alias="postList")

    def get(self, name: str) -> List[str]:
        """Commands for hook ``name`` given in its JSON spelling (``postAdd``)."""
        for field_name, info in type(self).model_fields.items():
            if info.alias == name:
                return list(getattr(self, field_name))
        raise KeyError(f"Unknown hook '{name}'. Available: {', '.join(HOOK_NAMES)}")


class Config(BaseModel):
    """Validated contents of ``denji.json``."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    schema_url: str = Field(default=SCHEMA_URL, alias="$schema")
    framework: str
    output: OutputConfig
    typescript: bool = True
    a11y: Optional[Union[Literal["hidden", "img", "title", "presentation"], Literal[False]]] = None
    track_source: bool = Field(default=True, alias="trackSource")
    hooks: HooksConfig = Field(default_factory=HooksConfig)

    @field_validator("framework")
    @classmethod
    def _known_framework(cls, value: str) -> str:
        if value not in framework_registry:
            raise ValueError(
                f"unknown framework '{value}', expected one of: "
                f"{', '.join(framework_registry.keys())}"
            )
        return value

    @field_validator("output", mode="before")
    @classmethod
    def _output_shorthand(cls, value: Any) -> Any:
        if isinstance(value, str):
            return {"type": "file", "path": value}
        return value

    @property
    def a11y_strategy(self) -> str:
        """``a11y`` as a normalizer strategy; ``false`` and unset become ``none``."""
        return self.a11y or A11Y_NONE

    @property
    def is_folder(self) -> bool:
        return self.output.type == "folder"

    def framework_options(self) -> Dict[str, Any]:
        """Options for the configured framework, over the framework defaults."""
        options = framework_registry.get(self.framework).default_options()
        extra = self.model_extra or {}
        options.update(extra.get(self.framework) or {})
        return options


def config_path(cwd: Union[str, Path]) -> Path:
    return Path(cwd) / CONFIG_FILE


def load_config(cwd: Union[str, Path]) -> Config:
    """Read and validate ``denji.json`` in ``cwd``.

    Raises:
        ConfigError: If the file is missing, not JSON, or invalid.
    """
    path = config_path(cwd)
    if not path.exists():
        raise ConfigError(f'{CONFIG_FILE} not found in {cwd}. Run "denji init" first.')
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Failed to parse {CONFIG_FILE}: {exc}") from exc
    try:
        config = Config.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid {CONFIG_FILE}: {exc}") from exc
    logger.debug("Loaded %s (framework=%s, output=%s)", path, config.framework, config.output.path)
    return config


def write_config(cwd: Union[str, Path], config: Config) -> Path:
    """Serialize ``config`` to ``denji.json`` in ``cwd``."""
    path = config_path(cwd)
    data = config.model_dump(by_alias=True, exclude_none=True)
    if config.output.type == "file":
        data["output"] = config.output.path
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    return path

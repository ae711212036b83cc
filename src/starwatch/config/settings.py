import os
import re
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from starwatch.core.constants import DEFAULT_HTTP_TIMEOUT
from starwatch.core.exceptions import ConfigurationError

_UNRESOLVED_VAR = re.compile(r"\$\{[^}]*\}")


class SubjectConfig(BaseModel):
    name: str = "Satya Nadella"
    short_name: str = "Satya"
    organization: str = "Microsoft"
    role: str = "CEO"


class GitHubConfig(BaseModel):
    user: str = "saztd"
    token: str = ""
    api_base: str = "https://api.github.com"
    page_size: int = 100
    user_agent: str = "Satya-Tracker"
    timeout: int = DEFAULT_HTTP_TIMEOUT

    @field_validator("page_size")
    @classmethod
    def validate_page_size(cls, value: int) -> int:
        if not 1 <= value <= 100:
            raise ValueError(f"GitHub page_size must be between 1 and 100, got {value}")
        return value


class LLMConfig(BaseModel):
    enabled: bool = True
    provider: str = "claude"
    api_key: str = ""
    model: str = "claude-3-5-sonnet-20241022"
    timeout: float = 60.0

    @field_validator("provider")
    @classmethod
    def validate_provider(cls, value: str) -> str:
        allowed = {"claude"}
        if value not in allowed:
            raise ValueError(f"Unsupported LLM provider '{value}'. Allowed: {sorted(allowed)}")
        return value


class StarsTrackConfig(BaseModel):
    enabled: bool = True
    data_path: str = "public/data/stars-analyzed.json"
    delay_ms: int = 1000
    max_tokens: int = 200


class CuratedPost(BaseModel):
    id: str | None = None
    title: str = ""
    url: str = ""
    published_at: datetime | None = None
    content: str | None = None
    excerpt: str | None = None


class BlogTrackConfig(BaseModel):
    enabled: bool = True
    data_path: str = "public/data/blog-posts.json"
    delay_ms: int = 2000
    max_tokens: int = 500
    url: str = "https://snscratchpad.com"
    posts: List[CuratedPost] = Field(default_factory=list)


class TracksConfig(BaseModel):
    stars: StarsTrackConfig = Field(default_factory=StarsTrackConfig)
    blog: BlogTrackConfig = Field(default_factory=BlogTrackConfig)


class Settings(BaseModel):
    subject: SubjectConfig = Field(default_factory=SubjectConfig)
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    llm: LLMConfig = Field(default_factory=LLMConfig)
    tracks: TracksConfig = Field(default_factory=TracksConfig)


def _expand_env_vars(data: Any) -> Any:
    if isinstance(data, dict):
        return {k: _expand_env_vars(v) for k, v in data.items()}
    if isinstance(data, list):
        return [_expand_env_vars(item) for item in data]
    if isinstance(data, str):
        # Unset variables are left in place by expandvars; treat them as empty
        return _UNRESOLVED_VAR.sub("", os.path.expandvars(data))
    return data


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    data = _expand_env_vars(data)
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must contain a mapping at the top level.")
    return data


def load_settings(base_dir: Path | str) -> Settings:
    base = Path(base_dir)
    config_path = base / "config" / "config.yaml"
    config = _load_yaml(config_path)
    try:
        return Settings(
            subject=SubjectConfig(**config.get("subject", {})),
            github=GitHubConfig(**config.get("github", {})),
            llm=LLMConfig(**config.get("llm", {})),
            tracks=TracksConfig(**config.get("tracks", {})),
        )
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration in {config_path}: {exc}") from exc


__all__ = [
    "Settings",
    "load_settings",
    "SubjectConfig",
    "GitHubConfig",
    "LLMConfig",
    "StarsTrackConfig",
    "BlogTrackConfig",
    "CuratedPost",
    "TracksConfig",
]

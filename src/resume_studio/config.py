"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

PROVIDERS = ("anthropic", "openai", "gemini")
EXPORT_STRATEGIES = ("rasterize", "print")
PAGINATION_MODES = ("tile", "fit_one_page")
PAGE_FORMATS = ("letter", "a4")
BOOTSTRAP_MODES = ("example", "blank")


@dataclass(frozen=True)
class AIConfig:
    provider: str = "anthropic"
    anthropic_model: str = "claude-sonnet-4-5-20250929"
    openai_model: str = "gpt-4o-mini"
    gemini_model: str = "gemini-2.5-flash"
    timeout: float = 90.0
    max_tokens: int = 8192
    temperature: float = 0.0

    def __post_init__(self):
        _check_choice("ai.provider", self.provider, PROVIDERS)


@dataclass(frozen=True)
class ImportConfig:
    carousel_interval: float = 2.5
    max_file_mb: int = 10


@dataclass(frozen=True)
class ExportConfig:
    strategy: str = "rasterize"
    pagination: str = "tile"
    page_format: str = "letter"
    scale: float = 3.0
    capture_delay: float = 0.1
    preview_width_px: int = 816
    print_settle_delay: float = 0.5
    print_busy_timeout: float = 5.0

    def __post_init__(self):
        _check_choice("export.strategy", self.strategy, EXPORT_STRATEGIES)
        _check_choice("export.pagination", self.pagination, PAGINATION_MODES)
        _check_choice("export.page_format", self.page_format, PAGE_FORMATS)


@dataclass(frozen=True)
class EditorConfig:
    default_template: str = "classic"
    bootstrap: str = "example"

    def __post_init__(self):
        _check_choice("editor.bootstrap", self.bootstrap, BOOTSTRAP_MODES)


@dataclass(frozen=True)
class AppConfig:
    ai: AIConfig = field(default_factory=AIConfig)
    importer: ImportConfig = field(default_factory=ImportConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    editor: EditorConfig = field(default_factory=EditorConfig)


def _check_choice(name: str, value: str, allowed: tuple[str, ...]) -> None:
    if value not in allowed:
        raise ValueError(f"{name} must be one of {', '.join(allowed)}; got {value!r}")


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        ai=AIConfig(**raw.get("ai", {})),
        importer=ImportConfig(**raw.get("importer", {})),
        export=ExportConfig(**raw.get("export", {})),
        editor=EditorConfig(**raw.get("editor", {})),
    )

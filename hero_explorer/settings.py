# settings.py
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from hero_explorer.theme import LOCALES, THEMES

# 项目根目录
BASE_DIR = Path(__file__).resolve().parent.parent

DEFAULT_CONFIG_PATH = BASE_DIR / "config.yaml"
CONFIG_ENV = "HERO_EXPLORER_CONFIG"
TOKEN_ENV = "SUPERHERO_API_TOKEN"

DEFAULT_BASE_URL = "https://www.superheroapi.com/api.php"


class SettingsError(Exception):
    pass


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    access_token: str = ""
    timeout: float = 10.0
    theme: str = "dark"
    locale: str = "en"
    card_full_stats: bool = False
    log_level: str = "INFO"
    log_dir: Path = Path("./logs")


def _read_yaml(path: Path) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise SettingsError(f"Cannot read config file {path}: {e}") from e
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise SettingsError(f"Config file {path} must contain a mapping")
    return config


def load_settings(path: Optional[Path] = None) -> Settings:
    """
    Load settings from YAML.

    Lookup order: ``path``, the ``HERO_EXPLORER_CONFIG`` env var, then
    ``config.yaml`` at the project root. A missing default file just means
    defaults; an explicitly named file must exist. ``SUPERHERO_API_TOKEN``
    always wins over the token from the file.
    """
    explicit = path or os.environ.get(CONFIG_ENV)
    config_path = Path(explicit) if explicit else DEFAULT_CONFIG_PATH

    if explicit or config_path.exists():
        config = _read_yaml(config_path)
    else:
        config = {}

    api = config.get("api") or {}
    ui = config.get("ui") or {}
    log = config.get("logging") or {}

    theme = ui.get("theme", Settings.theme)
    locale = ui.get("locale", Settings.locale)
    if theme not in THEMES:
        raise SettingsError(f"Unknown theme: {theme!r} (available: {', '.join(THEMES)})")
    if locale not in LOCALES:
        raise SettingsError(f"Unknown locale: {locale!r} (available: {', '.join(LOCALES)})")

    try:
        timeout = float(api.get("timeout", Settings.timeout))
    except (TypeError, ValueError) as e:
        raise SettingsError(f"api.timeout must be a number: {e}") from e

    return Settings(
        base_url=str(api.get("base_url", DEFAULT_BASE_URL)).rstrip("/"),
        access_token=os.environ.get(TOKEN_ENV) or str(api.get("access_token") or ""),
        timeout=timeout,
        theme=theme,
        locale=locale,
        card_full_stats=bool(ui.get("card_full_stats", False)),
        log_level=str(log.get("level", Settings.log_level)).upper(),
        log_dir=Path(log.get("dir", Settings.log_dir)),
    )

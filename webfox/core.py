"""webfox core - settings file and environment loading."""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import dotenv_values

GLOBAL_DIR = Path.home() / ".webfox"
GLOBAL_CONFIG = GLOBAL_DIR / "config.yaml"

CWD_CONFIG_CANDIDATES = [
    ".webfox.yaml",
    ".webfox.yml",
]

DEFAULT_SETTINGS: dict[str, Any] = {
    "timeout": 30,
    "verify": True,
    "strict_form": False,
    "env_file": None,
}

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


def resolve_path(candidates: list[Path]) -> Path | None:
    """Return the first existing path from candidates, else None."""
    for p in candidates:
        if p.exists():
            return p.resolve()
    return None


def resolve_config_path(env: dict[str, str] | None = None) -> Path | None:
    """Find the settings file to use.

    Resolution order:
      1. $WEBFOX_CONFIG (hard - no fallthrough if missing)
      2. .webfox.yaml / .webfox.yml in CWD
      3. ~/.webfox/config.yaml
    """
    env = os.environ if env is None else env
    explicit = env.get("WEBFOX_CONFIG")
    if explicit:
        return resolve_path([Path(explicit)])
    return resolve_path([Path(c) for c in CWD_CONFIG_CANDIDATES] + [GLOBAL_CONFIG])


def load_config(config_path: str | Path | None) -> dict:
    """Load the ``settings`` section of a YAML file over the defaults.

    Stores '_config_dir' so env_file can be resolved relative to the file.
    """
    settings = dict(DEFAULT_SETTINGS)
    settings["_config_dir"] = None
    if config_path is None:
        return settings
    path = Path(config_path)
    if not path.exists():
        return settings
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    section = data.get("settings") or {}
    for key in DEFAULT_SETTINGS:
        if key in section:
            settings[key] = section[key]
    settings["_config_dir"] = path.resolve().parent
    return settings


def load_env(env_file: str | None, base_dir: str | Path = ".") -> dict[str, str]:
    """Merge a .env file over os.environ (.env wins for the keys it sets)."""
    env = dict(os.environ)
    if env_file:
        dotenv_path = Path(base_dir) / env_file
        if dotenv_path.exists():
            dotenv_vars = dotenv_values(str(dotenv_path))
            env.update({k: v for k, v in dotenv_vars.items() if v is not None})
    return env


def _as_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"{name}: expected a boolean, got {value!r}")


def _as_timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"timeout: expected seconds, got {value!r}") from None
    if timeout <= 0:
        raise ValueError(f"timeout: must be positive, got {value!r}")
    return timeout


def resolve_settings(settings: dict, env: dict[str, str]) -> dict:
    """Apply WEBFOX_* environment overrides and coerce types."""
    resolved = dict(settings)
    overrides = {
        "timeout": env.get("WEBFOX_TIMEOUT"),
        "verify": env.get("WEBFOX_VERIFY"),
        "strict_form": env.get("WEBFOX_STRICT_FORM"),
    }
    for key, value in overrides.items():
        if value is not None and value != "":
            resolved[key] = value

    resolved["timeout"] = _as_timeout(resolved["timeout"])
    resolved["verify"] = _as_bool(resolved["verify"], "verify")
    resolved["strict_form"] = _as_bool(resolved["strict_form"], "strict_form")
    return resolved


def load_settings() -> dict:
    """Resolve the settings file, its .env file and environment overrides."""
    config_path = resolve_config_path()
    settings = load_config(config_path)
    base_dir = settings.get("_config_dir") or "."
    env = load_env(settings.get("env_file"), base_dir)
    return resolve_settings(settings, env)

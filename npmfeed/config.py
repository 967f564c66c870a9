from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .core.errors import ConfigurationError

IS_WINDOWS = sys.platform == "win32"


def native_line_ending(windows: bool = IS_WINDOWS) -> str:
    return "\r\n" if windows else "\n"


# Native text line ending for lines appended to .npmrc
LINE_ENDING = native_line_ending()

DEFAULT_NPM_CMD = "npm"
NPMRC_NAME = ".npmrc"

# Environment variable names
ENV_NPM_CMD = "NPM_CMD"
ENV_NPMRC = "NPMRC_FILE"
ENV_FEED = "NPM_PRIVATE_FEED"
ENV_REGISTRY = "NPM_PRIVATE_FEED_REGISTRY"
ENV_SCOPE = "NPM_PRIVATE_FEED_SCOPE"
ENV_TOKEN = "NPM_PRIVATE_FEED_TOKEN"
ENV_WEBSITE_SKU = "WEBSITE_SKU"


@dataclass(frozen=True, slots=True)
class Configuration:
    npm_cmd: str
    npmrc: Path
    feed: Optional[str] = None
    registry: Optional[str] = None
    scope: Optional[str] = None
    token: Optional[str] = None
    website_sku: Optional[str] = None

    @property
    def on_app_service(self) -> bool:
        return bool(self.website_sku)


def default_npmrc(environ: Mapping[str, str], windows: bool = IS_WINDOWS) -> Path:
    if windows:
        profile = environ.get("USERPROFILE")
        if not profile:
            raise ConfigurationError(
                f"USERPROFILE is not set and {ENV_NPMRC} was not provided; "
                "cannot locate the user .npmrc file."
            )
        return Path(profile) / NPMRC_NAME
    return expand_user(Path("~", NPMRC_NAME))


def expand_user(path: Path) -> Path:
    try:
        return path.expanduser()
    except RuntimeError as e:
        raise ConfigurationError(f"Cannot expand {path}: {e}") from e


def resolve_config(
    environ: Optional[Mapping[str, str]] = None, windows: bool = IS_WINDOWS
) -> Configuration:
    """
    Build a Configuration from environment variables.

    Empty values count as unset. Raises ConfigurationError when the
    environment cannot be read or no .npmrc location can be determined.
    """
    env = os.environ if environ is None else environ

    def get(name: str) -> Optional[str]:
        try:
            value = env.get(name)
        except Exception as e:
            raise ConfigurationError(f"Unable to read {name}: {e}") from e
        return value or None

    npmrc = get(ENV_NPMRC)
    return Configuration(
        npm_cmd=get(ENV_NPM_CMD) or DEFAULT_NPM_CMD,
        npmrc=expand_user(Path(npmrc)) if npmrc else default_npmrc(env, windows),
        feed=get(ENV_FEED),
        registry=get(ENV_REGISTRY),
        scope=get(ENV_SCOPE),
        token=get(ENV_TOKEN),
        website_sku=get(ENV_WEBSITE_SKU),
    )

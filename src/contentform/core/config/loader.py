"""Config and declared-resource loading."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from contentform.core.contracts.config import ContentformConfig
from contentform.core.contracts.desired import DesiredResource
from contentform.core.contracts.exceptions import ConfigError, ResourceLoadError

_RESOURCES_ADAPTER: TypeAdapter[list[DesiredResource]] = TypeAdapter(list[DesiredResource])


def _resolve_path(value: Path | None, *, base_dir: Path) -> Path | None:
    if value is None:
        return None
    if value.is_absolute():
        return value
    return (base_dir / value).resolve()


def load_config(path: str | Path) -> ContentformConfig:
    config_path = Path(path).expanduser().resolve()

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        parsed = ContentformConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc

    return parsed.model_copy(
        update={"resources_path": _resolve_path(parsed.resources_path, base_dir=config_path.parent)}
    )


def resolve_token(config: ContentformConfig) -> str:
    """Return the configured token, falling back to the ``token_env`` variable."""
    if config.token:
        return config.token
    token = os.environ.get(config.token_env, "").strip()
    if not token:
        raise ConfigError(f"no management token: set 'token' in config or the {config.token_env} variable")
    return token


def load_resources(path: str | Path) -> list[DesiredResource]:
    """Load a JSON array of declared resources, each tagged by ``kind``."""
    resources_path = Path(path).expanduser().resolve()
    try:
        raw_payload: Any = json.loads(resources_path.read_text(encoding="utf-8"))
        return _RESOURCES_ADAPTER.validate_python(raw_payload)
    except OSError as exc:
        raise ResourceLoadError(f"failed reading resources file: {resources_path}") from exc
    except json.JSONDecodeError as exc:
        raise ResourceLoadError(f"invalid JSON in resources file: {resources_path}") from exc
    except ValidationError as exc:
        raise ResourceLoadError(f"invalid resources: {exc}") from exc

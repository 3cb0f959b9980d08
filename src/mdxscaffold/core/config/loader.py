"""Config loading and profile validation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from mdxscaffold.core.contracts.config import ScaffoldConfig
from mdxscaffold.core.contracts.exceptions import ConfigError
from mdxscaffold.core.manifest.profiles import build_profile


def _resolve_path(value: Path, *, base_dir: Path) -> Path:
    if value.is_absolute():
        return value
    return (base_dir / value).resolve()


def load_config(path: str | Path) -> ScaffoldConfig:
    """Load and validate a JSON config, resolving ``output_dir`` against the config directory.

    Raises:
        ConfigError: On unreadable files, malformed JSON, schema violations or
            categories that the selected profile's templates do not provide.
    """
    config_path = Path(path).expanduser().resolve()
    config_dir = config_path.parent

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        parsed = ScaffoldConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc

    resolved = parsed.model_copy(update={"output_dir": _resolve_path(parsed.output_dir, base_dir=config_dir)})
    build_profile(resolved)
    return resolved

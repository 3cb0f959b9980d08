import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from mdxscaffold.core.config import load_config
from mdxscaffold.core.contracts.config import ScaffoldConfig
from mdxscaffold.core.contracts.exceptions import ConfigError


def _write(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_defaults() -> None:
    config = ScaffoldConfig()

    assert config.profile == "complete"
    assert config.paths is None
    assert config.extension == ".mdx"
    assert config.output_dir == Path(".")


@pytest.mark.parametrize("extension", ["mdx", ".", "./x"])
def test_extension_must_be_dotted_suffix(extension: str) -> None:
    with pytest.raises(ValidationError):
        ScaffoldConfig(extension=extension)


@pytest.mark.parametrize("path", ["", "/abs/page", "a//b", "trailing/"])
def test_paths_are_validated(path: str) -> None:
    with pytest.raises(ValidationError):
        ScaffoldConfig(paths=["ok/page", path])


def test_unknown_keys_are_rejected() -> None:
    with pytest.raises(ValidationError):
        ScaffoldConfig.model_validate({"profil": "starter"})


def test_load_config_resolves_output_dir_against_config_dir(tmp_path: Path) -> None:
    config_path = _write(tmp_path / "scaffold.json", {"profile": "starter", "output_dir": "docs"})

    config = load_config(config_path)

    assert config.profile == "starter"
    assert config.output_dir == (tmp_path / "docs").resolve()


def test_load_config_keeps_absolute_output_dir(tmp_path: Path) -> None:
    target = tmp_path / "elsewhere"
    config_path = _write(tmp_path / "scaffold.json", {"output_dir": str(target)})

    assert load_config(config_path).output_dir == target


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="failed reading config file"):
        load_config(tmp_path / "missing.json")


def test_load_config_invalid_json(tmp_path: Path) -> None:
    config_path = tmp_path / "scaffold.json"
    config_path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigError, match="invalid JSON"):
        load_config(config_path)


def test_load_config_schema_violation(tmp_path: Path) -> None:
    config_path = _write(tmp_path / "scaffold.json", {"profile": "everything"})

    with pytest.raises(ConfigError, match="invalid config"):
        load_config(config_path)


def test_load_config_rejects_unknown_category(tmp_path: Path) -> None:
    config_path = _write(tmp_path / "scaffold.json", {"profile": "starter", "sections": {"a": "architecture"}})

    with pytest.raises(ConfigError, match="unknown template categories: architecture"):
        load_config(config_path)


@pytest.mark.parametrize("path", ["../escaped", "guides/../../escaped", "./overview"])
def test_load_config_rejects_relative_segments(tmp_path: Path, path: str) -> None:
    config_path = _write(tmp_path / "scaffold.json", {"paths": [path], "output_dir": "out"})

    with pytest.raises(ConfigError, match="must not contain relative segments"):
        load_config(config_path)

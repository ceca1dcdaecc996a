from pathlib import Path

import pytest

from ordinarinos import config as config_module
from ordinarinos.config import ConfigurationError, SelectorConfig, load_selector_config
from ordinarinos.rarity.query import RarityTier


@pytest.fixture(autouse=True)
def isolated_default_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    default_path = tmp_path / "home" / ".ordinarinos.yaml"
    monkeypatch.setattr("ordinarinos.config.DEFAULT_CONFIG_PATH", default_path)
    config_module.set_default_config_path(None)
    yield default_path
    config_module.set_default_config_path(None)


def test_load_selector_config_prefers_environment_over_yaml(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        """
        selector:
          search: block
          tier: epic
          available_only: false
          held_file: /tmp/file-held.json
        """
    )

    env_map = {
        "ORDINARINOS_TIER": "veryRare",
        "ORDINARINOS_AVAILABLE_ONLY": "yes",
        "ORDINARINOS_HELD_FILE": "/tmp/env-held.txt",
    }

    config = load_selector_config(config_path=config_path, env=env_map)

    assert isinstance(config, SelectorConfig)
    assert config.search == "block"
    assert config.tier is RarityTier.VERY_RARE
    assert config.available_only is True
    assert config.held_file == Path("/tmp/env-held.txt")


def test_overrides_win_over_environment(tmp_path: Path) -> None:
    config = load_selector_config(
        env={"ORDINARINOS_SEARCH": "pizza", "ORDINARINOS_AVAILABLE_ONLY": "1"},
        overrides={"search": "prime", "available_only": False, "tier": None},
    )

    assert config.search == "prime"
    assert config.available_only is False
    assert config.tier is None


def test_load_selector_config_reads_default_yaml(isolated_default_path: Path) -> None:
    isolated_default_path.parent.mkdir()
    isolated_default_path.write_text("selector:\n  tier: Legendary\n  available_only: on\n")

    config = load_selector_config(env={})

    assert config.tier is RarityTier.LEGENDARY
    assert config.available_only is True
    assert config.search is None


def test_missing_default_file_yields_defaults() -> None:
    config = load_selector_config(env={})
    assert config == SelectorConfig()


def test_explicit_missing_file_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        load_selector_config(config_path=tmp_path / "missing.yaml", env={})


def test_remembered_path_is_required(tmp_path: Path) -> None:
    config_module.set_default_config_path(tmp_path / "nope.yaml")
    with pytest.raises(ConfigurationError):
        load_selector_config(env={})


def test_invalid_tier_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        load_selector_config(env={"ORDINARINOS_TIER": "mythic"})


def test_selector_section_must_be_mapping(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("selector: [1, 2]\n")

    with pytest.raises(ConfigurationError):
        load_selector_config(config_path=config_path, env={})

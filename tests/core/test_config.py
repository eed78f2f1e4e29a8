"""
Tests for FstreeConfig loading and option merging.
"""

from pathlib import Path

import pytest
import yaml

from fstree.core.config import FstreeConfig
from fstree.core.options import WalkOptions
from fstree.utils.error_handling import ConfigError, ValidationError


def test_config_defaults():
    """Test that FstreeConfig has sensible defaults."""
    config = FstreeConfig()

    assert not config.all_files
    assert not config.dirs_only
    assert config.file_limit is None
    assert config.max_depth is None
    assert config.log_level == "WARNING"
    assert config.log_file is None


def test_config_load_from_yaml(tmp_path):
    """Test loading config from YAML file."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        yaml.dump(
            {
                "all_files": True,
                "permissions": True,
                "max_depth": 3,
                "file_limit": 100,
                "log_level": "DEBUG",
            }
        )
    )

    config = FstreeConfig.load(str(config_file))

    assert config.all_files
    assert config.permissions
    assert config.max_depth == 3
    assert config.file_limit == 100
    assert config.log_level == "DEBUG"


def test_config_load_partial_yaml(tmp_path):
    """Test loading config with only some values in YAML."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.dump({"dirs_only": True}))

    config = FstreeConfig.load(str(config_file))

    # Should use defaults for missing values
    assert config.max_depth is None
    assert not config.all_files

    # Should use YAML values for provided ones
    assert config.dirs_only


def test_config_load_missing_default_file():
    """No ~/.fstree/config.yaml means plain defaults."""
    config = FstreeConfig.load()

    assert config == FstreeConfig()


def test_config_load_explicit_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="Config file not found"):
        FstreeConfig.load(str(tmp_path / "nope.yaml"))


@pytest.mark.parametrize(
    "content",
    [
        "invalid: yaml: content: [",
        "- just\n- a\n- list\n",
        "max_depth: not-a-number\n",
    ],
)
def test_config_load_invalid_file_falls_back_to_defaults(tmp_path, content):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(content)

    config = FstreeConfig.load(str(config_file))

    assert config == FstreeConfig()


def test_config_load_empty_yaml(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("")

    assert FstreeConfig.load(str(config_file)) == FstreeConfig()


def test_config_load_default_path(isolated_environment):
    """Test loading from default path (~/.fstree/config.yaml)."""
    config_dir = isolated_environment / ".fstree"
    config_dir.mkdir()
    (config_dir / "config.yaml").write_text(yaml.dump({"max_depth": 2}))

    assert FstreeConfig.default_path() == Path(isolated_environment) / ".fstree" / "config.yaml"
    assert FstreeConfig.load().max_depth == 2


def test_to_options_uses_config_values():
    config = FstreeConfig(dirs_only=True, max_depth=4)

    assert config.to_options() == WalkOptions(dirs_only=True, max_depth=4)


def test_to_options_overrides_win_unless_none():
    config = FstreeConfig(all_files=True, max_depth=4, file_limit=10)

    options = config.to_options(all_files=None, max_depth=1, file_limit=None, full_path=True)

    assert options.all_files
    assert options.full_path
    assert options.max_depth == 1
    assert options.file_limit == 10


def test_to_options_rejects_unknown_override():
    with pytest.raises(ConfigError, match="Unknown option"):
        FstreeConfig().to_options(colour=True)


def test_to_options_validates_depth():
    with pytest.raises(ValidationError):
        FstreeConfig(max_depth=0).to_options()

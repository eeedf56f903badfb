"""
Tests for YAML configuration loading.
"""

from pathlib import Path

import pytest

from primetable import DEFAULT_WINDOW, load_config
from primetable.config import DEFAULT_CONFIG

REPO_CONFIG = Path(__file__).parent.parent / "config" / "default.yaml"


def write_yaml(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(text)
    return path


class TestLoadConfig:
    """Defaults, overrides and the shipped config file."""

    def test_defaults(self):
        config = load_config()
        assert config == DEFAULT_CONFIG
        assert config['window'] == DEFAULT_WINDOW == 256000

    def test_repo_default_file(self):
        config = load_config(REPO_CONFIG)
        assert config['window'] == DEFAULT_WINDOW
        assert 1000000 in config['verify_limits']
        assert config['bounds_sample'] == [1, 5, 6, 100, 10000]

    def test_defaults_match_shipped_file(self):
        assert load_config(REPO_CONFIG) == DEFAULT_CONFIG

    def test_partial_override(self, tmp_path):
        config = load_config(write_yaml(tmp_path, "window: 4096\n"))
        assert config['window'] == 4096
        assert config['verify_limits'] == DEFAULT_CONFIG['verify_limits']

    def test_empty_file_gives_defaults(self, tmp_path):
        assert load_config(write_yaml(tmp_path, "")) == DEFAULT_CONFIG

    def test_defaults_not_mutated(self, tmp_path):
        load_config(write_yaml(tmp_path, "window: 7\n"))
        assert DEFAULT_CONFIG['window'] == DEFAULT_WINDOW


class TestInvalidConfig:
    """Malformed configuration raises ValueError."""

    @pytest.mark.parametrize("text", [
        "window: 0\n",
        "window: -3\n",
        "window: big\n",
        "window: true\n",
        "verify_limits: 10\n",
        "verify_limits: [10, -1]\n",
        "benchmark_limits: [1.5]\n",
        "bounds_sample: [0]\n",
        "output_dir: 3\n",
        "- just\n- a list\n",
        "unknown_key: 1\n",
    ])
    def test_rejected(self, tmp_path, text):
        with pytest.raises(ValueError):
            load_config(write_yaml(tmp_path, text))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "absent.yaml")


if __name__ == '__main__':
    pytest.main([__file__, '-v'])

"""Tests for exprtree.toml loading."""

from pathlib import Path

import pytest

from exprtree.core.config import EngineConfig, find_config, load_config
from exprtree.core.errors import ConfigError
from exprtree.core.expression_lang import EvalOptions, OverflowMode


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "exprtree.toml"
    path.write_text(content)
    return path


class TestLoadConfig:
    """load_config reads parser and evaluator sections."""

    def test_full_file(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            """
[parser]
strict = true

[evaluator]
overflow = "wrapping"
int_bits = 32
""",
        )
        config = load_config(path)
        assert config.parser.strict is True
        assert config.evaluator.overflow == OverflowMode.WRAPPING
        assert config.evaluator.int_bits == 32
        assert config.path == path

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        config = load_config(_write(tmp_path, ""))
        assert config.parser.strict is False
        assert config.evaluator.overflow == OverflowMode.CHECKED
        assert config.evaluator.int_bits == 64

    def test_partial_section(self, tmp_path: Path) -> None:
        config = load_config(_write(tmp_path, '[evaluator]\noverflow = "saturating"\n'))
        assert config.evaluator.overflow == OverflowMode.SATURATING
        assert config.evaluator.int_bits == 64

    def test_to_options(self, tmp_path: Path) -> None:
        config = load_config(_write(tmp_path, '[evaluator]\noverflow = "unbounded"\nint_bits = 16\n'))
        assert config.evaluator.to_options() == EvalOptions(
            overflow=OverflowMode.UNBOUNDED, int_bits=16
        )

    def test_invalid_overflow(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="overflow must be one of"):
            load_config(_write(tmp_path, '[evaluator]\noverflow = "panic"\n'))

    def test_invalid_int_bits(self, tmp_path: Path) -> None:
        for value in ["1", "true", '"64"']:
            with pytest.raises(ConfigError, match="int_bits"):
                load_config(_write(tmp_path, f"[evaluator]\nint_bits = {value}\n"))

    def test_invalid_strict(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="strict must be a boolean"):
            load_config(_write(tmp_path, '[parser]\nstrict = "yes"\n'))

    def test_malformed_toml(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(_write(tmp_path, "[parser\nstrict = true\n"))

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Cannot read"):
            load_config(tmp_path / "nope.toml")


class TestFindConfig:
    """find_config looks for exprtree.toml in a directory."""

    def test_no_file_gives_defaults(self, tmp_path: Path) -> None:
        config = find_config(tmp_path)
        assert config == EngineConfig()
        assert config.path is None

    def test_finds_file(self, tmp_path: Path) -> None:
        _write(tmp_path, "[parser]\nstrict = true\n")
        config = find_config(tmp_path)
        assert config.parser.strict is True

    def test_defaults_to_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write(tmp_path, "[evaluator]\nint_bits = 8\n")
        monkeypatch.chdir(tmp_path)
        assert find_config().evaluator.int_bits == 8

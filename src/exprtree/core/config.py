import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from exprtree.core.errors import ConfigError
from exprtree.core.expression_lang.evaluator import EvalOptions, OverflowMode

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "exprtree.toml"


@dataclass
class ParserConfig:
    """Decoder configuration."""

    strict: bool = False  # reject tokens left after a complete tree


@dataclass
class EvaluatorConfig:
    """Evaluator configuration."""

    overflow: OverflowMode = OverflowMode.CHECKED
    int_bits: int = 64

    def to_options(self) -> EvalOptions:
        return EvalOptions(overflow=self.overflow, int_bits=self.int_bits)


@dataclass
class EngineConfig:
    """Top-level exprtree.toml contents."""

    parser: ParserConfig = field(default_factory=ParserConfig)
    evaluator: EvaluatorConfig = field(default_factory=EvaluatorConfig)
    path: Path | None = None


def load_config(path: Path) -> EngineConfig:
    """Load an exprtree.toml file.

    Missing sections and keys fall back to defaults.

    Raises:
        ConfigError: If the file is unreadable, is not valid TOML, or holds
            values of the wrong type.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    parser_data = data.get("parser", {})
    evaluator_data = data.get("evaluator", {})

    strict = parser_data.get("strict", False)
    if not isinstance(strict, bool):
        raise ConfigError(f"{path}: [parser] strict must be a boolean, got {strict!r}")

    overflow = evaluator_data.get("overflow", OverflowMode.CHECKED.value)
    try:
        overflow_mode = OverflowMode(overflow)
    except ValueError:
        choices = ", ".join(m.value for m in OverflowMode)
        raise ConfigError(
            f"{path}: [evaluator] overflow must be one of {choices}, got {overflow!r}"
        ) from None

    int_bits = evaluator_data.get("int_bits", 64)
    if isinstance(int_bits, bool) or not isinstance(int_bits, int) or int_bits < 2:
        raise ConfigError(f"{path}: [evaluator] int_bits must be an integer >= 2, got {int_bits!r}")

    logger.debug("Loaded config from %s", path)
    return EngineConfig(
        parser=ParserConfig(strict=strict),
        evaluator=EvaluatorConfig(overflow=overflow_mode, int_bits=int_bits),
        path=path,
    )


def find_config(start: Path | None = None) -> EngineConfig:
    """Load exprtree.toml from ``start`` (default: cwd), or return defaults."""
    candidate = (start or Path.cwd()) / CONFIG_FILENAME
    if candidate.is_file():
        return load_config(candidate)
    return EngineConfig()

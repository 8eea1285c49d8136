"""
Generator settings.

A GeneratorConfig is built from three layers, later ones winning: the
target's defaults, an optional JSON config file, and explicit overrides.
Keys that are not GeneratorConfig fields land in ``custom`` (type
overrides such as ``int_type``, or anything a generator wants to read).
"""

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .schema import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT


class ConfigError(Exception):
    """A config file cannot be read or a setting has an invalid value."""

    pass


@dataclass
class GeneratorConfig:
    """Settings shared by every target generator."""

    # Go, Java and Kotlin only
    package_name: str = ""

    indent_size: int = 4
    use_tabs: bool = False

    # Comment fields whose type the sample could not reveal
    add_comments: bool = False

    max_depth: int = DEFAULT_MAX_DEPTH
    unique_type_names: bool = False

    # null_type, int_type, unknown_type, ... and target-specific extras
    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def indent(self) -> str:
        """One level of indentation."""
        return "\t" if self.use_tabs else " " * self.indent_size


TARGET_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "typescript": {"indent_size": 2},
    "java": {"indent_size": 2},
    "flutter": {"indent_size": 2},
    "swift": {"indent_size": 4},
    # gofmt indents with tabs
    "go": {
        "package_name": "main",
        "use_tabs": True,
        "custom": {
            "int_type": "int",
            "float_type": "float64",
            "unknown_type": "interface{}",
        },
    },
    "kotlin": {"indent_size": 4},
}

_CONFIG_FIELDS = frozenset(f.name for f in fields(GeneratorConfig))


class ConfigManager:
    """Builds validated GeneratorConfig objects for targets."""

    def __init__(self, defaults: Optional[Dict[str, Dict[str, Any]]] = None):
        self._defaults = defaults if defaults is not None else TARGET_DEFAULTS

    def get_config(
        self,
        language: str,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Merge the target defaults, config_file and custom_config, in that order.

        Args:
            language: Target id; unknown ids start from GeneratorConfig()
            custom_config: Overrides, flat or with a nested ``custom`` dict
            config_file: Path of a JSON object with the same keys

        Raises:
            ConfigError: If the file is unusable or a value is invalid
        """
        settings: Dict[str, Any] = {"custom": {}}
        layers = [self._defaults.get(language.lower(), {})]
        if config_file:
            layers.append(self._read_file(config_file))
        if custom_config:
            layers.append(custom_config)

        for layer in layers:
            for key, value in layer.items():
                if key == "custom" and isinstance(value, dict):
                    settings["custom"].update(value)
                elif key in _CONFIG_FIELDS:
                    settings[key] = value
                else:
                    settings["custom"][key] = value

        config = GeneratorConfig(**settings)
        errors = self.validate_config(config)
        if errors:
            raise ConfigError("; ".join(errors))
        return config

    @staticmethod
    def _read_file(config_file: Union[str, Path]) -> Dict[str, Any]:
        path = Path(config_file)

        if not path.is_file():
            raise ConfigError(f"Configuration file not found: {path}")
        if path.suffix.lower() != ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")
        return data

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Write config as a JSON file that get_config can read back."""
        path = Path(output_path)
        try:
            path.write_text(
                json.dumps(asdict(config), indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as e:
            raise ConfigError(f"Cannot write configuration to {path}: {e}") from e

    def list_languages(self) -> List[str]:
        """Targets that have their own defaults."""
        return list(self._defaults)

    def validate_config(self, config: GeneratorConfig) -> List[str]:
        """Return one message per invalid setting (empty when valid)."""
        errors = []

        if not isinstance(config.indent_size, int) or config.indent_size < 0:
            errors.append(f"Invalid indent_size: {config.indent_size}")

        if not isinstance(config.max_depth, int) or not (
            1 <= config.max_depth <= MAX_DEPTH_LIMIT
        ):
            errors.append(
                f"Invalid max_depth: {config.max_depth} "
                f"(must be between 1 and {MAX_DEPTH_LIMIT})"
            )

        if not isinstance(config.custom, dict):
            errors.append(f"Invalid custom settings: {config.custom!r}")

        if config.package_name and not all(
            part.isidentifier() for part in config.package_name.split(".")
        ):
            errors.append(f"Invalid package name: {config.package_name}")

        return errors


_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    language: str = "",
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """Shortcut for ``get_config_manager().get_config(...)``."""
    return get_config_manager().get_config(language, custom_config, config_file)

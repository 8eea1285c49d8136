"""
Target registry.

Maps target ids (``typescript``, ``java``, ``flutter``, ``swift``, ``go``,
``kotlin``) and their aliases to generator classes, and exposes the
identifier policy each target names fields with.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from .core.config import ConfigError, GeneratorConfig, load_config
from .core.errors import ConversionError
from .core.generator import CodeGenerator
from .core.naming import IdentifierPolicy
from ..logging_config import get_logger

logger = get_logger(__name__)

ConfigSource = Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]]


class RegistryError(Exception):
    """Raised for invalid registrations and generator construction failures."""

    pass


class UnsupportedTarget(RegistryError, ConversionError):
    """Raised when a target id is neither registered nor an alias."""

    code = "unsupported_target"

    def __init__(self, target: Any, available: Optional[List[str]] = None):
        self.target = target
        self.available = available or []
        message = f"Unsupported target: {target!r}"
        if self.available:
            message += f" (supported: {', '.join(self.available)})"
        super().__init__(message)


class GeneratorRegistry:
    """Target ids and aliases, each bound to a CodeGenerator subclass."""

    def __init__(self):
        self._targets: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        target: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Bind a target id (and optional aliases) to a generator class.

        An already registered target is left alone unless replace is set.

        Raises:
            RegistryError: If generator_class is not a CodeGenerator, or a
                name is already taken by another target
        """
        if not (
            isinstance(generator_class, type)
            and issubclass(generator_class, CodeGenerator)
        ):
            raise RegistryError(
                f"{generator_class!r} is not a CodeGenerator subclass"
            )

        key = target.lower()
        if key in self._targets and not replace:
            logger.debug("Target %s already registered, keeping it", key)
            return

        alias_keys = [alias.lower() for alias in aliases or [] if alias.lower() != key]

        if not replace:
            owner = self._aliases.get(key)
            if owner is not None:
                raise RegistryError(f"'{key}' is already an alias of '{owner}'")
            for alias_key in alias_keys:
                if alias_key in self._targets:
                    raise RegistryError(f"Alias '{alias_key}' is a registered target")
                owner = self._aliases.get(alias_key, key)
                if owner != key:
                    raise RegistryError(
                        f"Alias '{alias_key}' already belongs to '{owner}'"
                    )

        self._targets[key] = generator_class
        self._aliases.update((alias_key, key) for alias_key in alias_keys)
        logger.debug("Registered target %s -> %s", key, generator_class.__name__)

    def resolve(self, target: Any) -> str:
        """
        Return the canonical id for a target id or alias (case-insensitive).

        Raises:
            UnsupportedTarget: If nothing is registered under that name
        """
        if isinstance(target, str):
            key = target.lower()
            if key in self._targets:
                return key
            if key in self._aliases:
                return self._aliases[key]

        raise UnsupportedTarget(target, self.list_languages())

    def get_generator_class(self, target: str) -> Type[CodeGenerator]:
        return self._targets[self.resolve(target)]

    def create_generator(self, target: str, config: ConfigSource = None) -> CodeGenerator:
        """
        Build a generator for target.

        Args:
            target: Target id or alias
            config: A ready GeneratorConfig, or overrides (dict) / a JSON
                config file merged over the target's defaults

        Raises:
            UnsupportedTarget: If the target is unknown
            ConfigError: If the configuration is invalid
            RegistryError: If config has an unusable type or the generator
                cannot be built
        """
        key = self.resolve(target)
        generator_class = self._targets[key]

        if config is None or isinstance(config, GeneratorConfig):
            final_config = config or load_config(key)
        elif isinstance(config, dict):
            final_config = load_config(key, custom_config=config)
        elif isinstance(config, (str, Path)):
            final_config = load_config(key, config_file=config)
        else:
            raise RegistryError(
                f"Config must be a GeneratorConfig, dict or path, not {type(config).__name__}"
            )

        try:
            return generator_class(final_config)
        except ConfigError:
            raise
        except Exception as e:
            raise RegistryError(f"Cannot build {key} generator: {e}") from e

    def list_languages(self) -> List[str]:
        """Canonical target ids, sorted."""
        return sorted(self._targets)

    def get_aliases_for_language(self, target: str) -> List[str]:
        key = target.lower()
        return sorted(alias for alias, owner in self._aliases.items() if owner == key)

    def is_supported(self, target: str) -> bool:
        key = target.lower()
        return key in self._targets or key in self._aliases

    def get_identifier_policy(self, target: str) -> IdentifierPolicy:
        return self.create_generator(target).policy

    def get_language_info(self, target: str) -> Dict[str, Any]:
        """
        Describe a target: id, generator class, file extension, aliases and
        how it turns JSON keys into identifiers.

        Raises:
            UnsupportedTarget: If the target is unknown
        """
        key = self.resolve(target)
        generator = self.create_generator(key)
        generator_class = type(generator)

        return {
            "name": generator.language_name,
            "class": generator_class.__name__,
            "module": generator_class.__module__,
            "file_extension": generator.file_extension,
            "aliases": self.get_aliases_for_language(key),
            "identifier_case": generator.policy.identifier_case.value,
            "escape_rule": generator.policy.escape_rule.value,
        }


_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Process-wide registry, populated with the built-in targets on first use."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _register_builtin_targets(_global_registry)
    return _global_registry


def _register_builtin_targets(registry: GeneratorRegistry):
    from .languages import (
        DartGenerator,
        GoGenerator,
        JavaGenerator,
        KotlinGenerator,
        SwiftGenerator,
        TypeScriptGenerator,
    )

    registry.register("typescript", TypeScriptGenerator, aliases=["ts"])
    registry.register("java", JavaGenerator)
    registry.register("flutter", DartGenerator, aliases=["dart"])
    registry.register("swift", SwiftGenerator)
    registry.register("go", GoGenerator, aliases=["golang"])
    registry.register("kotlin", KotlinGenerator, aliases=["kt"])


# Module-level shortcuts over the global registry


def register_generator(
    target: str,
    generator_class: Type[CodeGenerator],
    aliases: Optional[List[str]] = None,
):
    """Add a target to the global registry."""
    get_registry().register(target, generator_class, aliases)


def get_generator(target: str, config: ConfigSource = None) -> CodeGenerator:
    """Build a generator for a target id or alias."""
    return get_registry().create_generator(target, config)


def list_supported_languages() -> List[str]:
    return get_registry().list_languages()


def is_language_supported(target: str) -> bool:
    return get_registry().is_supported(target)


def get_language_info(target: str) -> Dict[str, Any]:
    return get_registry().get_language_info(target)


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    return {target: get_language_info(target) for target in list_supported_languages()}


def get_identifier_policy(target: str) -> IdentifierPolicy:
    """Identifier policy for a target id or alias."""
    return get_registry().get_identifier_policy(target)


def list_identifier_policies() -> Dict[str, IdentifierPolicy]:
    """Identifier policy of every registered target, keyed by target id."""
    return {
        target: get_identifier_policy(target) for target in list_supported_languages()
    }

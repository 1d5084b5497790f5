"""Config rule registry with auto-discovery."""
import importlib
import pkgutil

from ..engine.graph import Node
from .base import ConfigRule, RuleDefinition


class RuleRegistry:
    """Singleton registry mapping rule names to ConfigRule subclasses."""

    _rules: dict[str, type[ConfigRule]] = {}

    @classmethod
    def register(cls, name: str | None = None):
        """Decorator to register a rule class.

        Usage:
            @RuleRegistry.register()
            class MyRule(ConfigRule):
                ...

            @RuleRegistry.register("custom_name")
            class MyRule(ConfigRule):
                ...
        """
        def decorator(rule_cls: type[ConfigRule]) -> type[ConfigRule]:
            cls._rules[name or rule_cls.__name__] = rule_cls
            return rule_cls
        return decorator

    @classmethod
    def get(cls, name: str) -> type[ConfigRule]:
        if name not in cls._rules:
            raise KeyError(f"Unknown config rule: {name}")
        return cls._rules[name]

    @classmethod
    def rules_for(cls, node_type: str) -> list[ConfigRule]:
        return [rule_cls() for rule_cls in cls._rules.values() if rule_cls.matches(node_type)]

    @classmethod
    def validate(cls, node: Node) -> list[str]:
        """Run every rule matching the node's raw type."""
        errors: list[str] = []
        for rule in cls.rules_for(node.type):
            errors.extend(rule.validate(node))
        return errors

    @classmethod
    def all_definitions(cls) -> dict[str, RuleDefinition]:
        return {
            name: rule_cls.get_definition(name)
            for name, rule_cls in cls._rules.items()
        }

    @classmethod
    def discover(cls, package_name: str) -> None:
        """Import all modules in the given package to trigger @register decorators."""
        try:
            package = importlib.import_module(package_name)
        except ImportError:
            return
        if not hasattr(package, "__path__"):
            return
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            if module_name.startswith("_") or module_name in ("base", "registry"):
                continue
            importlib.import_module(f"{package_name}.{module_name}")

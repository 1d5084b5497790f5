"""Base abstraction for per-kind node configuration rules."""
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..engine.graph import Node


@dataclass
class RuleDefinition:
    """Serializable rule description sent to the frontend."""
    name: str
    display_name: str
    description: str


class ConfigRule(ABC):
    """Checks the ``config`` payload of the node types it matches.

    Rules only look at keys that are present, so payloads of node kinds the
    editor adds later pass through untouched.
    """

    DISPLAY_NAME: str = ""
    DESCRIPTION: str = ""

    @classmethod
    @abstractmethod
    def matches(cls, node_type: str) -> bool:
        ...

    @abstractmethod
    def validate(self, node: Node) -> list[str]:
        """Return error messages for ``node`` (empty = valid)."""
        ...

    @classmethod
    def get_definition(cls, name: str) -> RuleDefinition:
        return RuleDefinition(
            name=name,
            display_name=cls.DISPLAY_NAME or cls.__name__,
            description=cls.DESCRIPTION or cls.__doc__ or "",
        )

"""Config rules for outbound integration nodes."""
from pydantic import AnyUrl, TypeAdapter, ValidationError

from ..engine.graph import Node
from .base import ConfigRule
from .registry import RuleRegistry

_url_adapter = TypeAdapter(AnyUrl)


def is_well_formed_url(value: object) -> bool:
    """True for absolute URLs with a scheme, e.g. ``https://host/path``."""
    if not isinstance(value, str):
        return False
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        return False
    return True


@RuleRegistry.register("api_url")
class ApiUrlRule(ConfigRule):
    """API / HTTP request nodes must point at a well-formed URL."""

    DISPLAY_NAME = "API URL"
    NODE_TYPES = ("api", "http-request")

    @classmethod
    def matches(cls, node_type: str) -> bool:
        return node_type in cls.NODE_TYPES

    def validate(self, node: Node) -> list[str]:
        url = node.config.get("url")
        if url is None or url == "":
            return []
        if not is_well_formed_url(url):
            return [f'API "{node.display_name}" has an invalid URL']
        return []

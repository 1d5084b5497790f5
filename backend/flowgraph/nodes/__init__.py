"""Auto-discover all config rule modules on import."""
from .registry import RuleRegistry

RuleRegistry.discover("flowgraph.nodes")

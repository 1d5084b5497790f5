"""Config rules for notification nodes (email and friends)."""
from collections.abc import Mapping

from ..engine.graph import Node
from .base import ConfigRule
from .registry import RuleRegistry


@RuleRegistry.register("email_subject")
class EmailSubjectRule(ConfigRule):
    """An email node that carries emailData must have a non-blank subject."""

    DISPLAY_NAME = "Email subject"

    @classmethod
    def matches(cls, node_type: str) -> bool:
        # Covers "email", "send-email", "email-template", ...
        return "email" in node_type

    def validate(self, node: Node) -> list[str]:
        email_data = node.config.get("emailData")
        if email_data is None:
            return []
        subject = email_data.get("subject") if isinstance(email_data, Mapping) else None
        if not isinstance(subject, str) or not subject.strip():
            return [f'Email "{node.display_name}" must have a subject']
        return []

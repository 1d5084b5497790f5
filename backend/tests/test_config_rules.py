"""Tests for per-kind node config rules and their registry."""
import pytest

from flowgraph.engine.graph import Node
from flowgraph.nodes.integrations import ApiUrlRule, is_well_formed_url
from flowgraph.nodes.notifications import EmailSubjectRule
from flowgraph.nodes.registry import RuleRegistry


class TestRegistry:
    def test_rules_discovered(self):
        defs = RuleRegistry.all_definitions()
        assert "email_subject" in defs
        assert "api_url" in defs
        assert defs["api_url"].display_name == "API URL"

    def test_get_unknown(self):
        with pytest.raises(KeyError, match="Unknown config rule"):
            RuleRegistry.get("nope")

    def test_dispatch_by_type(self):
        assert [type(r) for r in RuleRegistry.rules_for("send-email")] == [EmailSubjectRule]
        assert [type(r) for r in RuleRegistry.rules_for("http-request")] == [ApiUrlRule]
        assert RuleRegistry.rules_for("action") == []

    def test_api_match_is_exact(self):
        assert not ApiUrlRule.matches("api-call")
        assert ApiUrlRule.matches("api")


class TestEmailSubjectRule:
    @pytest.mark.parametrize("email_data", [{}, {"subject": ""}, {"subject": " \t "}, {"subject": None}])
    def test_blank_subject(self, email_data):
        node = Node(id="m", type="email", label="Invoice", config={"emailData": email_data})
        errors = EmailSubjectRule().validate(node)
        assert errors == ['Email "Invoice" must have a subject']

    def test_subject_present(self):
        node = Node(id="m", type="email", config={"emailData": {"subject": "Invoice #12"}})
        assert EmailSubjectRule().validate(node) == []

    def test_label_falls_back_to_id(self):
        node = Node(id="m7", type="email", config={"emailData": {}})
        assert "m7" in EmailSubjectRule().validate(node)[0]


class TestApiUrlRule:
    @pytest.mark.parametrize("url", [
        "https://erp.example.com/api/orders",
        "http://localhost:8080/hook",
    ])
    def test_valid_urls(self, url):
        assert is_well_formed_url(url)

    @pytest.mark.parametrize("url", ["not a url", "/relative/path", "http://", 42])
    def test_invalid_urls(self, url):
        assert not is_well_formed_url(url)

    def test_missing_url_not_checked(self):
        node = Node(id="h", type="api", config={"method": "GET"})
        assert ApiUrlRule().validate(node) == []

    def test_invalid_url_error(self):
        node = Node(id="h", type="api", label="Push", config={"url": "nope"})
        assert ApiUrlRule().validate(node) == ['API "Push" has an invalid URL']

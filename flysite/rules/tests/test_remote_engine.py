#!/usr/bin/env python3
# flysite/rules/tests/test_remote_engine.py
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

import unittest
from unittest.mock import MagicMock
import requests

from flysite.config import SiteModelConfig
from flysite.exceptions import RuleEngineError
from flysite.rules.contract import Fact, Flyability
from flysite.rules.remote import RemoteRuleEngine
from flysite.site_model.data_models import DirectionRange, SiteType

class TestRemoteRuleEngine(unittest.TestCase):
    def setUp(self):
        self.session = MagicMock()
        self.response = MagicMock()
        self.session.post.return_value = self.response
        self.engine = RemoteRuleEngine(url="http://rules.local/evaluate", timeout=5, session=self.session)
        self.fact = Fact(DirectionRange(200, 290), SiteType.WINCH, 250, 4.0)

    def test_posts_fact_and_wraps_reply(self):
        self.response.json.return_value = {"classification": "flyable", "score": 70, "trace": ["n1", "n2"]}

        decision = self.engine.evaluate(self.fact)

        self.session.post.assert_called_once_with(
            "http://rules.local/evaluate", json=self.fact.to_dict(),
            headers={"Content-Type": "application/json"}, timeout=5,
        )
        self.assertEqual(decision.classification, Flyability.FLYABLE)
        self.assertEqual(decision.payload, {"classification": "flyable", "score": 70, "trace": ["n1", "n2"]})

    def test_unknown_classification(self):
        self.response.json.return_value = {"verdict": "maybe"}
        self.assertEqual(self.engine.evaluate(self.fact).classification, Flyability.UNKNOWN)

    def test_http_error(self):
        self.response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            "503 Server Error", response=MagicMock(status_code=503)
        )
        with self.assertRaises(RuleEngineError) as ctx:
            self.engine.evaluate(self.fact)
        self.assertEqual(ctx.exception.status_code, 503)

    def test_connection_error(self):
        self.session.post.side_effect = requests.exceptions.ConnectionError("Connection refused")
        with self.assertRaises(RuleEngineError):
            self.engine.evaluate(self.fact)

    def test_malformed_url_reported_as_unreachable(self):
        self.session.post.side_effect = requests.exceptions.MissingSchema(
            "Invalid URL 'rules.local/evaluate': No scheme supplied"
        )
        with self.assertRaises(RuleEngineError) as ctx:
            self.engine.evaluate(self.fact)
        self.assertIn("unreachable", str(ctx.exception))
        self.assertNotIn("JSON", str(ctx.exception))

    def test_requests_json_error_reported_as_invalid_json(self):
        self.response.json.side_effect = requests.exceptions.JSONDecodeError("Expecting value", "<html>", 0)
        with self.assertRaises(RuleEngineError) as ctx:
            self.engine.evaluate(self.fact)
        self.assertIn("invalid JSON", str(ctx.exception))

    def test_supplied_session_headers_untouched(self):
        session = requests.Session()
        before = dict(session.headers)
        RemoteRuleEngine(url="http://rules.local/evaluate", session=session,
                         config=SiteModelConfig(rule_engine_headers={"X-Api-Key": "k"}))
        self.assertEqual(dict(session.headers), before)

    def test_invalid_json(self):
        self.response.json.side_effect = ValueError("Expecting value")
        with self.assertRaises(RuleEngineError):
            self.engine.evaluate(self.fact)

    def test_requires_url(self):
        with self.assertRaises(RuleEngineError):
            RemoteRuleEngine(session=self.session)

    def test_url_and_timeout_from_config(self):
        config = SiteModelConfig(rule_engine_url="http://rules.local/v2", rule_engine_timeout=3)
        engine = RemoteRuleEngine(session=self.session, config=config)
        self.assertEqual(engine.url, "http://rules.local/v2")
        self.assertEqual(engine.timeout, 3)

if __name__ == '__main__':
    unittest.main()

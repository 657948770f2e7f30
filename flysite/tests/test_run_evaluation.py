#!/usr/bin/env python3
# flysite/tests/test_run_evaluation.py
import json
import os
import sys
import tempfile
from pathlib import Path

project_root = Path(__file__).resolve().parent.parent.parent
sys.path.append(str(project_root))

import unittest
from unittest.mock import MagicMock, patch
import requests

import run_evaluation

SITES = [{
    "name": "Tegelberg",
    "country": "DE",
    "launches": [{
        "location": {"latitude": 47.56, "longitude": 10.77, "name": "West"},
        "direction_degrees_start": 270,
        "direction_degrees_stop": 90,
        "elevation": 1700,
        "site_type": "Hang",
    }],
    "landings": [{"location": {"latitude": 47.58, "longitude": 10.75}, "elevation": 800}],
}]

class TestRunEvaluation(unittest.TestCase):
    def setUp(self):
        handle, self.sites_file = tempfile.mkstemp(suffix=".json")
        with os.fdopen(handle, "w", encoding="utf-8") as f:
            json.dump(SITES, f)
        self.args = [self.sites_file, "--wind-bearing", "0", "--wind-speed", "5"]

    def tearDown(self):
        os.remove(self.sites_file)

    @patch("builtins.print")
    def test_native_run_succeeds(self, mock_print):
        self.assertEqual(run_evaluation.main(self.args), 0)
        printed = " ".join(str(call.args[0]) for call in mock_print.call_args_list if call.args)
        self.assertIn("1/1 launches flyable", printed)

    @patch("builtins.print")
    @patch("flysite.rules.remote.requests.Session")
    @patch.dict(os.environ, {"FLYSITE_RULE_ENGINE_URL": "http://127.0.0.1:9/x"})
    def test_unreachable_rule_engine_exits_with_error(self, mock_session_cls, mock_print):
        session = MagicMock()
        session.post.side_effect = requests.exceptions.ConnectionError("Connection refused")
        mock_session_cls.return_value = session

        with self.assertLogs(level="ERROR") as logs:
            self.assertEqual(run_evaluation.main(self.args + ["--remote"]), 1)
        self.assertTrue(any("Tegelberg" in line for line in logs.output))

    @patch.dict(os.environ, {"FLYSITE_RULE_ENGINE_TIMEOUT": "ten"})
    def test_malformed_environment_exits_with_error(self):
        with self.assertLogs(level="ERROR"):
            self.assertEqual(run_evaluation.main(self.args), 1)

    def test_missing_sites_file(self):
        with self.assertLogs(level="ERROR"):
            self.assertEqual(run_evaluation.main(["/nonexistent/sites.json", "--wind-bearing", "0", "--wind-speed", "5"]), 1)

if __name__ == '__main__':
    unittest.main()

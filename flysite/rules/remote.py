# flysite/rules/remote.py
"""
Rule engine reached over HTTP. The fact is posted as JSON and the JSON
reply is wrapped, unread, in a Decision. The only field looked at is
"classification"; anything else stays in the payload.
"""
import logging
from typing import Optional

import requests

from ..config import SiteModelConfig
from ..exceptions import RuleEngineError
from .contract import Decision, Fact, Flyability

logger = logging.getLogger(__name__)

class RemoteRuleEngine:
    """
    A dedicated client for an external rule-evaluation service.
    """

    def __init__(self, url: Optional[str] = None, timeout: Optional[int] = None,
                 session: Optional[requests.Session] = None,
                 config: Optional[SiteModelConfig] = None):
        """
        Args:
            url: Endpoint accepting a POSTed fact. Falls back to the config.
            timeout: Request timeout in seconds. Falls back to the config.
            session: Optional pre-built session, e.g. one with auth adapters.
            config: Source of defaults; SiteModelConfig() when omitted.
        """
        self.config = config or SiteModelConfig()
        self.url = url or self.config.rule_engine_url
        if not self.url:
            raise RuleEngineError("No rule engine URL configured")
        self.timeout = timeout if timeout is not None else self.config.rule_engine_timeout
        # Never mutates the session, which the caller may share
        self.session = session or requests.Session()
        self.headers = dict(self.config.rule_engine_headers)
        logger.info(f"RemoteRuleEngine initialized for {self.url}")

    def evaluate(self, fact: Fact) -> Decision:
        try:
            response = self.session.post(self.url, json=fact.to_dict(), headers=self.headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.error(f"Rule engine rejected fact: {e}")
            raise RuleEngineError("Rule engine returned an error", status_code=status) from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Failed to reach rule engine at {self.url}: {e}")
            raise RuleEngineError(f"Rule engine unreachable: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Rule engine answered with invalid JSON: {e}")
            raise RuleEngineError("Rule engine answered with invalid JSON") from e

        if not isinstance(data, dict):
            data = {"result": data}
        return Decision(classification=self._classification(data.get("classification")), payload=data)

    @staticmethod
    def _classification(value) -> Flyability:
        try:
            return Flyability(value)
        except ValueError:
            return Flyability.UNKNOWN

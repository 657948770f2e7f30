"""
flysite - Rules
Fact/Decision boundary with the flyability evaluator, plus an embedded
and an HTTP implementation of that evaluator.
"""

from .contract import (
    WindObservation, Fact, Flyability, Decision, RuleEngine, CallableRuleEngine,
    build_fact, build_facts, evaluate_fact, evaluate_site
)
from .native import NativeRuleEngine
from .remote import RemoteRuleEngine

__all__ = [
    "WindObservation",
    "Fact",
    "Flyability",
    "Decision",
    "RuleEngine",
    "CallableRuleEngine",
    "build_fact",
    "build_facts",
    "evaluate_fact",
    "evaluate_site",
    "NativeRuleEngine",
    "RemoteRuleEngine"
]

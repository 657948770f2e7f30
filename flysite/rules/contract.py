# flysite/rules/contract.py
"""
The boundary with whatever decides flyability.

A Fact snapshots one launch's wind constraint against one wind observation.
Any object with `evaluate(fact) -> Decision` can act as the rule engine:
the embedded NativeRuleEngine, a RemoteRuleEngine, or a plain callable
wrapped in CallableRuleEngine. Decisions are passed back untouched.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Protocol, Tuple

from ..site_model.data_models import DirectionRange, Launch, Site, SiteType

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class WindObservation:
    """Wind at a site as delivered by the weather collaborator. Speeds in m/s."""
    bearing: float
    speed: float
    gust: Optional[float] = None

@dataclass(frozen=True)
class Fact:
    """Input submitted to a rule engine. Never mutated after construction."""
    launch_direction: DirectionRange
    site_type: SiteType
    wind_bearing: float
    wind_speed: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "launch_direction": {
                "start": self.launch_direction.start_bearing,
                "stop": self.launch_direction.stop_bearing,
            },
            "site_type": self.site_type.value,
            "wind_bearing": self.wind_bearing,
            "wind_speed": self.wind_speed,
        }

class Flyability(Enum):
    FLYABLE = "flyable"
    NOT_FLYABLE = "not_flyable"
    UNKNOWN = "unknown"

@dataclass(frozen=True)
class Decision:
    """
    A rule engine's verdict. Only the classification is read here; the
    payload belongs to the engine that produced it.
    """
    classification: Flyability
    payload: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_flyable(self) -> bool:
        return self.classification is Flyability.FLYABLE

class RuleEngine(Protocol):
    def evaluate(self, fact: Fact) -> Decision:
        ...

class CallableRuleEngine:
    """Adapts a plain `fact -> Decision` function to the RuleEngine interface."""
    def __init__(self, func: Callable[[Fact], Decision]):
        self.func = func

    def evaluate(self, fact: Fact) -> Decision:
        return self.func(fact)

def build_fact(launch: Launch, wind_bearing: float, wind_speed: float) -> Fact:
    return Fact(
        launch_direction=launch.direction,
        site_type=launch.site_type,
        wind_bearing=wind_bearing,
        wind_speed=wind_speed,
    )

def build_facts(site: Site, observation: WindObservation) -> List[Fact]:
    """One fact per launch, in launch order."""
    return [build_fact(launch, observation.bearing, observation.speed) for launch in site.launches]

def evaluate_fact(engine: RuleEngine, fact: Fact) -> Decision:
    """Hands a fact to the engine and returns its decision as is."""
    logger.debug(f"Evaluating fact: wind {fact.wind_bearing}° at {fact.wind_speed}")
    return engine.evaluate(fact)

def evaluate_site(engine: RuleEngine, site: Site, observation: WindObservation) -> List[Tuple[Launch, Decision]]:
    """Every launch of a site paired with the engine's decision for this wind."""
    return [(launch, evaluate_fact(engine, fact)) for launch, fact in zip(site.launches, build_facts(site, observation))]

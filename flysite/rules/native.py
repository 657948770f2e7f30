# flysite/rules/native.py
"""
Embedded rule engine. Scores how well the wind suits a launch:

- direction: 0 outside the launch arc, otherwise 100 at the arc centre
  falling linearly to 0 at either end;
- speed: 100 at the ideal speed, minus a fixed penalty per km/h off it;
- gusts above the limit make the launch unflyable outright. The sustained
  speed is held to the same limit.

The final score is the integer mean of both and the launch is flyable
when it is above zero.
"""
import logging
from typing import Tuple

from ..constants.compass import WindConstants
from ..site_model.data_models import DirectionRange, Launch
from ..site_model.direction_range import center_bearing, contains, span
from ..utils.angles import angular_distance
from .contract import Decision, Fact, Flyability, WindObservation, build_fact

logger = logging.getLogger(__name__)

class NativeRuleEngine:
    """In-process flyability evaluator."""

    def __init__(self,
                 ideal_speed_kmh: float = WindConstants.IDEAL_SPEED_KMH,
                 speed_penalty_per_kmh: float = WindConstants.SPEED_PENALTY_PER_KMH,
                 max_gust_kmh: float = WindConstants.MAX_GUST_KMH):
        self.ideal_speed_kmh = ideal_speed_kmh
        self.speed_penalty_per_kmh = speed_penalty_per_kmh
        self.max_gust_kmh = max_gust_kmh
        logger.info(f"NativeRuleEngine initialized. Ideal wind {ideal_speed_kmh} km/h, gust limit {max_gust_kmh} km/h.")

    @staticmethod
    def direction_score(direction: DirectionRange, wind_bearing: float) -> Tuple[bool, int]:
        """(in_range, score 0..100) for a wind bearing against a launch arc."""
        if not contains(direction, wind_bearing):
            return False, 0
        max_diff = span(direction) / 2.0
        if max_diff <= 0:
            # Zero-width arc: nothing to score against
            return True, 0
        diff = angular_distance(wind_bearing, center_bearing(direction))
        ratio = 1.0 - (diff / max_diff)
        return True, max(0, min(WindConstants.MAX_SCORE, int(ratio * 100)))

    def speed_score(self, wind_speed_ms: float) -> int:
        speed_kmh = wind_speed_ms * WindConstants.MS_TO_KMH
        score = WindConstants.MAX_SCORE - abs(speed_kmh - self.ideal_speed_kmh) * self.speed_penalty_per_kmh
        return int(max(0.0, score))

    def evaluate(self, fact: Fact) -> Decision:
        direction = fact.launch_direction
        speed_kmh = fact.wind_speed * WindConstants.MS_TO_KMH
        in_range, dir_score = self.direction_score(direction, fact.wind_bearing)
        spd_score = self.speed_score(fact.wind_speed)
        range_text = f"{direction.start_bearing:.0f}°-{direction.stop_bearing:.0f}°"

        if speed_kmh > self.max_gust_kmh:
            reasoning = f"Wind too strong: {speed_kmh:.1f} km/h (max {self.max_gust_kmh:.0f} km/h)"
            return self._decision(0, dir_score, spd_score, reasoning)

        if not in_range:
            reasoning = f"Wind direction {fact.wind_bearing:.0f}° not suitable for launch (range: {range_text})"
            return self._decision(0, dir_score, spd_score, reasoning)
        if dir_score == 0:
            reasoning = f"Wind {fact.wind_bearing:.0f}° at the edge of launch range {range_text}"
            return self._decision(0, dir_score, spd_score, reasoning)

        final = (dir_score + spd_score) // 2
        reasoning = (
            f"Wind speed: {speed_kmh:.1f} km/h (score: {spd_score}). "
            f"Wind {fact.wind_bearing:.0f}° within launch range {range_text} (score: {dir_score}). "
            f"Final score: {final}"
        )
        return self._decision(final, dir_score, spd_score, reasoning)

    def evaluate_observation(self, launch: Launch, observation: WindObservation) -> Decision:
        """Evaluates a launch against a full observation, applying the gust limit first."""
        if observation.gust is not None:
            gust_kmh = observation.gust * WindConstants.MS_TO_KMH
            if gust_kmh > self.max_gust_kmh:
                reasoning = f"Wind gusts too high: {gust_kmh:.1f} km/h (max {self.max_gust_kmh:.0f} km/h)"
                return self._decision(0, 0, 0, reasoning)
        return self.evaluate(build_fact(launch, observation.bearing, observation.speed))

    @staticmethod
    def _decision(score: int, dir_score: int, spd_score: int, reasoning: str) -> Decision:
        logger.debug(reasoning)
        return Decision(
            classification=Flyability.FLYABLE if score > 0 else Flyability.NOT_FLYABLE,
            payload={
                "score": score,
                "direction_score": dir_score,
                "speed_score": spd_score,
                "reasoning": reasoning,
            },
        )

# flysite/config.py
"""
Runtime configuration for site editing and rule evaluation.
"""
import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .constants.compass import GeoConstants
from .site_model.data_models import SiteType

@dataclass
class SiteModelConfig:
    """Configuration parameters for the site model and rule engines."""
    # Coincidence epsilon in degrees; pick it for the display zoom in use
    coincidence_tolerance_deg: float = GeoConstants.DEFAULT_COINCIDENCE_TOLERANCE_DEG
    default_coordinate: Tuple[float, float] = (GeoConstants.DEFAULT_LATITUDE, GeoConstants.DEFAULT_LONGITUDE)
    default_site_type: SiteType = SiteType.HANG
    default_direction: Tuple[float, float] = (0.0, 360.0)
    rule_engine_url: Optional[str] = None
    rule_engine_timeout: int = 10
    rule_engine_headers: dict = field(default_factory=lambda: {"Content-Type": "application/json"})

    def editor_options(self) -> dict:
        """Keyword arguments for SiteEditor built from this config."""
        return {
            "tolerance": self.coincidence_tolerance_deg,
            "fallback": self.default_coordinate,
            "default_direction": self.default_direction,
            "default_site_type": self.default_site_type,
        }

    @classmethod
    def from_env(cls, prefix: str = "FLYSITE_") -> "SiteModelConfig":
        """Builds a config, overriding defaults from environment variables."""
        config = cls()
        tolerance = os.environ.get(f"{prefix}COINCIDENCE_TOLERANCE")
        if tolerance:
            config.coincidence_tolerance_deg = float(tolerance)
        url = os.environ.get(f"{prefix}RULE_ENGINE_URL")
        if url:
            config.rule_engine_url = url
        timeout = os.environ.get(f"{prefix}RULE_ENGINE_TIMEOUT")
        if timeout:
            config.rule_engine_timeout = int(timeout)
        return config

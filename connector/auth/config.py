from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

logger = logging.getLogger(__name__)

_PRODUCTION_ENVIRONMENTS = ("prod", "production")


def _env_bool(name: str, default: bool = False) -> bool:
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    return raw in ("1", "true", "yes", "y", "on")


@dataclass(frozen=True)
class EndorsementConfig:
    environment: str  # development|staging|production|...

    # Channel development/debugging only. Never on in production.
    allow_unendorsed_channels: bool = False

    @property
    def is_production(self) -> bool:
        return self.environment in _PRODUCTION_ENVIRONMENTS


@lru_cache(maxsize=1)
def load_endorsement_config() -> EndorsementConfig:
    """
    Load endorsement configuration from environment variables.

    Recommended vars:
    - CONNECTOR_ENVIRONMENT=development|staging|production
    - ALLOW_UNENDORSED_CHANNELS=0|1

    ALLOW_UNENDORSED_CHANNELS is ignored when CONNECTOR_ENVIRONMENT is production.
    """
    environment = (os.getenv("CONNECTOR_ENVIRONMENT", "") or "development").strip().lower() or "development"
    allow_unendorsed = _env_bool("ALLOW_UNENDORSED_CHANNELS", False)

    if allow_unendorsed and environment in _PRODUCTION_ENVIRONMENTS:
        logger.warning("ALLOW_UNENDORSED_CHANNELS is set but ignored in %s; endorsements stay enforced", environment)
        allow_unendorsed = False
    elif allow_unendorsed:
        logger.warning("Channel endorsement checks are DISABLED (ALLOW_UNENDORSED_CHANNELS=1, env=%s)", environment)

    return EndorsementConfig(
        environment=environment,
        allow_unendorsed_channels=allow_unendorsed,
    )

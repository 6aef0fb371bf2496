"""Domain entities exposed by the application."""

from .booster_record import BoosterRecord, NotificationContext
from .deployment_mode import DeploymentMode

__all__ = [
    "BoosterRecord",
    "NotificationContext",
    "DeploymentMode",
]

"""Runtime services: telemetry and configuration."""

from . import config, telemetry

__all__ = ["config", "telemetry"]

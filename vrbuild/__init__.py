"""Production build orchestration for React VR projects."""

from .config import BuildConfig, config_from_environment
from .orchestrator import Orchestrator

__all__ = ["BuildConfig", "Orchestrator", "config_from_environment"]

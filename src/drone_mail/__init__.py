from .build.context import BuildContext
from .config import ConfigurationError, PluginSettings
from .pipeline.notify import NotifyResult, run_notification

__all__ = [
    "BuildContext",
    "ConfigurationError",
    "NotifyResult",
    "PluginSettings",
    "run_notification",
]

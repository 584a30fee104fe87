from .loader import ConfigValidationError, load_settings
from .settings import ScraperSettings

__all__ = ["ScraperSettings", "load_settings", "ConfigValidationError"]

"""Client library for the Finance Freedom personal-finance backend."""
from .container import AppContainer
from .config import Settings, settings

__version__ = "1.0.0"

__all__ = ["AppContainer", "Settings", "settings", "__version__"]

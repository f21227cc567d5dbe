from .app import create_app_from_env, create_application
from .settings import RelayMode, RelaySettings

__all__ = ["RelayMode", "RelaySettings", "create_app_from_env", "create_application"]

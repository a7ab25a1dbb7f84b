from .server import create_app, run_server
from .config import ServerConfig

__all__ = ["create_app", "run_server", "ServerConfig"]

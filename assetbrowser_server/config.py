from dataclasses import dataclass
from pathlib import Path
import os
import logging

logger = logging.getLogger(__name__)

ENV_PREFIX = "ASSET_BROWSER_"


def _env_bool(value: str) -> bool:
	return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ServerConfig:
	"""Configuration for the asset browser web server."""
	host: str = "0.0.0.0"
	port: int = 3000
	debug: bool = False
	assets_dir: Path = Path("/app/assets")
	max_preview_size: int = 10 * 1024 * 1024  # 10MB, 0 = unlimited

	def __post_init__(self):
		if isinstance(self.assets_dir, str):
			self.assets_dir = Path(self.assets_dir)

		# Fixed for the lifetime of the process
		self.assets_dir = self.assets_dir.expanduser().resolve()

		self.port = int(self.port)
		self.max_preview_size = int(self.max_preview_size)
		if self.max_preview_size < 0:
			raise ValueError("max_preview_size cannot be negative")

	@classmethod
	def from_env(cls, environ=None) -> 'ServerConfig':
		"""Build a config from ASSET_BROWSER_* / ASSETS_DIR environment variables."""
		environ = os.environ if environ is None else environ
		kwargs = {}

		if f"{ENV_PREFIX}HOST" in environ:
			kwargs["host"] = environ[f"{ENV_PREFIX}HOST"]
		if f"{ENV_PREFIX}PORT" in environ:
			kwargs["port"] = int(environ[f"{ENV_PREFIX}PORT"])
		if f"{ENV_PREFIX}DEBUG" in environ:
			kwargs["debug"] = _env_bool(environ[f"{ENV_PREFIX}DEBUG"])
		if f"{ENV_PREFIX}MAX_PREVIEW" in environ:
			kwargs["max_preview_size"] = int(environ[f"{ENV_PREFIX}MAX_PREVIEW"])
		if "ASSETS_DIR" in environ:
			kwargs["assets_dir"] = environ["ASSETS_DIR"]

		logger.debug(f"Config overrides from environment: {sorted(kwargs)}")
		return cls(**kwargs)

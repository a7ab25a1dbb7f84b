import logging
from pathlib import Path
from typing import Optional
from flask import Flask

from assetbrowser import AssetLibrary
from .config import ServerConfig

logger = logging.getLogger(__name__)


def create_app(config: Optional[ServerConfig] = None) -> Flask:
	"""Create and configure the Flask application."""
	if config is None:
		config = ServerConfig.from_env()

	server_dir = Path(__file__).parent
	template_dir = server_dir / "templates"

	app = Flask(__name__, template_folder=str(template_dir))

	app.json.sort_keys = False
	app.config["ASSET_BROWSER_CONFIG"] = config
	app.config["ASSET_LIBRARY"] = AssetLibrary(
		str(config.assets_dir),
		max_preview_size=config.max_preview_size
	)

	from .routes.views import views_bp
	from .routes.api import api_bp

	app.register_blueprint(views_bp)
	app.register_blueprint(api_bp, url_prefix="/api")

	logger.info(f"Asset browser initialized (assets: {config.assets_dir})")

	return app


def run_server(config: Optional[ServerConfig] = None):
	"""Run the asset browser web server."""
	if config is None:
		config = ServerConfig.from_env()

	app = create_app(config)

	logger.info(f"Asset browser running on http://{config.host}:{config.port}")
	logger.info(f"Assets directory: {config.assets_dir}")

	app.run(
		host=config.host,
		port=config.port,
		debug=config.debug,
		threaded=True
	)

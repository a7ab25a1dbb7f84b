import logging
from flask import Blueprint, render_template, current_app, send_from_directory

logger = logging.getLogger(__name__)

views_bp = Blueprint("views", __name__)


@views_bp.route("/")
def home():
	"""Browser UI."""
	config = current_app.config["ASSET_BROWSER_CONFIG"]
	return render_template("index.html", assets_dir=config.assets_dir.name or "/")


@views_bp.route("/assets/<path:filename>")
def asset_file(filename: str):
	"""Serve a raw file from the asset root (images, audio, downloads)."""
	library = current_app.config["ASSET_LIBRARY"]
	# send_from_directory rejects paths that escape the root with a 404
	return send_from_directory(library.root, filename)

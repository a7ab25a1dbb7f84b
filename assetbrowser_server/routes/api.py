import logging
from flask import Blueprint, request, jsonify, current_app

from assetbrowser import AssetLibrary
from assetbrowser.errors import AssetBrowserError, InvalidQueryError

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)

MIN_QUERY_LENGTH = 2


def get_library() -> AssetLibrary:
	"""Get the asset library bound to this app."""
	return current_app.config["ASSET_LIBRARY"]


@api_bp.errorhandler(AssetBrowserError)
def handle_asset_error(error: AssetBrowserError):
	return jsonify(error.to_dict()), error.status


# ============ Browsing ============

@api_bp.route("/browse", methods=["GET"])
def browse():
	"""List one directory of the asset tree."""
	requested = request.args.get("path", "")

	try:
		current_path, path_parts, listing = get_library().browse(requested)
	except AssetBrowserError:
		raise
	except Exception:
		logger.exception("Error browsing directory")
		return jsonify({"error": "Internal server error", "kind": "ReadError"}), 500

	return jsonify({
		"currentPath": current_path,
		"pathParts": path_parts,
		**listing.to_dict()
	})


# ============ Search ============

@api_bp.route("/search", methods=["POST"])
def search():
	"""Recursive name/tag search from the asset root."""
	data = request.get_json(silent=True) or {}
	query = data.get("query") if isinstance(data, dict) else None

	if not isinstance(query, str) or len(query) < MIN_QUERY_LENGTH:
		raise InvalidQueryError(f"Search query must be at least {MIN_QUERY_LENGTH} characters")

	try:
		results = get_library().search(query)
	except AssetBrowserError:
		raise
	except Exception:
		logger.exception("Error searching files")
		return jsonify({"error": "Search failed", "kind": "ReadError"}), 500

	logger.info(f"Search {query!r}: {len(results)} results")

	return jsonify({
		"query": query,
		"results": [r.to_dict() for r in results],
		"count": len(results)
	})


# ============ File Content ============

@api_bp.route("/file-content", methods=["GET"])
def file_content():
	"""Return the text of a previewable file."""
	requested = request.args.get("path", "")

	try:
		content = get_library().read_text(requested)
	except AssetBrowserError:
		raise
	except Exception:
		logger.exception("Error reading file content")
		return jsonify({"error": "Failed to read file content", "kind": "ReadError"}), 500

	return jsonify(content.to_dict())

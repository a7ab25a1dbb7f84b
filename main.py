import argparse
import logging
from dataclasses import replace

from assetbrowser.logger import setup_logging
from assetbrowser_server.config import ServerConfig
from assetbrowser_server.server import run_server


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(description="Read-only web browser for an asset directory")
	parser.add_argument("--assets", "-a", default=None, help="Asset directory to serve (default: $ASSETS_DIR or /app/assets)")
	parser.add_argument("--host", default=None, help="Server host")
	parser.add_argument("--port", "-p", type=int, default=None, help="Server port")
	parser.add_argument("--max-preview", type=int, default=None, help="Largest text preview in bytes (0 = unlimited)")
	parser.add_argument("--debug", action="store_true", help="Enable debug logging and the Flask debugger")
	return parser


def config_from_args(args: argparse.Namespace) -> ServerConfig:
	"""Environment first, then any command line overrides."""
	config = ServerConfig.from_env()
	overrides = {}
	if args.assets is not None:
		overrides["assets_dir"] = args.assets
	if args.host is not None:
		overrides["host"] = args.host
	if args.port is not None:
		overrides["port"] = args.port
	if args.max_preview is not None:
		overrides["max_preview_size"] = args.max_preview
	if args.debug:
		overrides["debug"] = True
	return replace(config, **overrides) if overrides else config


def main():
	args = build_parser().parse_args()

	setup_logging(level=logging.DEBUG if args.debug else logging.INFO, quiet_requests=not args.debug)

	try:
		config = config_from_args(args)
		if not config.assets_dir.is_dir():
			logging.warning(f"Assets directory not found: {config.assets_dir}")
		run_server(config)
	except KeyboardInterrupt:
		logging.info("Shutting down...")
	except Exception as e:
		logging.critical(f"Fatal error: {e}", exc_info=True)


if __name__ == "__main__":
	main()

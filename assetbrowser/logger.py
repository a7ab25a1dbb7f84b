import logging, sys

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"

_handler = None


def setup_logging(level = logging.INFO, quiet_requests: bool = False):
	"""Send all log records to stdout. Safe to call more than once."""
	global _handler

	root_logger = logging.getLogger()
	root_logger.setLevel(level)

	if _handler is None:
		_handler = logging.StreamHandler(sys.stdout)
		_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
	if _handler not in root_logger.handlers:
		root_logger.addHandler(_handler)

	# Per-request access lines from the dev server
	if quiet_requests:
		logging.getLogger("werkzeug").setLevel(logging.WARNING)

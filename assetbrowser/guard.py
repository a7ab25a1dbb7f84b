import os
import logging
from typing import Optional

from .errors import AccessDeniedError

logger = logging.getLogger(__name__)


class PathGuard:
	"""
	Confines user supplied relative paths to a single root directory.

	The check is purely lexical: ``..`` and ``.`` segments are collapsed by
	the join, and nothing on disk is touched until the result is known to
	be inside the root.
	"""

	def __init__(self, root: str):
		self.root = os.path.normpath(os.path.abspath(root))
		# "/" must not become "//" in the prefix check
		self._prefix = self.root if self.root.endswith(os.sep) else self.root + os.sep

	def contains(self, path: str) -> bool:
		return path == self.root or path.startswith(self._prefix)

	def resolve(self, requested: Optional[str]) -> str:
		"""Return the absolute path for ``requested`` or raise AccessDeniedError."""
		if not requested:
			return self.root

		if "\x00" in requested:
			logger.warning(f"Rejected path containing NUL byte: {requested!r}")
			raise AccessDeniedError()

		if os.path.isabs(requested) or requested.startswith(("/", "\\")):
			logger.warning(f"Rejected absolute path: {requested!r}")
			raise AccessDeniedError()

		full_path = os.path.normpath(os.path.join(self.root, requested))
		if not self.contains(full_path):
			logger.warning(f"Rejected path outside asset root: {requested!r}")
			raise AccessDeniedError()
		return full_path

	def relative(self, path: str) -> str:
		"""Forward-slash path of ``path`` relative to the root ("" for the root itself)."""
		rel = os.path.relpath(path, self.root)
		if rel == os.curdir:
			return ""
		return rel.replace(os.sep, "/")

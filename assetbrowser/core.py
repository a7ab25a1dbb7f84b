import os
import logging
from pathlib import Path
from typing import Optional, List, Tuple

from .errors import ReadError
from .guard import PathGuard
from .listing import list_directory
from .models import DirectoryListing, FileContent, SearchResult
from .reader import read_text
from .search import search_files

logger = logging.getLogger(__name__)


class AssetLibrary:
	"""Read-only view over one asset directory."""

	def __init__(self, root: str, max_preview_size: Optional[int] = None):
		"""
		:param root: Directory every operation is confined to.
		:param max_preview_size: Largest file (bytes) read_text will return; None or 0 for no limit.
		"""
		self.guard = PathGuard(str(Path(root).expanduser()))
		self.max_preview_size = max_preview_size or None

		if not os.path.isdir(self.root):
			logger.warning(f"Asset directory does not exist (yet): {self.root}")

	@property
	def root(self) -> str:
		return self.guard.root

	@staticmethod
	def path_parts(requested: Optional[str]) -> List[str]:
		if not requested:
			return []
		return [part for part in requested.replace("\\", "/").split("/") if part]

	def browse(self, requested: Optional[str] = None) -> Tuple[str, List[str], DirectoryListing]:
		"""Return (current_path, path_parts, listing) for a relative directory path."""
		full_path = self.guard.resolve(requested)
		listing = list_directory(full_path, self.guard)
		current_path = requested or ""
		return current_path, self.path_parts(current_path), listing

	def search(self, term: str, requested: Optional[str] = None) -> List[SearchResult]:
		start = self.guard.resolve(requested)
		try:
			return search_files(term, self.guard, start)
		except RecursionError:
			logger.exception(f"Directory tree too deep while searching for {term!r}")
			raise ReadError("Search failed")

	def read_text(self, requested: Optional[str]) -> FileContent:
		full_path = self.guard.resolve(requested)
		return read_text(full_path, max_size=self.max_preview_size)

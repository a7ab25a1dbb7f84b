"""
Recursive name/tag search over the asset tree.

Symlinked directories are followed, but every directory is keyed by its
real path and entered at most once per call, so link cycles terminate and
a directory reachable through several links is reported once.
"""

import os
import logging
from typing import List, Optional, Set

from .classifier import classify, file_extension, mime_type
from .guard import PathGuard
from .listing import sorted_children
from .models import SearchResult, DIRECTORY
from .tags import extract_tags

logger = logging.getLogger(__name__)


def matches(term: str, name: str, tags: List[str]) -> bool:
	"""Case-insensitive substring match on the name or any (lowercase) tag."""
	needle = term.lower()
	if needle in name.lower():
		return True
	return any(needle in tag for tag in tags)


def search_files(term: str, guard: PathGuard, start: Optional[str] = None) -> List[SearchResult]:
	"""Depth-first, pre-order search starting at ``start`` (the root by default)."""
	needle = term.lower()
	results: List[SearchResult] = []
	visited: Set[str] = set()

	def walk(directory: str):
		try:
			real_path = os.path.realpath(directory)
		except OSError as e:
			logger.warning(f"Cannot resolve {directory}: {e}")
			return
		if real_path in visited:
			return
		visited.add(real_path)

		try:
			children = sorted_children(directory)
		except OSError as e:
			logger.warning(f"Error searching in directory {directory}: {e}")
			return

		parent_path = guard.relative(directory)

		for child in children:
			try:
				is_dir = child.is_dir()
				st = child.stat()
			except OSError as e:
				logger.warning(f"Skipping {child.path}: {e}")
				continue

			if is_dir:
				if needle in child.name.lower():
					results.append(SearchResult(
						name=child.name,
						path=guard.relative(child.path),
						type=DIRECTORY,
						parent_path=parent_path,
					))
				walk(child.path)
				continue

			tags = extract_tags(child.name)
			if not matches(needle, child.name, tags):
				continue

			results.append(SearchResult(
				name=child.name,
				path=guard.relative(child.path),
				type=classify(child.name),
				modified=st.st_mtime,
				size=st.st_size,
				extension=file_extension(child.name),
				tags=tags,
				mime_type=mime_type(child.name),
				parent_path=parent_path,
			))

	walk(start if start is not None else guard.root)
	logger.debug(f"Search for {term!r} visited {len(visited)} directories, {len(results)} hits")
	return results

import os
import stat
import logging
from typing import List

from .classifier import classify, file_extension, mime_type
from .errors import NotFoundError, NotDirectoryError, ReadError
from .guard import PathGuard
from .models import Entry, DirectoryListing, DIRECTORY
from .tags import extract_tags

logger = logging.getLogger(__name__)


def sorted_children(path: str) -> List[os.DirEntry]:
	"""Immediate children of ``path``, ordered case-insensitively by name."""
	with os.scandir(path) as it:
		children = list(it)
	children.sort(key=lambda e: (e.name.lower(), e.name))
	return children


def directory_entry(name: str, path: str, guard: PathGuard, st: os.stat_result) -> Entry:
	return Entry(
		name=name,
		path=guard.relative(path),
		type=DIRECTORY,
		modified=st.st_mtime,
	)


def file_entry(name: str, path: str, guard: PathGuard, st: os.stat_result) -> Entry:
	return Entry(
		name=name,
		path=guard.relative(path),
		type=classify(name),
		modified=st.st_mtime,
		size=st.st_size,
		extension=file_extension(name),
		tags=extract_tags(name),
		mime_type=mime_type(name),
	)


def list_directory(path: str, guard: PathGuard) -> DirectoryListing:
	"""
	List the immediate children of a confined directory.

	Raises NotFoundError / NotDirectoryError when ``path`` is missing or not
	a directory. Children that cannot be stat'ed are skipped; if the
	directory cannot be enumerated at all an empty listing is returned.
	"""
	try:
		st = os.stat(path)
	except (FileNotFoundError, NotADirectoryError):
		raise NotFoundError("Directory not found")
	except OSError as e:
		logger.error(f"Cannot stat {path}: {e}")
		raise ReadError()

	if not stat.S_ISDIR(st.st_mode):
		raise NotDirectoryError()

	listing = DirectoryListing()

	try:
		children = sorted_children(path)
	except OSError as e:
		logger.error(f"Error reading directory {path}: {e}")
		return listing

	for child in children:
		try:
			child_stat = child.stat()
			is_dir = child.is_dir()
		except OSError as e:
			logger.warning(f"Skipping {child.path}: {e}")
			continue

		if is_dir:
			listing.directories.append(directory_entry(child.name, child.path, guard, child_stat))
		else:
			listing.files.append(file_entry(child.name, child.path, guard, child_stat))

	logger.debug(f"Listed {path}: {len(listing.directories)} directories, {len(listing.files)} files")
	return listing

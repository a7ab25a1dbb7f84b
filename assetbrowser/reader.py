import os
import stat
import logging
from typing import Optional

from .classifier import file_extension
from .errors import NotFoundError, IsDirectoryError, UnsupportedTypeError, FileTooLargeError, ReadError
from .models import FileContent

logger = logging.getLogger(__name__)

TEXT_PREVIEW_EXTENSIONS = frozenset({
	".txt", ".md", ".json", ".xml", ".lua", ".js", ".py",
	".c", ".cpp", ".h", ".css", ".html", ".yaml", ".yml",
})

ENCODING_LABEL = "utf8"


def read_text(path: str, max_size: Optional[int] = None) -> FileContent:
	"""
	Return the full text of a confined file for preview.

	Checks run in order: exists, not a directory, extension allowed, size
	within ``max_size`` (if given). Invalid UTF-8 is replaced rather than
	rejected.
	"""
	try:
		st = os.stat(path)
	except (FileNotFoundError, NotADirectoryError):
		raise NotFoundError("File not found")
	except OSError as e:
		logger.error(f"Cannot stat {path}: {e}")
		raise ReadError("Failed to read file content")

	if stat.S_ISDIR(st.st_mode):
		raise IsDirectoryError()

	ext = file_extension(path)
	if ext not in TEXT_PREVIEW_EXTENSIONS:
		raise UnsupportedTypeError()

	if max_size and st.st_size > max_size:
		raise FileTooLargeError(f"File is too large to preview ({st.st_size} bytes, limit {max_size})")

	try:
		with open(path, 'r', encoding='utf-8', errors='replace', newline='') as f:
			content = f.read()
	except OSError as e:
		logger.error(f"Error reading file content {path}: {e}")
		raise ReadError("Failed to read file content")

	return FileContent(content=content, extension=ext, size=st.st_size, encoding=ENCODING_LABEL)

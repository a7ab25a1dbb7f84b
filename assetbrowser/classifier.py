"""
File classification by extension.

The tables overlap (``.ogg`` is both audio and video), so lookup walks
KIND_TABLES in order and the first table containing the extension wins.
"""

import mimetypes
import os
from typing import Dict, FrozenSet, Tuple

IMAGE = "image"
AUDIO = "audio"
VIDEO = "video"
ARCHIVE = "archive"
GAME = "game"
TEXT = "text"
UNKNOWN = "unknown"

KIND_TABLES: Tuple[Tuple[str, FrozenSet[str]], ...] = (
	(IMAGE, frozenset({".jpg", ".jpeg", ".png", ".gif", ".bmp", ".svg", ".webp", ".tiff", ".ico"})),
	(AUDIO, frozenset({".mp3", ".wav", ".ogg", ".m4a", ".aac", ".flac", ".wma"})),
	(VIDEO, frozenset({".mp4", ".webm", ".ogg", ".avi", ".mov", ".wmv", ".flv"})),
	(ARCHIVE, frozenset({".zip", ".rar", ".7z", ".tar", ".gz", ".bz2"})),
	(GAME, frozenset({".lua", ".json", ".xml", ".tmx", ".tsx", ".atlas", ".fnt"})),
	(TEXT, frozenset({".txt", ".md", ".js", ".py", ".c", ".cpp", ".h", ".css", ".html", ".yaml", ".yml"})),
)

KINDS = tuple(kind for kind, _ in KIND_TABLES) + (UNKNOWN,)

DEFAULT_MIME_TYPE = "application/octet-stream"

# Formats the platform mimetypes registry may not know about
EXTRA_MIME_TYPES: Dict[str, str] = {
	".md": "text/markdown",
	".yaml": "text/yaml",
	".yml": "text/yaml",
	".lua": "text/x-lua",
	".tmx": "application/x-tmx+xml",
	".atlas": "text/plain",
	".fnt": "text/plain",
	".7z": "application/x-7z-compressed",
	".rar": "application/vnd.rar",
	".flac": "audio/flac",
	".m4a": "audio/mp4",
	".webp": "image/webp",
}


def file_extension(filename: str) -> str:
	"""Lowercased final extension with its leading dot, or "" if there is none."""
	return os.path.splitext(filename)[1].lower()


def classify(filename: str) -> str:
	ext = file_extension(filename)
	for kind, extensions in KIND_TABLES:
		if ext in extensions:
			return kind
	return UNKNOWN


def mime_type(filename: str) -> str:
	ext = file_extension(filename)
	if ext in EXTRA_MIME_TYPES:
		return EXTRA_MIME_TYPES[ext]
	guessed, _ = mimetypes.guess_type(f"file{ext}", strict=False)
	return guessed or DEFAULT_MIME_TYPE

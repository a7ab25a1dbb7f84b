from .core import AssetLibrary
from .classifier import classify, mime_type, KINDS
from .tags import extract_tags
from .guard import PathGuard
from .errors import (
	AssetBrowserError, AccessDeniedError, NotFoundError, NotDirectoryError,
	IsDirectoryError, UnsupportedTypeError, InvalidQueryError, FileTooLargeError, ReadError
)

__all__ = [
	"AssetLibrary", "PathGuard", "classify", "mime_type", "KINDS", "extract_tags",
	"AssetBrowserError", "AccessDeniedError", "NotFoundError", "NotDirectoryError",
	"IsDirectoryError", "UnsupportedTypeError", "InvalidQueryError", "FileTooLargeError", "ReadError",
]

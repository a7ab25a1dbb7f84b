"""
Asset Browser error taxonomy

Every failure a caller can observe carries a stable ``kind`` and the HTTP
status the API layer answers with.
"""


class AssetBrowserError(Exception):
	"""Base class for failures surfaced to callers."""
	kind = "Error"
	status = 500
	default_message = "Internal server error"

	def __init__(self, message: str = None):
		self.message = message or self.default_message
		super().__init__(self.message)

	def to_dict(self) -> dict:
		return {"error": self.message, "kind": self.kind}


class AccessDeniedError(AssetBrowserError):
	"""Requested path escapes the asset root."""
	kind = "AccessDenied"
	status = 403
	default_message = "Access denied"


class NotFoundError(AssetBrowserError):
	kind = "NotFound"
	status = 404
	default_message = "Path not found"


class NotDirectoryError(AssetBrowserError):
	kind = "NotADirectory"
	status = 400
	default_message = "Path is not a directory"


class IsDirectoryError(AssetBrowserError):
	kind = "IsADirectory"
	status = 400
	default_message = "Path is a directory, not a file"


class UnsupportedTypeError(AssetBrowserError):
	"""Extension is not on the text preview allow-list."""
	kind = "UnsupportedType"
	status = 400
	default_message = "File type not supported for content preview"


class InvalidQueryError(AssetBrowserError):
	kind = "InvalidQuery"
	status = 400
	default_message = "Search query must be at least 2 characters"


class FileTooLargeError(AssetBrowserError):
	kind = "FileTooLarge"
	status = 413
	default_message = "File is too large to preview"


class ReadError(AssetBrowserError):
	"""Filesystem enumeration, stat or read failure."""
	kind = "ReadError"
	status = 500
	default_message = "Failed to read from the asset directory"

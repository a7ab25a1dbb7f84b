from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional, Dict, Any

DIRECTORY = "directory"


def format_mtime(mtime: float) -> str:
	"""UTC ISO-8601 with millisecond precision, e.g. 2024-01-31T12:00:00.000Z"""
	stamp = datetime.fromtimestamp(mtime, tz=timezone.utc)
	return stamp.strftime("%Y-%m-%dT%H:%M:%S.") + f"{stamp.microsecond // 1000:03d}Z"


@dataclass
class Entry:
	"""One child of a directory, as shown in a listing."""
	name: str
	path: str                # Relative to the asset root, forward slashes
	type: str                # "directory" or a file kind from the classifier
	modified: Optional[float] = None

	# Files only
	size: Optional[int] = None
	extension: Optional[str] = None
	tags: Optional[List[str]] = None
	mime_type: Optional[str] = None

	@property
	def is_directory(self) -> bool:
		return self.type == DIRECTORY

	def to_dict(self) -> Dict[str, Any]:
		data = {
			"name": self.name,
			"path": self.path,
			"type": self.type,
		}
		if self.size is not None:
			data["size"] = self.size
		if self.extension is not None:
			data["extension"] = self.extension
		if self.modified is not None:
			data["modified"] = format_mtime(self.modified)
		if self.tags is not None:
			data["tags"] = list(self.tags)
		if self.mime_type is not None:
			data["mimeType"] = self.mime_type
		return data


@dataclass
class SearchResult(Entry):
	"""A search hit; parent_path is the relative path of the containing directory."""
	parent_path: str = ""

	def to_dict(self) -> Dict[str, Any]:
		data = super().to_dict()
		data["parent_path"] = self.parent_path
		return data


@dataclass
class DirectoryListing:
	directories: List[Entry] = field(default_factory=list)
	files: List[Entry] = field(default_factory=list)

	def to_dict(self) -> Dict[str, Any]:
		return {
			"directories": [d.to_dict() for d in self.directories],
			"files": [f.to_dict() for f in self.files],
		}


@dataclass
class FileContent:
	content: str
	extension: str
	size: int
	encoding: str = "utf8"

	def to_dict(self) -> Dict[str, Any]:
		return {
			"content": self.content,
			"extension": self.extension,
			"size": self.size,
			"encoding": self.encoding,
		}

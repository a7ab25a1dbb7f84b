import os
import re
from typing import List

TAG_SEPARATORS = re.compile(r"[_\-\s.]+")
DIGITS_ONLY = re.compile(r"[0-9]+")
MIN_TAG_LENGTH = 3


def extract_tags(filename: str) -> List[str]:
	"""
	Split a filename (minus its extension) into lowercase search tokens.

	"Boss_Fight-02.lua" -> ["boss", "fight"]. Short tokens and pure numbers
	are dropped; order and duplicates are kept.
	"""
	stem = os.path.splitext(filename)[0].lower()
	return [
		token for token in TAG_SEPARATORS.split(stem)
		if len(token) >= MIN_TAG_LENGTH and not DIGITS_ONLY.fullmatch(token)
	]

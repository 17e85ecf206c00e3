#!/usr/bin/env python3
"""
Filename sanitizing helpers.
"""

# Standard Library
import os

MAX_NAME_CHARS = 255
ALLOWED_CHARS = frozenset(
	"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
)

#============================================


def sanitize_name(name: str) -> str:
	"""
	Sanitize a filename stem so it is safe on common filesystems.

	Path separators and dots are replaced too, so the result can never
	climb out of its folder.

	Args:
		name: Filename without extension.

	Returns:
		Cleaned stem, never empty.
	"""
	result_chars: list[str] = []
	for ch in name:
		if ch in ALLOWED_CHARS:
			result_chars.append(ch)
		else:
			result_chars.append("-")
	cleaned = "".join(result_chars)
	while "--" in cleaned:
		cleaned = cleaned.replace("--", "-")
	while "__" in cleaned:
		cleaned = cleaned.replace("__", "_")
	cleaned = cleaned.strip("-_")
	# strip again so a cut inside a run cannot leave a trailing separator
	cleaned = cleaned[:MAX_NAME_CHARS].rstrip("-_")
	return cleaned or "file"


#============================================


def sanitize_filename(filename: str) -> str:
	"""
	Sanitize the stem of a filename and keep its extension.

	Args:
		filename: Filename such as "my file!.jpg".

	Returns:
		Filename such as "my-file.jpg".
	"""
	stem, ext = os.path.splitext(filename)
	return f"{sanitize_name(stem)}{ext}"

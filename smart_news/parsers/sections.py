"""Section splitting and line-grammar stages shared by the response parsers.

Parsing is done in two passes: the section splitter cuts the response into
regions on literal markers, then the line-grammar helpers pull fields out of
a single region. None of these helpers raise on malformed input.
"""

import re

_BULLET_RE = re.compile(r'^(?:[-*•]|\d+[.)])\s+')


def normalize_newlines(text: str) -> str:
	return text.replace('\r\n', '\n').replace('\r', '\n')


def split_section(text: str, marker: str) -> tuple[str, str | None]:
	"""Split ``text`` on the first ``marker``; the second part is None when the marker is absent."""
	if marker not in text:
		return text, None
	before, after = text.split(marker, 1)
	return before, after


def slice_between(text: str, start_marker: str, end_markers: tuple[str, ...] = ()) -> str | None:
	"""Return the text after ``start_marker`` up to the nearest of ``end_markers`` (or the end)."""
	_, region = split_section(text, start_marker)
	if region is None:
		return None

	for end_marker in end_markers:
		region, _ = split_section(region, end_marker)

	return region


def split_key_value(line: str) -> tuple[str, str] | None:
	# First colon only, so URLs in the value survive
	if ':' not in line:
		return None
	key, value = line.split(':', 1)
	return key.strip(), value.strip()


def find_field(text: str, key: str) -> str | None:
	"""Value of the first line that starts with ``key:``; empty values count as missing."""
	match = re.search(rf'^[ \t]*{re.escape(key)}:(.*)$', text, re.MULTILINE)
	if not match:
		return None
	return match.group(1).strip() or None


def find_trailing_field(text: str, key: str) -> str | None:
	"""Everything from the first ``key:`` line to the end of ``text``, trimmed."""
	match = re.search(rf'^[ \t]*{re.escape(key)}:(.*)', text, re.MULTILINE | re.DOTALL)
	if not match:
		return None
	value = match.group(1).strip()
	return value or None


def _clean_label(label: str) -> str:
	return label.strip().strip('*_').strip()


def parse_labeled_lines(region: str) -> list[tuple[str, str]]:
	"""Parse ``<label>: <text>`` lines in order, skipping blank and non-matching lines.

	The first colon must be followed by whitespace, so bare URLs such as
	``https://example.com/ref`` are not mistaken for entries.
	"""
	entries = []

	for raw_line in region.split('\n'):
		line = _BULLET_RE.sub('', raw_line.strip())
		if ':' not in line:
			continue

		label, rest = line.split(':', 1)
		if rest.startswith('**'):
			# "**Label:** text" leaves the closing emphasis on the value
			rest = rest[2:]
		if not rest[:1].isspace():
			continue

		label, text = _clean_label(label), rest.strip()
		if not label or not text:
			continue

		entries.append((label, text))

	return entries

from smart_news.models import ResultRecord
from smart_news.prompts.grammar import (
	REQUIRED_RESULT_FIELDS,
	RESULT_FIELDS,
	RESULT_MARKER,
	SUGGESTIONS_MARKER,
)
from smart_news.utils.logger import logger

from .sections import normalize_newlines, split_key_value, split_section

FALLBACK_MIN_LENGTH = 50
FALLBACK_LINK = '#'
FALLBACK_SOURCE = 'AI Search Engine'


def parse_results(
	body: str, query: str = '', fallback_min_length: int = FALLBACK_MIN_LENGTH
) -> tuple[list[ResultRecord], list[str]]:
	"""Parse the flat result grammar into records and suggestions.

	Incomplete result blocks are dropped. When no block survives but the
	response still carries a substantial amount of prose, that prose is
	returned as a single fallback record so callers always have something to
	display. Never raises on malformed input.
	"""
	body = normalize_newlines(body)
	results_region, suggestions_region = split_section(body, SUGGESTIONS_MARKER)

	records = []
	for index, block in enumerate(_split_result_blocks(results_region)):
		record = _parse_result_block(block)
		if record is None:
			logger.debug(f'Dropping incomplete result block #{index + 1}')
			continue
		records.append(record)

	if not records:
		fallback = _fallback_record(results_region, query, fallback_min_length)
		if fallback is not None:
			records.append(fallback)

	suggestions = parse_suggestions(suggestions_region) if suggestions_region is not None else []

	return records, suggestions


def parse_suggestions(region: str) -> list[str]:
	return [item.strip() for item in region.split(',') if item.strip()]


def _split_result_blocks(region: str) -> list[str]:
	# The first segment is whatever preamble precedes the first marker
	return region.split(RESULT_MARKER)[1:]


def _parse_result_block(block: str) -> ResultRecord | None:
	fields: dict[str, str] = {}

	for line in block.split('\n'):
		pair = split_key_value(line)
		if pair is None:
			continue

		key, value = pair
		if key in RESULT_FIELDS:
			fields[key] = value

	if not all(fields.get(name) for name in REQUIRED_RESULT_FIELDS):
		return None

	return ResultRecord(
		title=fields['title'],
		link=fields['link'],
		source=fields['source'],
		description=fields['description'],
		image_url=fields.get('imageUrl') or None,
	)


def _fallback_record(results_region: str, query: str, min_length: int) -> ResultRecord | None:
	text = results_region.strip()
	if len(text) <= min_length:
		return None

	logger.warning(f'Response did not follow the result format, returning it as a single record ({len(text)} chars)')

	return ResultRecord(
		title=f'Search results for "{query}"',
		link=FALLBACK_LINK,
		source=FALLBACK_SOURCE,
		description=text,
	)

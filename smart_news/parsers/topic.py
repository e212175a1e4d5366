from smart_news.models import Citation, ComparisonBlock, ComparisonPoint, KeyPoint, TopicReport
from smart_news.prompts.grammar import (
	COMPARISON_MARKER,
	KEY_POINTS_MARKER,
	NULL_COMPARISON,
	POINT_MARKER,
)
from smart_news.utils.logger import logger

from .sections import (
	find_field,
	find_trailing_field,
	normalize_newlines,
	parse_labeled_lines,
	slice_between,
	split_section,
)

NO_SUMMARY = 'No summary available.'


def parse_topic_report(body: str, citations: list[Citation], query: str = '') -> TopicReport:
	"""Parse the three-level topic report grammar.

	The document is split into a header (title, summary), a key-points section
	and a comparison section. Each level is parsed on its own; a malformed
	inner unit is dropped without affecting the rest of the report.
	"""
	body = normalize_newlines(body)
	header, _ = split_section(body, KEY_POINTS_MARKER)
	header, _ = split_section(header, COMPARISON_MARKER)

	title = find_field(header, 'title') or f'Analysis of "{query}"'
	summary = find_trailing_field(header, 'summary') or NO_SUMMARY

	key_points_region = slice_between(body, KEY_POINTS_MARKER, (COMPARISON_MARKER,))
	key_points = []
	if key_points_region is not None:
		key_points = [KeyPoint(title=label, description=text) for label, text in parse_labeled_lines(key_points_region)]

	_, comparison_region = split_section(body, COMPARISON_MARKER)
	comparison = parse_comparison(comparison_region) if comparison_region is not None else None

	return TopicReport(
		title=title,
		summary=summary,
		key_points=key_points,
		comparison=comparison,
		citations=list(citations),
	)


def parse_comparison(region: str) -> ComparisonBlock | None:
	if NULL_COMPARISON in region:
		return None

	header, *blocks = region.split(POINT_MARKER)

	topic_a = find_field(header, 'topicA')
	topic_b = find_field(header, 'topicB')
	if not topic_a or not topic_b:
		if region.strip():
			logger.debug('Dropping comparison section without both topics')
		return None

	points = []
	for index, block in enumerate(blocks):
		point = _parse_point(block)
		if point is None:
			logger.debug(f'Dropping incomplete comparison point #{index + 1}')
			continue
		points.append(point)

	return ComparisonBlock(topic_a=topic_a, topic_b=topic_b, points=points)


def _parse_point(block: str) -> ComparisonPoint | None:
	aspect = find_field(block, 'aspect')
	analysis_a = find_field(block, 'analysisA')
	analysis_b = find_field(block, 'analysisB')

	if not (aspect and analysis_a and analysis_b):
		return None

	return ComparisonPoint(aspect=aspect, analysis_a=analysis_a, analysis_b=analysis_b)

from smart_news.models import Citation, ComparisonPoint, KeyPoint
from smart_news.parsers import parse_comparison, parse_topic_report
from smart_news.parsers.topic import NO_SUMMARY

CITATIONS = [
	Citation(uri='https://a.test/1', title='First source'),
	Citation(uri='https://b.test/2', title='Second source'),
]

REPORT_WITH_COMPARISON = """title: Solar vs Wind
summary: Both technologies are growing fast.
Solar leads in new capacity.
--- KEY POINTS ---
Cost: Solar module prices fell sharply.

- Storage: Batteries smooth out supply.
not a key point line
**Policy**: Subsidies shape adoption.
--- COMPARISON ---
topicA: Solar power
topicB: Wind power
-- Point --
aspect: Cost
analysisA: Cheaper per panel
analysisB: Cheaper per MWh offshore
-- Point --
aspect: Land use
analysisA: Rooftops available
analysisB: Needs open space
"""


def test_full_report():
	report = parse_topic_report(REPORT_WITH_COMPARISON, CITATIONS, query='solar')

	assert report.title == 'Solar vs Wind'
	assert report.summary == 'Both technologies are growing fast.\nSolar leads in new capacity.'
	assert report.key_points == [
		KeyPoint(title='Cost', description='Solar module prices fell sharply.'),
		KeyPoint(title='Storage', description='Batteries smooth out supply.'),
		KeyPoint(title='Policy', description='Subsidies shape adoption.'),
	]
	assert report.citations == CITATIONS


def test_comparison_points_in_source_order():
	report = parse_topic_report(REPORT_WITH_COMPARISON, [], query='solar')

	assert report.comparison is not None
	assert report.comparison.topic_a == 'Solar power'
	assert report.comparison.topic_b == 'Wind power'
	assert report.comparison.points == [
		ComparisonPoint(aspect='Cost', analysis_a='Cheaper per panel', analysis_b='Cheaper per MWh offshore'),
		ComparisonPoint(aspect='Land use', analysis_a='Rooftops available', analysis_b='Needs open space'),
	]


def test_null_comparison():
	body = 'title: T\nsummary: S\n--- KEY POINTS ---\nA: b\n--- COMPARISON ---\ncomparison: null\n'

	report = parse_topic_report(body, [])

	assert report.comparison is None
	assert report.key_points == [KeyPoint(title='A', description='b')]


def test_missing_comparison_section():
	report = parse_topic_report('title: T\nsummary: S\n--- KEY POINTS ---\nA: b\n', [])

	assert report.comparison is None


def test_incomplete_point_is_dropped():
	region = """
topicA: X
topicB: Y
-- Point --
aspect: Speed
analysisA: fast
-- Point --
aspect: Price
analysisA: low
analysisB: high
"""
	comparison = parse_comparison(region)

	assert comparison is not None
	assert comparison.points == [ComparisonPoint(aspect='Price', analysis_a='low', analysis_b='high')]


def test_comparison_without_topics_is_dropped():
	assert parse_comparison('-- Point --\naspect: a\nanalysisA: b\nanalysisB: c\n') is None


def test_comparison_with_topics_but_no_points():
	comparison = parse_comparison('topicA: X\ntopicB: Y\n')

	assert comparison is not None
	assert comparison.points == []


def test_defaults_for_missing_title_and_summary():
	report = parse_topic_report('--- KEY POINTS ---\nOne: two\n', [], query='tea')

	assert report.title == 'Analysis of "tea"'
	assert report.summary == NO_SUMMARY
	assert len(report.key_points) == 1


def test_summary_runs_to_end_without_markers():
	report = parse_topic_report('title: T\nsummary: only prose here', [])

	assert report.summary == 'only prose here'
	assert report.key_points == []


def test_key_point_labels_do_not_leak_into_title():
	body = 'summary: S\n--- KEY POINTS ---\ntitle: a key point named title\n'

	report = parse_topic_report(body, [], query='q')

	assert report.title == 'Analysis of "q"'
	assert report.key_points == [KeyPoint(title='title', description='a key point named title')]


def test_garbage_input_never_raises():
	report = parse_topic_report('::: --- COMPARISON --- -- Point -- :::', [])

	assert report.summary == NO_SUMMARY
	assert report.comparison is None


def test_parsing_is_idempotent():
	assert parse_topic_report(REPORT_WITH_COMPARISON, CITATIONS) == parse_topic_report(REPORT_WITH_COMPARISON, CITATIONS)


def test_crlf_line_endings():
	body = REPORT_WITH_COMPARISON.replace('\n', '\r\n')

	report = parse_topic_report(body, CITATIONS)

	assert report.title == 'Solar vs Wind'
	assert report.summary == 'Both technologies are growing fast.\nSolar leads in new capacity.'
	assert report.key_points[0] == KeyPoint(title='Cost', description='Solar module prices fell sharply.')
	assert report.comparison.topic_a == 'Solar power'
	assert report.comparison.topic_b == 'Wind power'
	assert report.comparison.points[0] == ComparisonPoint(
		aspect='Cost', analysis_a='Cheaper per panel', analysis_b='Cheaper per MWh offshore'
	)


def test_bare_url_lines_are_not_key_points():
	body = 'title: T\nsummary: S\n--- KEY POINTS ---\nCost: cheap\nhttps://example.com/ref\n'

	report = parse_topic_report(body, [])

	assert report.key_points == [KeyPoint(title='Cost', description='cheap')]

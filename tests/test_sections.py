from smart_news.parsers.sections import (
	find_field,
	find_trailing_field,
	parse_labeled_lines,
	slice_between,
	split_key_value,
	split_section,
)


def test_split_section_without_marker():
	assert split_section('plain text', '--- X ---') == ('plain text', None)


def test_split_section_on_first_marker_only():
	before, after = split_section('a --- X --- b --- X --- c', '--- X ---')

	assert before == 'a '
	assert after == ' b --- X --- c'


def test_slice_between_stops_at_end_marker():
	text = 'head\n[START]\nbody\n[END]\ntail'

	assert slice_between(text, '[START]', ('[END]',)) == '\nbody\n'
	assert slice_between(text, '[START]') == '\nbody\n[END]\ntail'
	assert slice_between(text, '[MISSING]') is None


def test_split_key_value_first_colon():
	assert split_key_value('link: https://a.test/x:y') == ('link', 'https://a.test/x:y')
	assert split_key_value('no separator') is None


def test_find_field_is_anchored_to_line_start():
	text = 'subtitle: wrong\n  title:  Right one  \ntitle: second'

	assert find_field(text, 'title') == 'Right one'
	assert find_field(text, 'missing') is None
	assert find_field('title:\n', 'title') is None


def test_find_trailing_field_spans_lines():
	assert find_trailing_field('title: t\nsummary: one\ntwo\n', 'summary') == 'one\ntwo'
	assert find_trailing_field('summary:   \n', 'summary') is None


def test_parse_labeled_lines():
	region = '\n* First: one\n\n2) Second: two: with colon\n: no label\nEmpty:\nplain line\n'

	assert parse_labeled_lines(region) == [('First', 'one'), ('Second', 'two: with colon')]


def test_parse_labeled_lines_strips_bold_label():
	assert parse_labeled_lines('**Bold:** text') == [('Bold', 'text')]


def test_parse_labeled_lines_needs_space_after_colon():
	assert parse_labeled_lines('https://example.com/ref\nNote: see https://example.com/ref') == [
		('Note', 'see https://example.com/ref')
	]


def test_find_field_ignores_carriage_return():
	assert find_field('topicA: Solar\r\ntopicB: Wind\r\n', 'topicA') == 'Solar'

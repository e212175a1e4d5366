import json
import time

import pytest

from smart_news.models import (
	Citation,
	ComparisonBlock,
	ComparisonPoint,
	Credibility,
	FactCheckResult,
	FactCheckSource,
	KeyPoint,
	OriginalSourceInfo,
	ResultRecord,
	SearchResults,
	TopicReport,
)
from smart_news.storage import ResponseCache


@pytest.fixture
def cache(tmp_path):
	return ResponseCache(tmp_path / 'cache', ttl_seconds=60)


def test_round_trip_nested_report(cache):
	report = TopicReport(
		title='T',
		summary='S',
		key_points=[KeyPoint(title='a', description='b')],
		comparison=ComparisonBlock(
			topic_a='x', topic_b='y', points=[ComparisonPoint(aspect='p', analysis_a='1', analysis_b='2')]
		),
		citations=[Citation(uri='https://u.test', title='U')],
	)

	cache.set('topic-report:abc', report)

	assert cache.get('topic-report:abc', TopicReport) == report


def test_round_trip_optional_fields(cache):
	results = SearchResults(
		records=[ResultRecord(title='t', link='l', source='s', description='d')],
		suggestions=['one'],
	)

	cache.set('k', results)
	loaded = cache.get('k', SearchResults)

	assert loaded == results
	assert loaded.records[0].image_url is None


def test_round_trip_enum_fields(cache):
	result = FactCheckResult(
		overall_credibility=Credibility.HIGH,
		summary='ok',
		original_source=OriginalSourceInfo('n', 'c', 'd', 'a', 'e', 'ec', 'ac', 'https://l.test'),
		acceptance_percentage=80.0,
		proponents=[],
		opponents=[],
		related_suggestions=[],
		related_sources=[FactCheckSource(url='https://r.test', title='R')],
	)

	cache.set('fact', result)

	assert cache.get('fact', FactCheckResult) == result


def test_missing_key(cache):
	assert cache.get('nope', SearchResults) is None


def test_expired_entry_is_removed(cache):
	cache.set('k', SearchResults(records=[], suggestions=[]))

	assert cache.get('k', SearchResults, ttl_seconds=-1) is None
	assert list(cache.storage_path.glob('*.json')) == []


def test_expiry_uses_clock(cache, monkeypatch):
	cache.set('k', SearchResults(records=[], suggestions=[]))

	later = time.time() + 3600
	monkeypatch.setattr('smart_news.storage.cache.time.time', lambda: later)

	assert cache.get('k', SearchResults) is None


def test_corrupt_entry_is_a_miss(cache):
	cache.set('k', SearchResults(records=[], suggestions=[]))
	[entry] = list(cache.storage_path.glob('*.json'))
	entry.write_text('{broken', encoding='utf-8')

	assert cache.get('k', SearchResults) is None


def test_wrong_shape_is_a_miss(cache):
	cache.set('k', SearchResults(records=[], suggestions=[]))
	[entry] = list(cache.storage_path.glob('*.json'))
	item = json.loads(entry.read_text(encoding='utf-8'))
	item['data'] = {'unexpected': True}
	entry.write_text(json.dumps(item), encoding='utf-8')

	assert cache.get('k', SearchResults) is None


def test_clear_only_removes_prefixed_entries(cache):
	cache.set('a', SearchResults(records=[], suggestions=[]))
	cache.set('b', SearchResults(records=[], suggestions=[]))
	other = cache.storage_path / 'keep.json'
	other.write_text('{}', encoding='utf-8')

	assert cache.clear() == 2
	assert list(cache.storage_path.iterdir()) == [other]


def test_clear_without_directory(tmp_path):
	assert ResponseCache(tmp_path / 'missing').clear() == 0

import json
from typing import Any

from smart_news.exceptions import ResponseFormatError
from smart_news.models import (
	Credibility,
	FactCheckResult,
	FactCheckSource,
	OriginalSourceInfo,
	StanceHolder,
)
from smart_news.utils.logger import logger


def load_json_payload(response: str) -> Any:
	response = response.strip()
	if response.startswith('```json'):
		response = response[7:]
	if response.startswith('```'):
		response = response[3:]
	if response.endswith('```'):
		response = response[:-3]
	response = response.strip()

	try:
		return json.loads(response)
	except json.JSONDecodeError as e:
		logger.error(f'Failed to parse JSON payload: {e}')
		logger.debug(f'Response was: {response[:500]}')
		raise ResponseFormatError(f'Upstream returned invalid JSON: {e}') from e


def parse_fact_check(payload: dict[str, Any]) -> FactCheckResult:
	if not isinstance(payload, dict):
		raise ResponseFormatError('Fact-check payload is not an object')

	try:
		source = payload['originalSource']
		return FactCheckResult(
			overall_credibility=Credibility(payload['overallCredibility']),
			summary=payload['summary'],
			original_source=OriginalSourceInfo(
				name=source['name'],
				credibility=source['credibility'],
				publication_date=source['publicationDate'],
				author=source['author'],
				evidence_type=source['evidenceType'],
				evidence_credibility=source['evidenceCredibility'],
				author_credibility=source['authorCredibility'],
				link=source['link'],
			),
			acceptance_percentage=float(payload['acceptancePercentage']),
			proponents=[StanceHolder(name=p['name'], argument=p['argument']) for p in payload.get('proponents', [])],
			opponents=[StanceHolder(name=o['name'], argument=o['argument']) for o in payload.get('opponents', [])],
			related_suggestions=[str(s) for s in payload.get('relatedSuggestions', [])],
			related_sources=[
				FactCheckSource(url=s['url'], title=s['title']) for s in payload.get('relatedSources', [])
			],
		)
	except KeyError as e:
		raise ResponseFormatError(f'Fact-check payload missing required field {e}') from e
	except (TypeError, ValueError) as e:
		raise ResponseFormatError(f'Fact-check payload has an invalid value: {e}') from e

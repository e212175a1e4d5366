"""Response schemas for schema-constrained (non-grounded) requests."""

from smart_news.models import Credibility

_STANCE_HOLDER = {
	'type': 'OBJECT',
	'properties': {
		'name': {'type': 'STRING', 'description': 'Name of the person or group.'},
		'argument': {'type': 'STRING', 'description': 'Their main argument or refutation.'},
	},
	'required': ['name', 'argument'],
}

FACT_CHECK_SCHEMA = {
	'type': 'OBJECT',
	'properties': {
		'overallCredibility': {
			'type': 'STRING',
			'enum': [c.value for c in Credibility],
			'description': 'The final credibility verdict.',
		},
		'summary': {'type': 'STRING', 'description': 'A concise summary of the fact-check findings.'},
		'originalSource': {
			'type': 'OBJECT',
			'properties': {
				'name': {'type': 'STRING'},
				'credibility': {'type': 'STRING'},
				'publicationDate': {'type': 'STRING'},
				'author': {'type': 'STRING'},
				'evidenceType': {'type': 'STRING'},
				'evidenceCredibility': {'type': 'STRING'},
				'authorCredibility': {'type': 'STRING'},
				'link': {'type': 'STRING'},
			},
			'required': [
				'name',
				'credibility',
				'publicationDate',
				'author',
				'evidenceType',
				'evidenceCredibility',
				'authorCredibility',
				'link',
			],
		},
		'acceptancePercentage': {'type': 'NUMBER', 'description': 'Estimated public acceptance (0-100).'},
		'proponents': {'type': 'ARRAY', 'items': _STANCE_HOLDER},
		'opponents': {'type': 'ARRAY', 'items': _STANCE_HOLDER},
		'relatedSuggestions': {'type': 'ARRAY', 'items': {'type': 'STRING'}},
		'relatedSources': {
			'type': 'ARRAY',
			'items': {
				'type': 'OBJECT',
				'properties': {'url': {'type': 'STRING'}, 'title': {'type': 'STRING'}},
				'required': ['url', 'title'],
			},
		},
	},
	'required': [
		'overallCredibility',
		'summary',
		'originalSource',
		'acceptancePercentage',
		'proponents',
		'opponents',
		'relatedSuggestions',
		'relatedSources',
	],
}

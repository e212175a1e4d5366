import hashlib
import json
from dataclasses import asdict, dataclass, field
from enum import Enum


class Domain(Enum):
	WEB_RESULT = 'web-result'
	TOPIC_REPORT = 'topic-report'
	AGENT_TASK = 'agent-task'


class OutputGrammar(Enum):
	RESULTS = 'results'
	TOPIC_REPORT = 'topic-report'
	AGENT_REPORT = 'agent-report'


_DEFAULT_GRAMMARS = {
	Domain.WEB_RESULT: OutputGrammar.RESULTS,
	Domain.TOPIC_REPORT: OutputGrammar.TOPIC_REPORT,
	Domain.AGENT_TASK: OutputGrammar.AGENT_REPORT,
}


def grammar_for(domain: Domain) -> OutputGrammar:
	return _DEFAULT_GRAMMARS[domain]


@dataclass(frozen=True)
class FilterTags:
	categories: list[str] = field(default_factory=list)
	regions: list[str] = field(default_factory=list)
	sources: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class RequestDescriptor:
	domain: Domain
	query: str
	filters: FilterTags = field(default_factory=FilterTags)
	comparison_topic: str | None = None
	instructions: str = ''
	max_results: int = 10
	include_images: bool = True

	def cache_key(self) -> str:
		"""Stable key for memoizing the upstream response of this request."""
		payload = asdict(self)
		payload['domain'] = self.domain.value
		digest = hashlib.sha256(json.dumps(payload, sort_keys=True, ensure_ascii=False).encode('utf-8')).hexdigest()
		return f'{self.domain.value}:{digest[:32]}'


@dataclass(frozen=True)
class Attachment:
	data: bytes
	mime_type: str

from smart_news.config.settings import settings
from smart_news.llm.client import GeminiClient, create_client_from_settings
from smart_news.models import (
	AgentExecutionReport,
	Attachment,
	Domain,
	FactCheckResult,
	RawUpstreamResponse,
	RequestDescriptor,
	SearchResults,
	TopicReport,
	grammar_for,
)
from smart_news.parsers import parse_agent_report, parse_fact_check, parse_results, parse_topic_report
from smart_news.prompts import (
	FACT_CHECK_SCHEMA,
	build_fact_check_prompt,
	build_instruction_prompt,
	compile_prompt,
)
from smart_news.storage import ResponseCache
from smart_news.utils.logger import logger


class SearchService:
	"""Runs a request through prompt compilation, the grounded model and the normalizer."""

	def __init__(
		self,
		client: GeminiClient,
		cache: ResponseCache | None = None,
		fallback_min_length: int = 50,
		language: str = 'Persian',
	):
		self.client = client
		self.cache = cache
		self.fallback_min_length = fallback_min_length
		self.language = language

	def search(self, descriptor: RequestDescriptor) -> SearchResults:
		self._check_domain(descriptor, Domain.WEB_RESULT)

		cached = self._from_cache(descriptor, SearchResults)
		if cached is not None:
			return cached

		response = self._fetch(descriptor)
		records, suggestions = parse_results(response.body, descriptor.query, self.fallback_min_length)
		logger.info(f'Parsed {len(records)} results and {len(suggestions)} suggestions for "{descriptor.query}"')

		results = SearchResults(records=records, suggestions=suggestions, citations=response.citations)
		self._to_cache(descriptor, results)
		return results

	def analyze_topic(self, descriptor: RequestDescriptor) -> TopicReport:
		self._check_domain(descriptor, Domain.TOPIC_REPORT)

		cached = self._from_cache(descriptor, TopicReport)
		if cached is not None:
			return cached

		response = self._fetch(descriptor)
		report = parse_topic_report(response.body, response.citations, descriptor.query)
		logger.info(
			f'Parsed topic report: {len(report.key_points)} key points, '
			f'comparison={"yes" if report.comparison else "no"}'
		)

		self._to_cache(descriptor, report)
		return report

	def run_agent_task(self, descriptor: RequestDescriptor) -> AgentExecutionReport:
		self._check_domain(descriptor, Domain.AGENT_TASK)

		cached = self._from_cache(descriptor, AgentExecutionReport)
		if cached is not None:
			return cached

		response = self._fetch(descriptor)
		report = parse_agent_report(response.body, response.citations)
		logger.info(f'Parsed agent report with {len(report.steps)} steps')

		self._to_cache(descriptor, report)
		return report

	def fact_check(self, text: str, attachment: Attachment | None = None, instructions: str = '') -> FactCheckResult:
		prompt = build_fact_check_prompt(text, instructions, attachment is not None, self.language)
		attachments = (attachment,) if attachment is not None else ()

		payload = self.client.generate_structured(prompt, FACT_CHECK_SCHEMA, attachments)
		result = parse_fact_check(payload)
		logger.info(f'Fact-check complete: {result.overall_credibility.value}')
		return result

	def generate_instruction(self, task_description: str) -> str:
		return self.client.generate_text(build_instruction_prompt(task_description, self.language))

	def test_connection(self) -> bool:
		return self.client.test_connection()

	def test_instruction(self, instructions: str) -> bool:
		return self.client.test_instruction(instructions)

	def clear_cache(self) -> int:
		return self.cache.clear() if self.cache else 0

	def _fetch(self, descriptor: RequestDescriptor) -> RawUpstreamResponse:
		prompt = compile_prompt(descriptor, grammar_for(descriptor.domain), self.language)
		logger.debug(f'Compiled {descriptor.domain.value} prompt ({len(prompt)} chars)')
		return self.client.generate_grounded(prompt)

	def _check_domain(self, descriptor: RequestDescriptor, expected: Domain) -> None:
		if descriptor.domain != expected:
			raise ValueError(f'Expected a {expected.value} request, got {descriptor.domain.value}')

	def _from_cache(self, descriptor: RequestDescriptor, data_class):
		if self.cache is None:
			return None

		cached = self.cache.get(self._cache_key(descriptor), data_class)
		if cached is not None:
			logger.info(f'Cache hit for {descriptor.domain.value} "{descriptor.query}"')
		return cached

	def _to_cache(self, descriptor: RequestDescriptor, value: object) -> None:
		if self.cache is not None:
			self.cache.set(self._cache_key(descriptor), value)

	def _cache_key(self, descriptor: RequestDescriptor) -> str:
		# Output language and fallback threshold change the normalized result too
		return f'{descriptor.cache_key()}:{self.language}:{self.fallback_min_length}'


def create_service_from_settings() -> SearchService:
	cache = ResponseCache(settings.CACHE_DIR, settings.CACHE_TTL_SECONDS) if settings.CACHE_ENABLED else None

	return SearchService(
		client=create_client_from_settings(settings),
		cache=cache,
		fallback_min_length=settings.FALLBACK_MIN_LENGTH,
		language=settings.OUTPUT_LANGUAGE,
	)

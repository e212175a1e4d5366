from typing import Any

from google.genai import types

from smart_news.exceptions import ConfigurationError, UpstreamServiceError
from smart_news.models import Attachment, Citation, RawUpstreamResponse
from smart_news.parsers.structured import load_json_payload
from smart_news.utils.logger import logger


class GeminiClient:
	def __init__(self, api_key: str | None = None, model: str = 'gemini-2.5-flash', client: Any = None):
		self.model = model
		self._client = client if client is not None else self._initialize_client(api_key)
		logger.info(f'Gemini client initialized: {model}')

	def _initialize_client(self, api_key: str | None):
		if not api_key:
			raise ConfigurationError('GEMINI_API_KEY is required to call the generative-text service.')

		from google import genai

		return genai.Client(api_key=api_key)

	def generate_grounded(self, prompt: str, attachments: tuple[Attachment, ...] = ()) -> RawUpstreamResponse:
		"""Free-text generation with Google Search grounding.

		Grounding cannot be combined with a response schema, so the body is
		whatever text the model produced; citations come from the grounding
		metadata and are filtered down to entries with both a URI and a title.
		"""
		config = types.GenerateContentConfig(tools=[types.Tool(google_search=types.GoogleSearch())])
		response = self._generate(self._build_contents(prompt, attachments), config)

		citations = extract_citations(response)
		logger.info(f'Grounded generation complete: {len(response.text or "")} chars, {len(citations)} citations')

		return RawUpstreamResponse(body=response.text or '', citations=citations)

	def generate_structured(self, prompt: str, schema: dict[str, Any], attachments: tuple[Attachment, ...] = ()) -> Any:
		config = types.GenerateContentConfig(response_mime_type='application/json', response_schema=schema)
		response = self._generate(self._build_contents(prompt, attachments), config)

		if not response.text:
			raise UpstreamServiceError('Upstream returned an empty structured response')

		return load_json_payload(response.text)

	def generate_text(self, prompt: str, system_instruction: str | None = None) -> str:
		config = types.GenerateContentConfig(system_instruction=system_instruction) if system_instruction else None
		response = self._generate(prompt, config)
		return (response.text or '').strip()

	def test_connection(self) -> bool:
		return self._probe('test')

	def test_instruction(self, system_instruction: str) -> bool:
		return self._probe('سلام', system_instruction)

	def _probe(self, contents: str, system_instruction: str | None = None) -> bool:
		config = types.GenerateContentConfig(
			system_instruction=system_instruction,
			thinking_config=types.ThinkingConfig(thinking_budget=0),
		)
		try:
			response = self._generate(contents, config)
		except UpstreamServiceError:
			return False
		return isinstance(response.text, str) and len(response.text) > 0

	def _build_contents(self, prompt: str, attachments: tuple[Attachment, ...]) -> Any:
		if not attachments:
			return prompt

		parts = [types.Part.from_text(text=prompt)]
		for attachment in attachments:
			parts.append(types.Part.from_bytes(data=attachment.data, mime_type=attachment.mime_type))
		return parts

	def _generate(self, contents: Any, config: types.GenerateContentConfig | None) -> Any:
		logger.info(f'Generating with {self.model}...')

		try:
			return self._client.models.generate_content(model=self.model, contents=contents, config=config)
		except Exception as e:
			logger.error(f'Generation failed ({self.model}): {e}')
			raise UpstreamServiceError(f'Failed to generate content: {e}') from e


def extract_citations(response: Any) -> list[Citation]:
	citations: list[Citation] = []

	for candidate in getattr(response, 'candidates', None) or []:
		metadata = getattr(candidate, 'grounding_metadata', None)
		for chunk in getattr(metadata, 'grounding_chunks', None) or []:
			web = getattr(chunk, 'web', None)
			uri = getattr(web, 'uri', None)
			title = getattr(web, 'title', None)
			if uri and title:
				citations.append(Citation(uri=uri, title=title))

	return citations


def create_client_from_settings(settings: Any) -> GeminiClient:
	return GeminiClient(api_key=settings.GEMINI_API_KEY, model=settings.GEMINI_MODEL)

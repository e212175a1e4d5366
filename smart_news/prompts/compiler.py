from smart_news.models import Domain, FilterTags, OutputGrammar, RequestDescriptor

from .grammar import GRAMMARS

DEFAULT_LANGUAGE = 'Persian'


def _format_tags(tags: list[str], default: str) -> str:
	if not tags or 'all' in tags:
		return default
	return ', '.join(tags)


def _format_filters(filters: FilterTags) -> str:
	return '\n'.join(
		[
			f'- Categories: "{_format_tags(filters.categories, "any")}"',
			f'- Regions: "{_format_tags(filters.regions, "any")}"',
			f'- Sources: "{_format_tags(filters.sources, "any reputable source")}"',
		]
	)


def _web_result_task(descriptor: RequestDescriptor) -> str:
	images = (
		'For each result, you MUST provide a relevant imageUrl.'
		if descriptor.include_images
		else 'Do not include imageUrl lines.'
	)
	return f"""### TASK
Search the web and find the top {descriptor.max_results} results (videos, audio, books, articles, etc.) for the query below.
- Search Query: "{descriptor.query}"
{_format_filters(descriptor.filters)}
Provide a diverse set of results from real, reachable pages.
{images}"""


def _topic_report_task(descriptor: RequestDescriptor) -> str:
	task = f"""### TASK
Research the topic below using up-to-date web sources and write an analytical report.
- Topic: "{descriptor.query}"
{_format_filters(descriptor.filters)}
Give a clear title, a comprehensive summary and at most 5 key points."""

	comparison_topic = (descriptor.comparison_topic or '').strip()
	if comparison_topic:
		task += (
			f'\nAlso compare "{descriptor.query}" (topicA) with "{comparison_topic}" (topicB) '
			'aspect by aspect in the comparison section.'
		)
	else:
		task += '\nNo comparison was requested.'

	return task


def _agent_task(descriptor: RequestDescriptor) -> str:
	return f"""### TASK
Act as an autonomous research agent. Carry out the task below step by step using web search, then report what you did.
- Task: "{descriptor.query}"
{_format_filters(descriptor.filters)}
Summarize the outcome and list every step you took in order."""


_TASK_BUILDERS = {
	Domain.WEB_RESULT: _web_result_task,
	Domain.TOPIC_REPORT: _topic_report_task,
	Domain.AGENT_TASK: _agent_task,
}


def compile_prompt(descriptor: RequestDescriptor, grammar: OutputGrammar, language: str = DEFAULT_LANGUAGE) -> str:
	"""Build the exact prompt sent to the grounded model.

	The prompt is the caller's instruction text, an output-language directive,
	the task description for the descriptor's domain and the literal output
	grammar selected by ``grammar``.
	"""
	parts = []

	instructions = descriptor.instructions.strip()
	if instructions:
		parts.append(instructions)

	parts.append(
		f'IMPORTANT: All output text (titles, descriptions, summaries, etc.) MUST be in {language}. '
		f'If a source is in another language, translate its content to natural-sounding {language}. '
		'Field names and section markers must stay exactly as written below.'
	)
	parts.append(_TASK_BUILDERS[descriptor.domain](descriptor))
	parts.append(GRAMMARS[grammar])

	return '\n\n'.join(parts)


def build_fact_check_prompt(text: str, instructions: str = '', has_attachment: bool = False, language: str = DEFAULT_LANGUAGE) -> str:
	media_note = (
		'Media is provided: analyze it as the primary subject and use the text as context.'
		if has_attachment
		else 'Only text is provided: analyze the text.'
	)

	return f"""{instructions}
As a world-class investigative journalist and expert fact-checker, conduct a deep analysis of the following content.
{media_note}
Your entire output MUST be in {language} and structured according to the JSON schema.

**Analysis Steps:**
1. **Overall Credibility:** Determine the overall credibility of the claim ('بسیار معتبر', 'معتبر', 'نیازمند بررسی').
2. **Summary:** Provide a concise summary of your findings.
3. **Original Source:** Identify the earliest verifiable source that published this claim. Provide:
    - The source's name and credibility level.
    - The exact publication date and time.
    - The author or publisher's name.
    - The type of evidence they used and an assessment of its credibility.
    - An assessment of the author's credibility on this topic.
    - A direct link to the original publication.
4. **Public Reception:** Estimate the claim's acceptance rate as a percentage number (e.g., 75).
5. **Arguments:**
    - Identify up to 2 key proponents and their main arguments.
    - Identify up to 2 key opponents and their main arguments or refutations.
6. **Further Reading:**
    - Provide up to 3 related suggestions as simple strings.
    - Find up to 3 external reputable sources that discuss the claim, with a title and URL for each.

**Content for Analysis:**
- Text Context: "{text}"
""".strip()


def build_instruction_prompt(task_description: str, language: str = DEFAULT_LANGUAGE) -> str:
	return (
		'You are a helpful assistant specialized in creating AI system prompts. '
		f'The user wants a system instruction for an AI that performs the following task: "{task_description}". '
		f'Generate a concise, clear, and effective system instruction in {language.upper()} that guides the AI '
		'to perform this task optimally. The output should be ONLY the generated instruction text, '
		'without any preamble or explanation.'
	)

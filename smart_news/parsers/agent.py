from smart_news.models import AgentExecutionReport, AgentStep, Citation
from smart_news.prompts.grammar import STEPS_MARKER

from .sections import find_trailing_field, normalize_newlines, parse_labeled_lines, split_section
from .topic import NO_SUMMARY


def parse_agent_report(body: str, citations: list[Citation]) -> AgentExecutionReport:
	header, steps_region = split_section(normalize_newlines(body), STEPS_MARKER)

	summary = find_trailing_field(header, 'summary') or NO_SUMMARY

	steps = []
	if steps_region is not None:
		steps = [AgentStep(title=label, description=text) for label, text in parse_labeled_lines(steps_region)]

	return AgentExecutionReport(summary=summary, steps=steps, citations=list(citations))

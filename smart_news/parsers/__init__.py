from .agent import parse_agent_report
from .results import parse_results, parse_suggestions
from .structured import load_json_payload, parse_fact_check
from .topic import parse_comparison, parse_topic_report

__all__ = [
	'parse_results',
	'parse_suggestions',
	'parse_topic_report',
	'parse_comparison',
	'parse_agent_report',
	'load_json_payload',
	'parse_fact_check',
]

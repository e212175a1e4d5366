import argparse
import mimetypes
import sys
from pathlib import Path

from dotenv import load_dotenv

from smart_news.config.settings import settings
from smart_news.core import create_service_from_settings, get_config, make_descriptor
from smart_news.models import Attachment, Domain
from smart_news.storage import ResponseCache
from smart_news.storage.helpers import dump_report


def _print_json(value) -> None:
	print(dump_report(value))


def _add_request_arguments(parser: argparse.ArgumentParser) -> None:
	parser.add_argument('query', help='Search query, topic or task description')
	parser.add_argument('--category', action='append', default=[], dest='categories', help='Category filter (repeatable)')
	parser.add_argument('--region', action='append', default=[], dest='regions', help='Region filter (repeatable)')
	parser.add_argument('--source', action='append', default=[], dest='sources', help='Source filter (repeatable)')
	parser.add_argument('--instructions', help='Override the default instruction text')
	parser.add_argument('--max-results', type=int, default=10, help='Number of results to request')
	parser.add_argument('--no-images', action='store_true', help='Do not ask for image URLs')


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(description='Smart News: AI search, fact-check and analysis')
	subparsers = parser.add_subparsers(dest='command', required=True)

	_add_request_arguments(subparsers.add_parser('search', help='Search the web for results'))

	topic = subparsers.add_parser('topic', help='Write an analytical report on a topic')
	_add_request_arguments(topic)
	topic.add_argument('--compare', dest='comparison_topic', help='Second topic to compare against')

	_add_request_arguments(subparsers.add_parser('agent', help='Run a step-by-step research task'))

	fact_check = subparsers.add_parser('fact-check', help='Fact-check a claim or media file')
	fact_check.add_argument('text', nargs='?', default='', help='Claim or context text')
	fact_check.add_argument('--file', type=Path, help='Image, audio or video file to analyze')
	fact_check.add_argument('--instructions', help='Override the default instruction text')

	instruction = subparsers.add_parser('instruction', help='Generate instruction text for a task')
	instruction.add_argument('task_description', help='What the instructions should make the model do')

	test_instruction = subparsers.add_parser('test-instruction', help='Check that instruction text is accepted')
	test_instruction.add_argument('instructions', help='Instruction text to try')

	subparsers.add_parser('clear-cache', help='Remove all cached responses')
	subparsers.add_parser('check', help='Test the connection to the generative-text service')

	return parser


def main(argv: list[str] | None = None) -> int:
	load_dotenv()

	args = build_parser().parse_args(argv)

	if args.command == 'clear-cache':
		cache = ResponseCache(settings.CACHE_DIR, settings.CACHE_TTL_SECONDS)
		print(f'Removed {cache.clear()} cached responses')
		return 0

	service = create_service_from_settings()

	if args.command == 'check':
		ok = service.test_connection()
		print('Connection OK' if ok else 'Connection failed')
		return 0 if ok else 1

	if args.command == 'instruction':
		print(service.generate_instruction(args.task_description))
		return 0

	if args.command == 'test-instruction':
		ok = service.test_instruction(args.instructions)
		print('Instructions OK' if ok else 'Instructions rejected')
		return 0 if ok else 1

	if args.command == 'fact-check':
		attachment = None
		if args.file:
			mime_type, _ = mimetypes.guess_type(args.file.name)
			attachment = Attachment(data=args.file.read_bytes(), mime_type=mime_type or 'application/octet-stream')
		instructions = args.instructions or get_config().get_instructions('fact-check')
		_print_json(service.fact_check(args.text, attachment, instructions))
		return 0

	domain = {'search': Domain.WEB_RESULT, 'topic': Domain.TOPIC_REPORT, 'agent': Domain.AGENT_TASK}[args.command]
	descriptor = make_descriptor(
		domain,
		args.query,
		categories=args.categories,
		regions=args.regions,
		sources=args.sources,
		comparison_topic=getattr(args, 'comparison_topic', None),
		instructions=args.instructions,
		max_results=args.max_results,
		include_images=not args.no_images,
	)

	if domain == Domain.WEB_RESULT:
		_print_json(service.search(descriptor))
	elif domain == Domain.TOPIC_REPORT:
		_print_json(service.analyze_topic(descriptor))
	else:
		_print_json(service.run_agent_task(descriptor))

	return 0


def run() -> None:
	try:
		sys.exit(main())
	except KeyboardInterrupt:
		print('\nInterrupted.')
		sys.exit(130)
	except Exception as e:
		print(f'\nError: {e}')
		sys.exit(1)

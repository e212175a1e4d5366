from pathlib import Path
from typing import Any

import yaml

from smart_news.config.settings import settings
from smart_news.exceptions import ConfigurationError

INSTRUCTION_TASKS = ('web-result', 'topic-report', 'agent-task', 'fact-check')


class ConfigLoader:
	def __init__(self, config_dir: Path | str | None = None):
		self.config_dir = Path(config_dir) if config_dir is not None else settings.CONFIG_DIR
		self.instructions = self._load_instructions()

	def _load_instructions(self) -> dict[str, str]:
		instructions_path = self.config_dir / 'instructions.yaml'

		if not instructions_path.exists():
			raise FileNotFoundError(f'Instructions file not found: {instructions_path}')

		with open(instructions_path, encoding='utf-8') as f:
			data: dict[str, Any] = yaml.safe_load(f) or {}

		instructions = data.get('instructions', {})
		if not isinstance(instructions, dict):
			raise ConfigurationError(f"'instructions' must be a mapping in {instructions_path}")

		return {str(task): str(text).strip() for task, text in instructions.items() if text}

	def get_instructions(self, task: str) -> str:
		return self.instructions.get(task, '')


# Singleton instance
_config = None


def get_config() -> ConfigLoader:
	global _config
	if _config is None:
		_config = ConfigLoader()
	return _config

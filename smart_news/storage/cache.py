import hashlib
import json
import time
from dataclasses import asdict
from enum import Enum
from pathlib import Path
from typing import TypeVar

from dacite import Config, DaciteError, from_dict

from smart_news.utils.logger import logger

from .helpers import ReportEncoder

T = TypeVar('T')

CACHE_PREFIX = 'smart-news-cache-'
DEFAULT_TTL_SECONDS = 15 * 60


class ResponseCache:
	"""File-backed, time-boxed memoization of normalized responses."""

	def __init__(self, storage_path: Path, ttl_seconds: int = DEFAULT_TTL_SECONDS, prefix: str = CACHE_PREFIX):
		self.storage_path = storage_path
		self.ttl_seconds = ttl_seconds
		self.prefix = prefix

	def _entry_file(self, key: str) -> Path:
		digest = hashlib.sha256(key.encode('utf-8')).hexdigest()
		return self.storage_path / f'{self.prefix}{digest}.json'

	def set(self, key: str, value: object) -> None:
		self.storage_path.mkdir(parents=True, exist_ok=True)

		item = {'key': key, 'timestamp': time.time(), 'data': asdict(value)}  # type: ignore[arg-type]

		with open(self._entry_file(key), 'w', encoding='utf-8') as f:
			json.dump(item, f, cls=ReportEncoder, ensure_ascii=False, indent=2)

	def get(self, key: str, data_class: type[T], ttl_seconds: int | None = None) -> T | None:
		entry_file = self._entry_file(key)
		if not entry_file.exists():
			return None

		ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds

		try:
			with open(entry_file, encoding='utf-8') as f:
				item = json.load(f)

			if time.time() - item['timestamp'] > ttl:
				logger.debug(f'Cache entry expired: {key}')
				entry_file.unlink(missing_ok=True)
				return None

			return from_dict(data_class=data_class, data=item['data'], config=Config(cast=[Enum]))

		except (OSError, KeyError, TypeError, json.JSONDecodeError, DaciteError) as e:
			logger.warning(f'Ignoring unreadable cache entry {key}: {e}')
			return None

	def clear(self) -> int:
		if not self.storage_path.exists():
			return 0

		removed = 0
		for entry_file in self.storage_path.glob(f'{self.prefix}*.json'):
			entry_file.unlink(missing_ok=True)
			removed += 1

		logger.info(f'Response cache cleared ({removed} entries)')
		return removed

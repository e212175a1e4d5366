import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any


class ReportEncoder(json.JSONEncoder):
	"""Serialises report dataclasses, turning enums into their wire values."""

	def default(self, o):
		if isinstance(o, Enum):
			return o.value
		if is_dataclass(o) and not isinstance(o, type):
			return asdict(o)
		return super().default(o)


def dump_report(value: Any, indent: int | None = 2) -> str:
	return json.dumps(value, cls=ReportEncoder, ensure_ascii=False, indent=indent)

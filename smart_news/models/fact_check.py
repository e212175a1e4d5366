from dataclasses import dataclass
from enum import Enum


class Credibility(Enum):
	HIGH = 'بسیار معتبر'
	MEDIUM = 'معتبر'
	LOW = 'نیازمند بررسی'


@dataclass(frozen=True)
class OriginalSourceInfo:
	name: str
	credibility: str
	publication_date: str
	author: str
	evidence_type: str
	evidence_credibility: str
	author_credibility: str
	link: str


@dataclass(frozen=True)
class StanceHolder:
	name: str
	argument: str


@dataclass(frozen=True)
class FactCheckSource:
	url: str
	title: str


@dataclass(frozen=True)
class FactCheckResult:
	overall_credibility: Credibility
	summary: str
	original_source: OriginalSourceInfo
	acceptance_percentage: float
	proponents: list[StanceHolder]
	opponents: list[StanceHolder]
	related_suggestions: list[str]
	related_sources: list[FactCheckSource]

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Citation:
	uri: str
	title: str


@dataclass(frozen=True)
class RawUpstreamResponse:
	body: str
	citations: list[Citation] = field(default_factory=list)


@dataclass(frozen=True)
class ResultRecord:
	title: str
	link: str
	source: str
	description: str
	image_url: str | None = None


@dataclass(frozen=True)
class SearchResults:
	records: list[ResultRecord]
	suggestions: list[str]
	citations: list[Citation] = field(default_factory=list)


@dataclass(frozen=True)
class KeyPoint:
	title: str
	description: str


@dataclass(frozen=True)
class ComparisonPoint:
	aspect: str
	analysis_a: str
	analysis_b: str


@dataclass(frozen=True)
class ComparisonBlock:
	topic_a: str
	topic_b: str
	points: list[ComparisonPoint]


@dataclass(frozen=True)
class TopicReport:
	title: str
	summary: str
	key_points: list[KeyPoint]
	comparison: ComparisonBlock | None
	citations: list[Citation] = field(default_factory=list)


@dataclass(frozen=True)
class AgentStep:
	title: str
	description: str


@dataclass(frozen=True)
class AgentExecutionReport:
	summary: str
	steps: list[AgentStep]
	citations: list[Citation] = field(default_factory=list)

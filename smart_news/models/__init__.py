from .request import (
    Attachment,
    Domain,
    FilterTags,
    OutputGrammar,
    RequestDescriptor,
    grammar_for,
)
from .report import (
    AgentExecutionReport,
    AgentStep,
    Citation,
    ComparisonBlock,
    ComparisonPoint,
    KeyPoint,
    RawUpstreamResponse,
    ResultRecord,
    SearchResults,
    TopicReport,
)
from .fact_check import (
    Credibility,
    FactCheckResult,
    FactCheckSource,
    OriginalSourceInfo,
    StanceHolder,
)


__all__ = [
    "Attachment",
    "Domain",
    "FilterTags",
    "OutputGrammar",
    "RequestDescriptor",
    "grammar_for",
    "AgentExecutionReport",
    "AgentStep",
    "Citation",
    "ComparisonBlock",
    "ComparisonPoint",
    "KeyPoint",
    "RawUpstreamResponse",
    "ResultRecord",
    "SearchResults",
    "TopicReport",
    "Credibility",
    "FactCheckResult",
    "FactCheckSource",
    "OriginalSourceInfo",
    "StanceHolder",
]

from smart_news.models import Domain, FilterTags, RequestDescriptor

from .config_loader import ConfigLoader, get_config


def make_descriptor(
	domain: Domain,
	query: str,
	categories: list[str] | None = None,
	regions: list[str] | None = None,
	sources: list[str] | None = None,
	comparison_topic: str | None = None,
	instructions: str | None = None,
	max_results: int = 10,
	include_images: bool = True,
	config: ConfigLoader | None = None,
) -> RequestDescriptor:
	"""Build a request, falling back to the configured default instructions for the domain."""
	if not instructions or not instructions.strip():
		instructions = (config or get_config()).get_instructions(domain.value)

	return RequestDescriptor(
		domain=domain,
		query=query.strip(),
		filters=FilterTags(
			categories=list(categories or []),
			regions=list(regions or []),
			sources=list(sources or []),
		),
		comparison_topic=(comparison_topic or '').strip() or None,
		instructions=instructions,
		max_results=max_results,
		include_images=include_images,
	)

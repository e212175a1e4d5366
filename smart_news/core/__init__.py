from smart_news.core.config_loader import ConfigLoader, get_config
from smart_news.core.descriptors import make_descriptor
from smart_news.core.service import SearchService, create_service_from_settings

__all__ = [
	'ConfigLoader',
	'get_config',
	'make_descriptor',
	'SearchService',
	'create_service_from_settings',
]

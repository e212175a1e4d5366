from .client import GeminiClient, create_client_from_settings, extract_citations

__all__ = ['GeminiClient', 'create_client_from_settings', 'extract_citations']

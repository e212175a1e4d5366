from fastapi import APIRouter

from smart_news import __version__
from smart_news.config.settings import settings
from smart_news.utils.logger import logger

health_router = APIRouter()


@health_router.get('/health')
async def health_check():
	logger.info('Health check requested')
	return {'status': 'ok', 'version': __version__, 'model': settings.GEMINI_MODEL}

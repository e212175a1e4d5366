import base64
import binascii
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from smart_news.core import SearchService, create_service_from_settings, make_descriptor
from smart_news.core.config_loader import get_config
from smart_news.models import Attachment, Domain
from smart_news.utils.logger import logger

search_router = APIRouter()


class SearchRequest(BaseModel):
	query: str = Field(min_length=1)
	categories: list[str] = Field(default_factory=list)
	regions: list[str] = Field(default_factory=list)
	sources: list[str] = Field(default_factory=list)
	instructions: str | None = None
	max_results: int = Field(default=10, ge=1, le=50)
	include_images: bool = True


class TopicRequest(SearchRequest):
	comparison_topic: str | None = None


class FactCheckRequest(BaseModel):
	text: str = ''
	attachment_base64: str | None = None
	mime_type: str | None = None
	instructions: str | None = None


class InstructionRequest(BaseModel):
	task_description: str = Field(min_length=1)


class InstructionTestRequest(BaseModel):
	instructions: str = Field(min_length=1)


@lru_cache
def get_service() -> SearchService:
	return create_service_from_settings()


def _descriptor(domain: Domain, request: SearchRequest, comparison_topic: str | None = None):
	return make_descriptor(
		domain,
		request.query,
		categories=request.categories,
		regions=request.regions,
		sources=request.sources,
		comparison_topic=comparison_topic,
		instructions=request.instructions,
		max_results=request.max_results,
		include_images=request.include_images,
	)


@search_router.post('/search')
def search(request: SearchRequest, service: SearchService = Depends(get_service)):
	logger.info(f'Search requested: {request.query}')
	return service.search(_descriptor(Domain.WEB_RESULT, request))


@search_router.post('/topic')
def analyze_topic(request: TopicRequest, service: SearchService = Depends(get_service)):
	logger.info(f'Topic analysis requested: {request.query}')
	return service.analyze_topic(_descriptor(Domain.TOPIC_REPORT, request, request.comparison_topic))


@search_router.post('/agent')
def run_agent_task(request: SearchRequest, service: SearchService = Depends(get_service)):
	logger.info(f'Agent task requested: {request.query}')
	return service.run_agent_task(_descriptor(Domain.AGENT_TASK, request))


@search_router.post('/fact-check')
def fact_check(request: FactCheckRequest, service: SearchService = Depends(get_service)):
	attachment = None
	if request.attachment_base64:
		if not request.mime_type:
			raise HTTPException(status_code=400, detail='mime_type is required with an attachment')
		try:
			data = base64.b64decode(request.attachment_base64, validate=True)
		except binascii.Error as e:
			raise HTTPException(status_code=400, detail=f'Invalid attachment encoding: {e}') from e
		attachment = Attachment(data=data, mime_type=request.mime_type)

	if not request.text.strip() and attachment is None:
		raise HTTPException(status_code=400, detail='Provide text or an attachment to fact-check')

	instructions = request.instructions or get_config().get_instructions('fact-check')
	return service.fact_check(request.text, attachment, instructions)


@search_router.post('/instruction')
def generate_instruction(request: InstructionRequest, service: SearchService = Depends(get_service)):
	logger.info(f'Instruction generation requested: {request.task_description}')
	return {'instructions': service.generate_instruction(request.task_description)}


@search_router.post('/instruction/test')
def check_instruction(request: InstructionTestRequest, service: SearchService = Depends(get_service)):
	return {'ok': service.test_instruction(request.instructions)}


@search_router.delete('/cache')
def clear_cache(service: SearchService = Depends(get_service)):
	return {'removed': service.clear_cache()}

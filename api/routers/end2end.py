"""
End-to-end registration flow endpoints
reCAPTCHA 키 노출/검증 프록시, 클라이언트 로그 중계, 정적 파일 제공
"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, Response, StreamingResponse
from typing import Mapping
import logging

import httpx

from api.dependencies import get_http_client, get_settings, get_static_filters
from config.settings import End2EndSettings
from domain.models import LineFilter
from services.recaptcha_service import verify_recaptcha_token
from services.static_service import iter_resource_lines, resolve_resource
from utils.client_ip import format_client_log

router = APIRouter(prefix="/fabric8-end2end", tags=["E2E Registration Flow"])

client_logger = logging.getLogger("end2end.client")


async def _read_text(request: Request) -> str:
    body = await request.body()
    return body.decode("utf-8", errors="replace")


@router.get("/site-key", response_class=PlainTextResponse)
def site_key(settings: End2EndSettings = Depends(get_settings)) -> str:
    return settings.site_key or ""


@router.post("/verify")
async def verify(
    request: Request,
    settings: End2EndSettings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> Response:
    """Proxy a reCAPTCHA token to the verifier; the body is the raw token."""
    token = await _read_text(request)
    result = await verify_recaptcha_token(client, settings, token)
    if result.ok:
        return Response(content=result.body, status_code=200, media_type="application/json")
    return Response(status_code=result.status_code)


@router.post("/warning")
async def warning(request: Request) -> Response:
    message = await _read_text(request)
    client_logger.warning(format_client_log(message, request))
    return Response(status_code=200)


@router.post("/error")
async def error(request: Request) -> Response:
    message = await _read_text(request)
    client_logger.error(format_client_log(message, request))
    return Response(status_code=200)


@router.get("/files/{rest:path}")
def static_file(
    rest: str,
    settings: End2EndSettings = Depends(get_settings),
    filters: Mapping[str, LineFilter] = Depends(get_static_filters),
) -> Response:
    resource = resolve_resource(settings.resource_root, f"files/{rest}", filters)
    if resource is None:
        return Response(status_code=404)
    return StreamingResponse(iter_resource_lines(resource), media_type=resource.media_type)

from typing import AsyncIterator, Mapping

import httpx
from fastapi import Request

from config.settings import End2EndSettings
from domain.models import LineFilter


def get_settings(request: Request) -> End2EndSettings:
    return request.app.state.settings


def get_static_filters(request: Request) -> Mapping[str, LineFilter]:
    return request.app.state.static_filters


async def get_http_client(request: Request) -> AsyncIterator[httpx.AsyncClient]:
    settings: End2EndSettings = request.app.state.settings
    async with httpx.AsyncClient(timeout=settings.verify_timeout) as client:
        yield client

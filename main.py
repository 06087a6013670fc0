from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from typing import Optional
import logging

from config.settings import LOG_LEVEL, End2EndSettings, load_settings
from api.routers.end2end import router as end2end_router
from services.static_service import build_static_filters

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)


def create_app(settings: Optional[End2EndSettings] = None) -> FastAPI:
    # 설정과 치환 테이블은 시작 시 한 번만 만들고 이후 읽기 전용
    settings = settings or load_settings()

    app = FastAPI(title="fabric8-end2end")
    app.state.settings = settings
    app.state.static_filters = build_static_filters(settings.site_key)

    # CORS 설정
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    app.include_router(end2end_router)

    @app.get("/")
    def read_root():
        return {"status": "ok"}

    return app


app = create_app()

# src/jornada_clt/api.py

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jornada_clt import __version__
from jornada_clt.config import get_settings
from jornada_clt.logging_config import configure_logging
from jornada_clt.router import router


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL, settings.LOG_DIR)

    app = FastAPI(title=f"{settings.APP_NAME} API", version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)

    @app.get("/")
    async def status():
        return {"app": settings.APP_NAME, "status": "ok"}

    return app


app = create_app()


def run():
    settings = get_settings()
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)


if __name__ == "__main__":
    run()

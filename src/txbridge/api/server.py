# File: src/txbridge/api/server.py
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from txbridge import __version__
from txbridge.config.settings import ServerConfig
from .routes import transactions_router
from .routes.transactions import method_not_allowed_handler

def create_app(config: Optional[ServerConfig] = None) -> FastAPI:
    config = config or ServerConfig()
    app = FastAPI(title="txbridge API", version=__version__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.get("server.cors_origins", ["*"]),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(transactions_router)
    app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)

    return app

app = create_app()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies.rate_limits import setup_rate_limiter
from api.router import api_router
from infrastructure.configuration import settings
from server.lifespan import lifespan
from server.request_context import RequestContextMiddleware

handler = FastAPI(title="Ghost Discord membership relay", lifespan=lifespan)
setup_rate_limiter(handler)

allow_origins = (
    ["*"]
    if settings.is_production
    else [
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]
)
handler.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
handler.add_middleware(RequestContextMiddleware)


handler.include_router(api_router)

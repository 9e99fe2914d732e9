from fastapi import APIRouter

from api.routes.interactions import router as interactions_router
from api.routes.links import router as links_router
from api.routes.system import router as system_router
from api.routes.webhooks import router as webhooks_router

api_router = APIRouter()

api_router.include_router(system_router)
api_router.include_router(webhooks_router)
api_router.include_router(interactions_router)
api_router.include_router(links_router)

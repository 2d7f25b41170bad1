from fastapi import APIRouter
from inovaweek.api.v1.endpoints import auth, group

api_router = APIRouter()
api_router.include_router(auth.router)
api_router.include_router(group.router)

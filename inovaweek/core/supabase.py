from fastapi import Request
from supabase import AsyncClient, acreate_client

from inovaweek.core.config import settings
from inovaweek.core.logger import logger


async def create_supabase_client() -> AsyncClient:
    client = await acreate_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
    logger.debug(f"Cliente Supabase criado para {settings.SUPABASE_URL}")
    return client


def get_supabase(request: Request) -> AsyncClient:
    """
    Dependência do FastAPI que entrega o cliente Supabase criado no lifespan.
    """
    return request.app.state.supabase

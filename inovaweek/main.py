from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from inovaweek.core.config import settings
from inovaweek.core.logger import logger
from contextlib import asynccontextmanager
from inovaweek.core.supabase import create_supabase_client
from inovaweek.api.v1.api import api_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.PROJECT_NAME} in {settings.ENVIRONMENT} environment")
    logger.debug(f"Supabase URL: {settings.SUPABASE_URL}")
    logger.debug(f"Supabase Key: {'*' * len(settings.SUPABASE_KEY)} (hidden)")

    try:
        app.state.supabase = await create_supabase_client()
        logger.success("Cliente Supabase inicializado com sucesso!")
    except Exception as e:
        logger.critical(f"Erro ao inicializar o cliente Supabase: {e}")
        raise

    yield

    logger.info(f"Shutting down {settings.PROJECT_NAME}")

app = FastAPI(title=settings.PROJECT_NAME, version="1.0.0", lifespan=lifespan)

origins = [
    "http://localhost",
    "http://localhost:8081",
    "http://localhost:19006",
    "http://127.0.0.1:8000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.API_V1_STR)

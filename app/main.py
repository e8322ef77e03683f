from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI

from app.api.rest_routes.admin import router as admin_router
from app.api.rest_routes.ai import router as ai_router
from app.api.rest_routes.auth import router as auth_router
from app.api.rest_routes.dashboard import router as dashboard_router
from app.api.rest_routes.fields import router as fields_router
from app.api.rest_routes.irrigation_logs import router as irrigation_logs_router
from app.api.rest_routes.plans import router as plans_router
from app.api.rest_routes.predictions import router as predictions_router
from app.core.config import settings
from app.core.logging_config import configure_logging
from app.core.mongodb import close_mongo_client, ensure_indexes, init_mongo_client

load_dotenv()


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    await init_mongo_client()
    await ensure_indexes()
    yield
    await close_mongo_client()


app = FastAPI(title="AgroVision API", lifespan=lifespan)

app.include_router(auth_router)
app.include_router(dashboard_router)
app.include_router(fields_router)
app.include_router(predictions_router)
app.include_router(irrigation_logs_router)
app.include_router(plans_router)
app.include_router(ai_router)
app.include_router(admin_router)


@app.get("/")
async def root():
    return {"message": "Welcome to AgroVision!"}

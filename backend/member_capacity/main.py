"""FastAPI application entry point."""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from member_capacity.config import get_settings
from member_capacity.log import configure_logging
from member_capacity.routers import availability

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    yield


app = FastAPI(
    title="Member Capacity & Availability Engine",
    description="Availability, capacity validation and utilization for organization members",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(availability.router)


@app.get("/health")
async def health():
    return {"status": "ok"}

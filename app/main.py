from __future__ import annotations

from contextlib import asynccontextmanager
import logging

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.deps import get_apr_manager, get_pool_snapshot_port
from app.api.routers.simulated_pools import router as simulated_pools_router
from app.api.schemas.simulated_pools import HealthResponse
from app.application.services.apr_manager import AprManager
from app.domain.exceptions import PoolSourceError
from app.shared.config import get_settings


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    manager = get_apr_manager()
    try:
        manager.sync(get_pool_snapshot_port().list_pools())
    except PoolSourceError as exc:
        logger.warning("main: initial pool load failed, starting empty error=%s", exc)
    manager.start()
    try:
        yield
    finally:
        manager.stop()


app = FastAPI(title="APR Simulation API", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(simulated_pools_router)


@app.get("/health", response_model=HealthResponse)
def health(manager: AprManager = Depends(get_apr_manager)):
    return HealthResponse(status="ok", running=manager.is_running)

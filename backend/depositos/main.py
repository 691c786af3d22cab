from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from depositos.core.config import settings
from depositos.core.logging import setup_logger
from depositos.routes import depositos, notifications
from depositos.services.notifications import NotificationQueue, sample_notifications
from depositos.services.repository import DepositoRepository
from depositos.services.view_model import DepositoListViewModel

logger = setup_logger()


def create_app(
    repository: DepositoRepository | None = None,
    notification_queue: NotificationQueue | None = None,
    seed_samples: bool = settings.NOTIFICATIONS_SEED_SAMPLES,
) -> FastAPI:

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # --- dev only: create database and table ---
        if settings.CREATE_TABLES and settings.DEPOSITOS_BACKEND == "sql":
            from depositos.database_init import create_tables
            create_tables()
        yield

    app = FastAPI(title="Depositos API", lifespan=lifespan)

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- Shared state ---
    repo = repository if repository is not None else DepositoRepository()
    app.state.repository = repo
    app.state.list_view = DepositoListViewModel(repo)
    app.state.notifications = notification_queue if notification_queue is not None else NotificationQueue()

    if seed_samples:
        for n in reversed(sample_notifications()):
            app.state.notifications.publish(n)

    # --- Routes ---
    app.include_router(depositos.router)
    app.include_router(notifications.router)

    # --- Root route ---
    @app.get("/")
    def root():
        return {"message": "Depositos API is running"}

    logger.info("Depositos API ready (backend=%s)", settings.DEPOSITOS_BACKEND)
    return app


app = create_app()

import logging

import uvicorn
import yaml
from fastapi import FastAPI

from eventcal.infrastructure.config import settings
from eventcal.infrastructure.logging import configure_logging
from eventcal.infrastructure.repositories.event_repository_memory_impl import InMemoryEventRepositoryImpl
from eventcal.presentation.errors import register_exception_handlers
from eventcal.presentation.middleware import RequestLogMiddleware
from eventcal.presentation.routers import router

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="eventcal")


# Use the contractual schema
def custom_openapi():
    with open(settings.openapi_path, encoding="utf-8") as f:
        return yaml.safe_load(f)


# One store for the lifetime of the process; nothing to flush on shutdown
app.state.event_repository = InMemoryEventRepositoryImpl()

app.openapi = custom_openapi
register_exception_handlers(app)
app.add_middleware(RequestLogMiddleware)
app.include_router(router)


def run() -> None:
    host = str(settings.address)
    logger.info("Listening on %s:%s", host, settings.port)
    uvicorn.run(app, host=host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()

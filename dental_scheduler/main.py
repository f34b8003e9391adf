import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dental_scheduler.core import config
from dental_scheduler.routes import appointment_routes
from dental_scheduler.scheduler import Scheduler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        config.validate_runtime_config()
    except (ValueError, RuntimeError):
        logger.exception('Scheduling configuration is invalid. Check WORK_*, LUNCH_* and APPOINTMENT_DURATION_MINUTES.')
        raise

    # One booking set per running app; it is discarded on shutdown.
    app.state.scheduler = Scheduler()
    yield
    del app.state.scheduler


app = FastAPI(debug=config.DEBUG, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)


@app.get('/')
def root():
    return {'status': 'Dental Scheduler API Running'}


app.include_router(appointment_routes.router)

# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
SafetyNet Alerts Service
========================
Answers emergency-response questions over three independent record sets:
residents, fire station assignments and medical profiles. Every query joins
them at request time against an immutable snapshot of the store.

    GET /firestation?stationNumber=   coverage with adult/child counts
    GET /childAlert?address=          children and other household members
    GET /phoneAlert?firestation=      phone numbers covered by a station
    GET /fire?address=                residents, medical info, covering station
    GET /flood/stations?stations=     households grouped by address
    GET /personInfo?firstName=&lastName=
    GET /communityEmail?city=

Port: 8080
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from safetynet.controllers import (
    alert_controller,
    firestation_controller,
    medical_record_controller,
    person_controller,
    system_controller,
)
from safetynet.core.config import settings
from safetynet.core.dependencies import get_data_file_repo, get_record_store
from safetynet.core.error_handlers import register_error_handlers
from safetynet.core.logging import get_logger
from safetynet.middleware import MetricsMiddleware, RequestIDMiddleware
from safetynet.services.record_service import update_record_gauges

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI):
    """Load the data file into the record store on startup."""
    snapshot = get_data_file_repo().load_into(get_record_store())
    update_record_gauges(snapshot)
    logger.info(
        "%s v%s started — records=%s, persist_on_mutation=%s",
        settings.SERVICE_NAME,
        settings.SERVICE_VERSION,
        snapshot.counts(),
        settings.PERSIST_ON_MUTATION,
    )
    yield
    logger.info("%s shutting down", settings.SERVICE_NAME)


# ── FastAPI App ──
app = FastAPI(
    title="SafetyNet Alerts",
    description="Emergency alert lookups over residents, fire stations and medical records.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)

register_error_handlers(app)

# ── Routers ──
app.include_router(system_controller.router)
app.include_router(firestation_controller.router)
app.include_router(alert_controller.router)
app.include_router(person_controller.router)
app.include_router(medical_record_controller.router)


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=settings.SERVICE_PORT)

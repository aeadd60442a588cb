from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from finance_tracker.api import (
    auth,
    dashboard,
    income_entries,
    income_sources,
    payout_categories,
    payouts,
    savings,
)
from finance_tracker.api.error_handlers import register_error_handlers
from finance_tracker.core.config import CORS_ORIGINS, LOG_LEVEL
from finance_tracker.core.logging import setup_logging
from finance_tracker.database import create_db_and_tables
from finance_tracker.schemas.savings import SavingsMode

setup_logging(LOG_LEVEL)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Falla al arrancar si SAVINGS_MODE o SAVINGS_RATE no son válidos
    mode = savings.get_savings_mode()
    if mode == SavingsMode.fixed_rate:
        savings.get_savings_rate()
    create_db_and_tables()
    logger.info("Finance tracker started (savings mode: {})", mode.value)
    yield

app = FastAPI(title="Finance Tracker", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(auth.router)
app.include_router(income_sources.router)
app.include_router(income_entries.router)
app.include_router(payout_categories.router)
app.include_router(payouts.router)
app.include_router(savings.router)
app.include_router(dashboard.router)

@app.get("/")
def root():
    return {"message": "Personal finance tracker API"}

@app.get("/health")
def health():
    return {"status": "ok"}

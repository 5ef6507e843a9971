from fastapi import FastAPI
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware

from balance_compartido.api import debts, transactions
from balance_compartido.core.config import CORS_ORIGINS, LOG_LEVEL
from balance_compartido.core.logging import setup_logging
from balance_compartido.database import create_db_and_tables

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(LOG_LEVEL)
    create_db_and_tables()
    yield

app = FastAPI(title="Balance Compartido", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(debts.router)
app.include_router(transactions.router)

@app.get("/")
def root():
    return {"message": "Servidor de finanzas del hogar"}

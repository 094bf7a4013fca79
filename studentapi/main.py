"""
Point d'entrée principal de l'API Étudiants.
Démarrage : uvicorn studentapi.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from studentapi.config import settings
from studentapi.database import init_db
from studentapi.logging_config import setup_logging
from studentapi.routers import etudiants

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Cycle de vie de l'application : journalisation puis création des tables."""
    setup_logging(settings.LOG_LEVEL)
    init_db()
    logger.info("API Étudiants démarrée (env=%s)", settings.ENV)
    yield


app = FastAPI(
    title="Étudiants API",
    description="API CRUD de gestion des étudiants",
    version=VERSION,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# CORS — origines autorisées définies par CORS_ORIGINS (["*"] par défaut).
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
)


app.include_router(etudiants.router)


@app.exception_handler(SQLAlchemyError)
async def storage_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """
    Erreurs de la base de données. Un handler sur une classe précise est exécuté
    par ExceptionMiddleware, à l'intérieur de CORSMiddleware : la réponse 500
    reçoit donc les headers CORS et reste lisible par le navigateur.
    """
    logger.error("Erreur de stockage : %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Une erreur interne est survenue."},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Dernier recours pour les autres exceptions non gérées. Starlette le rattache à
    ServerErrorMiddleware, hors de CORSMiddleware : cette réponse 500 ne porte pas
    de headers CORS.
    """
    logger.error("Exception non gérée : %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Une erreur interne est survenue."},
    )


@app.get("/api/health", tags=["Santé"])
def health_check():
    """Vérifie que l'API est opérationnelle."""
    return {"status": "ok", "service": "Étudiants API", "version": VERSION}

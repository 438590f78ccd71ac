#api_gateway/routers/health.py

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from comun.database import BaseDatos, obtener_db

router = APIRouter(tags=["Healthcheck"])
logger = logging.getLogger(__name__)


@router.get("", include_in_schema=False)
@router.get("/")
def health_check(db: BaseDatos = Depends(obtener_db)):
    """Público. Responde 503 si la base CC no contesta."""
    try:
        db.consultar("SELECT 1;")
    except Exception as e:
        logger.error(f"❌ Healthcheck: base de datos no disponible: {e}")
        return JSONResponse(
            status_code=503,
            content={"status": "degraded", "service": "entrenadores_api", "database": "unavailable"},
        )
    return {"status": "ok", "service": "entrenadores_api", "database": "ok"}

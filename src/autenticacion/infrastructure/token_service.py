# autenticacion/infrastructure/token_service.py

import logging
from datetime import datetime, timedelta, timezone

import jwt

from api_gateway.config import settings
from autenticacion.domain.entities import Identidad

logger = logging.getLogger(__name__)


def generar_token(usuario_id: str, role: str) -> str:
    payload = {
        "id": str(usuario_id),
        "role": role,
        "exp": datetime.now(timezone.utc) + timedelta(minutes=settings.JWT_EXPIRACION_MINUTOS),
    }
    logger.info(f"🔑 Generando token para id={usuario_id} role={role}")
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def verificar_token(token: str) -> Identidad:
    """
    Verifica firma y expiración. Lanza jwt.InvalidTokenError (incluye ExpiredSignatureError)
    si el token no es válido o le faltan los claims id/role.
    """
    payload = jwt.decode(
        token,
        settings.JWT_SECRET_KEY,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["exp"]},
    )
    if not payload.get("id") or not payload.get("role"):
        raise jwt.InvalidTokenError("Token sin claims id/role")
    return Identidad(id=str(payload["id"]), role=payload["role"])

# autenticacion/utils/dependencies.py

import logging
from typing import Optional

import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from autenticacion.domain.entities import ROL_ADMIN, ROL_ENTRENADOR, Identidad
from autenticacion.infrastructure.token_service import verificar_token
from comun.errores import AccesoProhibido, TokenAusente, TokenInvalido

logger = logging.getLogger(__name__)

# auto_error=False: la ausencia de token se responde con 401 propio, no con el default de FastAPI
bearer_scheme = HTTPBearer(auto_error=False)

NOMBRES_ROL = {
    ROL_ADMIN: "Administrador",
    ROL_ENTRENADOR: "Entrenador",
}


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Identidad:
    """
    Valida el token JWT del header Authorization y devuelve la identidad (id, role).
    Sin token -> 401. Token con firma inválida, malformado o expirado -> 403.
    """
    if credentials is None or not credentials.credentials:
        logger.warning("⚠️ Token no encontrado.")
        raise TokenAusente()

    try:
        identidad = verificar_token(credentials.credentials)
    except jwt.InvalidTokenError as e:
        logger.warning(f"⚠️ Token inválido: {e}")
        raise TokenInvalido()

    logger.debug(f"Token válido. Usuario id={identidad.id} role={identidad.role}")
    request.state.usuario = identidad
    return identidad


def autorizar(identidad: Optional[Identidad], rol_requerido: str) -> Identidad:
    if identidad is None or identidad.role != rol_requerido:
        logger.warning(f"⚠️ Acceso denegado. Se requiere rol {rol_requerido}. Usuario: {identidad}")
        nombre = NOMBRES_ROL.get(rol_requerido, rol_requerido)
        raise AccesoProhibido(f"Acceso denegado: Se requiere rol de {nombre}.")
    return identidad


def requerir_rol(rol_requerido: str):
    def _verificar_rol(identidad: Identidad = Depends(get_current_user)) -> Identidad:
        return autorizar(identidad, rol_requerido)

    return _verificar_rol


solo_admin = requerir_rol(ROL_ADMIN)
solo_entrenador = requerir_rol(ROL_ENTRENADOR)

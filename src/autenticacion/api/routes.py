# autenticacion/api/routes.py

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from autenticacion.application.auth_service import AuthService
from autenticacion.domain.entities import Identidad
from autenticacion.domain.schemas import LoginAdminRequest, LoginEntrenadorRequest
from autenticacion.infrastructure.auth_repository import AuthRepository
from autenticacion.utils.dependencies import solo_entrenador
from comun.database import BaseDatos, obtener_db
from comun.resultado import ResultadoOperacion

router = APIRouter(prefix="/api", tags=["Autenticación"])
logger = logging.getLogger(__name__)


def _responder_login(resultado: ResultadoOperacion) -> JSONResponse:
    if resultado.success:
        return JSONResponse(status_code=200, content=resultado.data.to_dict())
    if resultado.status_code == 401:
        return JSONResponse(status_code=401, content={"success": False, "message": resultado.message})
    raise resultado.como_error()


@router.post("/login/admin", summary="Login de administrador por número de documento")
def login_admin(request: LoginAdminRequest, db: BaseDatos = Depends(obtener_db)):
    logger.info("📩 Petición recibida en login admin.")
    service = AuthService(AuthRepository(db))
    return _responder_login(service.autenticar_admin(request.numeroDocumento))


@router.post("/login/entrenador", summary="Login de entrenador por correo y número de documento")
def login_entrenador(request: LoginEntrenadorRequest, db: BaseDatos = Depends(obtener_db)):
    logger.info("📩 Petición recibida en login entrenador.")
    logger.debug(f"Login entrenador para {request.correo}.")
    service = AuthService(AuthRepository(db))
    return _responder_login(service.autenticar_entrenador(request.correo, request.numeroDocumento))


@router.get("/entrenador/perfil", summary="Perfil del entrenador autenticado")
def perfil_entrenador(identidad: Identidad = Depends(solo_entrenador)):
    return {
        "message": f"Bienvenido a tu perfil, ID: {identidad.id}, Rol: {identidad.role}",
        "id": identidad.id,
        "role": identidad.role,
    }

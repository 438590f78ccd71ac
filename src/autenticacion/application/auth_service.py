# autenticacion/application/auth_service.py

import logging

from autenticacion.domain.entities import (
    ROL_ADMIN,
    ROL_ENTRENADOR,
    ResultadoAutenticacion,
)
from autenticacion.infrastructure.auth_repository import AuthRepository
from autenticacion.infrastructure.token_service import generar_token
from comun.errores import TipoError
from comun.resultado import ResultadoOperacion
from comun.traductor import traducir_error

logger = logging.getLogger(__name__)

MENSAJE_ADMIN_INVALIDO = "Credenciales inválidas o administrador inactivo."
MENSAJE_ENTRENADOR_INVALIDO = "Credenciales inválidas o entrenador inactivo."


class AuthService:
    def __init__(self, repo: AuthRepository):
        self.repo = repo

    def autenticar_admin(self, numero_documento: str) -> ResultadoOperacion[ResultadoAutenticacion]:
        logger.debug("Intentando autenticar admin por número de documento.")
        try:
            admin = self.repo.buscar_admin_activo(numero_documento)
        except Exception as e:
            return traducir_error(e, "AUTH_ADMIN")

        if not admin:
            logger.warning("⚠️ Admin no encontrado o inactivo.")
            return ResultadoOperacion.fallo(TipoError.NO_AUTORIZADO.status, MENSAJE_ADMIN_INVALIDO)

        token = generar_token(admin.id, ROL_ADMIN)
        logger.info(f"✅ Admin {admin.id} autenticado.")
        return ResultadoOperacion.exito(
            ResultadoAutenticacion(success=True, user=admin, role=ROL_ADMIN, token=token)
        )

    def autenticar_entrenador(self, correo: str, numero_documento: str) -> ResultadoOperacion[ResultadoAutenticacion]:
        logger.debug(f"Intentando autenticar entrenador con correo {correo}.")
        try:
            entrenador = self.repo.buscar_entrenador_activo(correo, numero_documento)
        except Exception as e:
            return traducir_error(e, "AUTH_ENTRENADOR")

        if not entrenador:
            logger.warning("⚠️ Entrenador no encontrado o inactivo.")
            return ResultadoOperacion.fallo(TipoError.NO_AUTORIZADO.status, MENSAJE_ENTRENADOR_INVALIDO)

        token = generar_token(entrenador.id, ROL_ENTRENADOR)
        logger.info(f"✅ Entrenador {entrenador.id} autenticado.")
        return ResultadoOperacion.exito(
            ResultadoAutenticacion(success=True, user=entrenador, role=ROL_ENTRENADOR, token=token)
        )

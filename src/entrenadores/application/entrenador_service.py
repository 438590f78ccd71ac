# entrenadores/application/entrenador_service.py

import logging
from typing import Optional

from comun.errores import TipoError
from comun.resultado import ResultadoOperacion
from comun.traductor import es_no_encontrado, traducir_error
from entrenadores.domain.entities import (
    ActualizacionEntrenador,
    Entrenador,
    RegistroEntrenador,
    ResultadoEscritura,
)
from entrenadores.infrastructure.entrenador_repository import EntrenadorRepository

logger = logging.getLogger(__name__)


class EntrenadorService:
    """Casos de uso de administración de entrenadores. Cada método hace una sola llamada a la BD."""

    def __init__(self, repo: EntrenadorRepository):
        self.repo = repo

    def registrar(self, registro: RegistroEntrenador) -> ResultadoOperacion[ResultadoEscritura]:
        logger.debug(f"Registrando entrenador con documento {registro.sigla_tipo_documento}-{registro.numero_documento}")
        try:
            resultado = self.repo.registrar(registro)
        except Exception as e:
            return traducir_error(e, "REGISTRAR_ENTRENADOR")

        if resultado is None:
            return ResultadoOperacion.fallo(
                TipoError.INESPERADO.status,
                "No se pudo registrar al entrenador, la función no devolvió resultado.",
            )

        logger.info(f"✅ Entrenador registrado: {resultado.entrenador_id}")
        return ResultadoOperacion.exito(resultado)

    def listar(self, nombre_facultad: Optional[str] = None) -> ResultadoOperacion[list[Entrenador]]:
        try:
            entrenadores = self.repo.listar(nombre_facultad)
        except Exception as e:
            return traducir_error(e, "LISTAR_ENTRENADORES")
        return ResultadoOperacion.exito(entrenadores)

    def actualizar(self, entrenador_id: str, cambios: ActualizacionEntrenador) -> ResultadoOperacion[ResultadoEscritura]:
        if cambios.vacia:
            # la función de BD responde con "no se especificaron cambios"
            logger.info(f"ℹ️ Sin campos para actualizar en entrenador {entrenador_id}.")
        try:
            resultado = self.repo.actualizar(entrenador_id, cambios)
        except Exception as e:
            return traducir_error(e, "ACTUALIZAR_ENTRENADOR")

        if resultado is None:
            return ResultadoOperacion.fallo(
                TipoError.INESPERADO.status,
                "No se pudo actualizar la información del entrenador, la función no devolvió resultado.",
            )

        logger.info(f"✅ Entrenador {entrenador_id} procesado: {resultado.mensaje}")
        return ResultadoOperacion.exito(resultado)

    def desactivar(self, entrenador_id: str) -> ResultadoOperacion[ResultadoEscritura]:
        try:
            resultado = self.repo.desactivar(entrenador_id)
        except Exception as e:
            return traducir_error(e, "DESACTIVAR_ENTRENADOR")

        if resultado is None:
            return ResultadoOperacion.fallo(
                TipoError.INESPERADO.status,
                "No se pudo desactivar al entrenador, la función no devolvió resultado.",
            )

        if not resultado.exito:
            tipo = TipoError.NO_ENCONTRADO if es_no_encontrado(resultado.mensaje) else TipoError.VALIDACION
            logger.warning(f"⚠️ Desactivación no realizada para {entrenador_id}: {resultado.mensaje}")
            return ResultadoOperacion.fallo(
                tipo.status,
                resultado.mensaje or "No se pudo desactivar al entrenador.",
                {"entrenadorId": resultado.entrenador_id or str(entrenador_id), "exito": False},
            )

        logger.info(f"✅ Entrenador {entrenador_id} desactivado.")
        return ResultadoOperacion.exito(resultado)

# entrenadores/api/routes.py

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query

from autenticacion.utils.dependencies import solo_admin
from comun.database import BaseDatos, obtener_db
from entrenadores.application.entrenador_service import EntrenadorService
from entrenadores.domain.schemas import ActualizacionEntrenadorRequest, RegistroEntrenadorRequest
from entrenadores.infrastructure.entrenador_repository import EntrenadorRepository

router = APIRouter(prefix="/api/admin", tags=["Administración de Entrenadores"], dependencies=[Depends(solo_admin)])
logger = logging.getLogger(__name__)


def get_service(db: BaseDatos = Depends(obtener_db)) -> EntrenadorService:
    return EntrenadorService(EntrenadorRepository(db))


@router.post("/entrenadores", status_code=201, summary="Registrar nuevo entrenador")
def registrar_entrenador(request: RegistroEntrenadorRequest, service: EntrenadorService = Depends(get_service)):
    logger.info(f"📩 Petición para registrar entrenador con documento {request.siglaTipoDocumento}.")
    logger.debug(f"Correo del entrenador a registrar: {request.correo}")
    resultado = service.registrar(request.a_entidad()).obtener()
    return {
        "message": resultado.mensaje or "Entrenador registrado exitosamente.",
        "entrenadorId": resultado.entrenador_id,
        "details": resultado.detalles,
    }


@router.get("/entrenadores", summary="Listar entrenadores")
def listar_entrenadores(
    nombreFacultad: Optional[str] = Query(None, description="Filtrar por nombre de facultad"),
    service: EntrenadorService = Depends(get_service),
):
    filtros = {"nombreFacultad": nombreFacultad} if nombreFacultad else {}
    logger.info(f"📩 Petición para listar entrenadores. Filtros: {filtros}")
    entrenadores = service.listar(nombreFacultad).obtener()
    return {
        "message": "Lista de entrenadores obtenida exitosamente.",
        "total": len(entrenadores),
        "filtrosAplicados": filtros,
        "entrenadores": [e.to_dict() for e in entrenadores],
    }


@router.put("/entrenadores/{entrenadorID}", summary="Actualizar información de un entrenador")
def actualizar_entrenador(
    entrenadorID: UUID = Path(..., description="UUID del entrenador"),
    request: Optional[ActualizacionEntrenadorRequest] = None,
    service: EntrenadorService = Depends(get_service),
):
    logger.info(f"📩 Petición para actualizar entrenador {entrenadorID}.")
    cambios = (request or ActualizacionEntrenadorRequest()).a_entidad()
    resultado = service.actualizar(str(entrenadorID), cambios).obtener()
    return {
        "message": resultado.mensaje or "Información del entrenador actualizada.",
        "entrenadorId": resultado.entrenador_id,
        "details": resultado.detalles,
    }


@router.put("/entrenadores/{entrenadorID}/desactivar", summary="Desactivar entrenador")
def desactivar_entrenador(
    entrenadorID: UUID = Path(..., description="UUID del entrenador"),
    service: EntrenadorService = Depends(get_service),
):
    logger.info(f"📩 Petición para desactivar entrenador {entrenadorID}.")
    resultado = service.desactivar(str(entrenadorID)).obtener()
    return {
        "message": resultado.mensaje or "Entrenador desactivado exitosamente.",
        "entrenadorId": resultado.entrenador_id or str(entrenadorID),
        "exito": True,
    }

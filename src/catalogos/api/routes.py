# catalogos/api/routes.py

import logging

from fastapi import APIRouter, Depends

from autenticacion.utils.dependencies import get_current_user
from catalogos.application.catalogo_service import CatalogoService
from catalogos.infrastructure.catalogo_repository import CatalogoRepository
from comun.database import BaseDatos, obtener_db

# Solo requiere un token válido, cualquier rol
router = APIRouter(prefix="/api", tags=["Catálogos"], dependencies=[Depends(get_current_user)])
logger = logging.getLogger(__name__)


def get_service(db: BaseDatos = Depends(obtener_db)) -> CatalogoService:
    return CatalogoService(CatalogoRepository(db))


@router.get("/facultades", summary="Listar facultades")
def listar_facultades(service: CatalogoService = Depends(get_service)):
    facultades = service.listar_facultades().obtener()
    return {
        "message": "Facultades obtenidas exitosamente.",
        "total": len(facultades),
        "facultades": facultades,
    }


@router.get("/tipos-documento", summary="Listar tipos de documento")
def listar_tipos_documento(service: CatalogoService = Depends(get_service)):
    tipos = service.listar_tipos_documento().obtener()
    return {
        "message": "Tipos de documento obtenidos exitosamente.",
        "total": len(tipos),
        "tiposDocumento": tipos,
    }

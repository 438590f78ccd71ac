# comun/traductor.py

import logging
from typing import Optional

import psycopg2.errors

from api_gateway.config import settings
from comun.errores import ErrorAplicacion, TipoError
from comun.resultado import ResultadoOperacion

logger = logging.getLogger(__name__)

CODIGO_UNICIDAD = "23505"

MARCADORES_UNICIDAD = (
    "duplicate key",
    "unique constraint",
    "ya existe",
    "ya está registrado",
    "ya esta registrado",
    "duplicad",
)
MARCADORES_NO_ENCONTRADO = ("no encontrado", "no encontrada", "not found")
# clase 42: errores de sintaxis o de objetos del esquema (función, relación, columna)
CLASE_ERROR_ESQUEMA = "42"

MENSAJE_DUPLICADO = "Ya existe un entrenador registrado con ese documento o correo."
MENSAJE_INESPERADO = "Error interno del servidor."


def _texto(error: BaseException) -> str:
    return str(getattr(error, "pgerror", None) or error or "").strip()


def _hint(error: BaseException) -> Optional[str]:
    diag = getattr(error, "diag", None)
    hint = getattr(diag, "message_hint", None) if diag is not None else None
    return hint or None


def es_error_de_esquema(error: BaseException) -> bool:
    return str(getattr(error, "pgcode", None) or "").startswith(CLASE_ERROR_ESQUEMA)


def es_violacion_unicidad(error: BaseException) -> bool:
    if isinstance(error, psycopg2.errors.UniqueViolation):
        return True
    if getattr(error, "pgcode", None) == CODIGO_UNICIDAD:
        return True
    if es_error_de_esquema(error):
        return False
    texto = _texto(error).lower()
    return any(marcador in texto for marcador in MARCADORES_UNICIDAD)


def es_no_encontrado(texto: Optional[str]) -> bool:
    texto = (texto or "").lower()
    return any(marcador in texto for marcador in MARCADORES_NO_ENCONTRADO)


def traducir_error(error: BaseException, contexto: str = "") -> ResultadoOperacion:
    """
    Clasifica un error de la capa de datos en un ResultadoOperacion fallido.

    Orden de prioridad:
    1. ErrorAplicacion ya trae status -> se propaga sin cambios.
    2. Violación de unicidad (código 23505 o texto) -> 409, con el hint de la BD si existe.
    3. Texto con marcador de "no encontrado" -> 404 con el mensaje de la BD
       (nunca para errores de clase 42, que delatan SQL interno).
    4. Cualquier otro -> 500 genérico; el texto crudo solo fuera de producción.
    """
    if isinstance(error, ErrorAplicacion):
        return ResultadoOperacion.desde_error(error)

    if es_violacion_unicidad(error):
        mensaje = _hint(error) or MENSAJE_DUPLICADO
        logger.warning(f"⚠️ [{contexto}] Violación de unicidad: {_texto(error)}")
        return ResultadoOperacion.fallo(TipoError.CONFLICTO.status, mensaje)

    texto = _texto(error)
    if not es_error_de_esquema(error) and es_no_encontrado(texto):
        logger.warning(f"⚠️ [{contexto}] Recurso no encontrado: {texto}")
        return ResultadoOperacion.fallo(TipoError.NO_ENCONTRADO.status, _primera_linea(texto))

    logger.error(f"❌ [{contexto}] Error no clasificado en la capa de datos: {texto}", exc_info=error)
    detalles = None if settings.es_produccion else {"error": texto, "tipo": type(error).__name__}
    return ResultadoOperacion.fallo(TipoError.INESPERADO.status, MENSAJE_INESPERADO, detalles)


def _primera_linea(texto: str) -> str:
    # psycopg2 agrega CONTEXT y líneas del plpgsql al pgerror
    linea = texto.splitlines()[0] if texto else texto
    if linea.upper().startswith("ERROR:"):
        linea = linea[len("ERROR:"):].strip()
    return linea

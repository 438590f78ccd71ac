# comun/validacion.py

from typing import Any, Iterable, Type, TypeVar

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ValidationError

from comun.errores import ErrorValidacion

M = TypeVar("M", bound=BaseModel)

UBICACIONES = {"body", "path", "query", "header"}

MENSAJES_POR_TIPO = {
    "missing": "El campo '{campo}' es requerido.",
    "string_type": "El campo '{campo}' debe ser texto.",
    "list_type": "El campo '{campo}' debe ser un array.",
    "too_short": "El campo '{campo}' no cumple la longitud mínima.",
    "too_long": "El campo '{campo}' excede la longitud máxima.",
    "string_too_short": "El campo '{campo}' no cumple la longitud mínima.",
    "string_too_long": "El campo '{campo}' excede la longitud máxima.",
    "string_pattern_mismatch": "El campo '{campo}' tiene un formato inválido.",
    "uuid_parsing": "El campo '{campo}' debe ser un UUID válido.",
    "uuid_type": "El campo '{campo}' debe ser un UUID válido.",
    "date_parsing": "El campo '{campo}' debe tener formato de fecha ISO-8601 (YYYY-MM-DD).",
    "date_from_datetime_parsing": "El campo '{campo}' debe tener formato de fecha ISO-8601 (YYYY-MM-DD).",
    "date_from_datetime_inexact": "El campo '{campo}' debe ser una fecha sin hora.",
    "date_type": "El campo '{campo}' debe tener formato de fecha ISO-8601 (YYYY-MM-DD).",
    "model_attributes_type": "El cuerpo de la petición debe ser un objeto JSON.",
    "dict_type": "El cuerpo de la petición debe ser un objeto JSON.",
    "json_invalid": "El cuerpo de la petición no es un JSON válido.",
}


def _ruta(loc: Iterable[Any]) -> tuple[str, str]:
    partes = list(loc)
    ubicacion = "body"
    if partes and partes[0] in UBICACIONES:
        ubicacion = partes.pop(0)
    return ".".join(str(p) for p in partes), ubicacion


def formatear_errores(errores: list[dict]) -> list[dict]:
    """Convierte los errores de pydantic en la lista de errores por campo que recibe el cliente."""
    resultado = []
    for error in errores:
        campo, ubicacion = _ruta(error.get("loc", ()))
        tipo = error.get("type", "")
        if tipo == "value_error" and error.get("ctx", {}).get("error") is not None:
            mensaje = str(error["ctx"]["error"])
        elif tipo in MENSAJES_POR_TIPO:
            mensaje = MENSAJES_POR_TIPO[tipo].format(campo=campo or "body")
        else:
            mensaje = error.get("msg", "Valor inválido.")
        resultado.append({"campo": campo, "mensaje": mensaje, "ubicacion": ubicacion})
    return resultado


def validar(modelo: Type[M], datos: Any) -> M:
    """Valida el payload completo contra el conjunto de reglas y acumula todos los errores."""
    try:
        return modelo.model_validate(datos)
    except ValidationError as e:
        raise ErrorValidacion(formatear_errores(e.errors())) from e


def normalizar_correo(valor: str) -> str:
    """Valida el formato del correo y lo devuelve normalizado en minúsculas."""
    try:
        info = validate_email(valor.strip(), check_deliverability=False)
    except EmailNotValidError:
        raise ValueError("Debe proporcionar un correo electrónico válido.")
    return info.normalized.lower()

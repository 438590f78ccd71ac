# comun/errores.py

from enum import Enum
from typing import Any, Optional


class TipoError(Enum):
    VALIDACION = 400
    NO_AUTORIZADO = 401
    PROHIBIDO = 403
    NO_ENCONTRADO = 404
    CONFLICTO = 409
    INESPERADO = 500

    @property
    def status(self) -> int:
        return self.value

    @classmethod
    def desde_status(cls, status_code: int) -> "TipoError":
        for tipo in cls:
            if tipo.value == status_code:
                return tipo
        return cls.VALIDACION if 400 <= status_code < 500 else cls.INESPERADO


class ErrorAplicacion(Exception):
    """
    Error ya clasificado: tipo, status HTTP, mensaje para el cliente y detalles opcionales.
    Una vez creado no se vuelve a clasificar.
    """

    def __init__(self, tipo: TipoError, mensaje: str, detalles: Optional[Any] = None, status: Optional[int] = None):
        super().__init__(mensaje)
        self.tipo = tipo
        self.mensaje = mensaje
        self.detalles = detalles
        self.status = status or tipo.status

    @property
    def es_error_cliente(self) -> bool:
        return 400 <= self.status < 500

    def __repr__(self):
        return f"ErrorAplicacion(tipo={self.tipo.name}, status={self.status}, mensaje={self.mensaje!r})"


class ErrorValidacion(ErrorAplicacion):
    def __init__(self, errores: list, mensaje: str = "Errores de validación."):
        super().__init__(TipoError.VALIDACION, mensaje, detalles=errores)
        self.errores = errores


class TokenAusente(ErrorAplicacion):
    def __init__(self, mensaje: str = "Acceso denegado: Token no proporcionado."):
        super().__init__(TipoError.NO_AUTORIZADO, mensaje)


class TokenInvalido(ErrorAplicacion):
    def __init__(self, mensaje: str = "Acceso denegado: Token inválido."):
        super().__init__(TipoError.PROHIBIDO, mensaje)


class AccesoProhibido(ErrorAplicacion):
    def __init__(self, mensaje: str):
        super().__init__(TipoError.PROHIBIDO, mensaje)

# comun/resultado.py

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from comun.errores import ErrorAplicacion, TipoError

T = TypeVar("T")


@dataclass(frozen=True)
class ResultadoOperacion(Generic[T]):
    """Resultado uniforme de cada caso de uso: éxito con datos o fallo con status y mensaje."""

    success: bool
    data: Optional[T] = None
    status_code: Optional[int] = None
    message: Optional[str] = None
    details: Optional[Any] = None

    @classmethod
    def exito(cls, data: T) -> "ResultadoOperacion[T]":
        return cls(success=True, data=data)

    @classmethod
    def fallo(cls, status_code: int, message: str, details: Optional[Any] = None) -> "ResultadoOperacion[T]":
        return cls(success=False, status_code=status_code, message=message, details=details)

    @classmethod
    def desde_error(cls, error: ErrorAplicacion) -> "ResultadoOperacion[T]":
        return cls.fallo(error.status, error.mensaje, error.detalles)

    def como_error(self) -> ErrorAplicacion:
        if self.success:
            raise ValueError("Un resultado exitoso no se puede convertir en error")
        return ErrorAplicacion(
            TipoError.desde_status(self.status_code),
            self.message,
            detalles=self.details,
            status=self.status_code,
        )

    def obtener(self) -> T:
        """Devuelve los datos o lanza el ErrorAplicacion equivalente al fallo."""
        if not self.success:
            raise self.como_error()
        return self.data

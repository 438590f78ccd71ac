#entrenadores/domain/entities.py

from dataclasses import dataclass, field, fields
from datetime import date
from typing import Any, Optional


class _Ausente:
    """Marca un campo que no vino en la petición (distinto de un null explícito)."""

    def __bool__(self):
        return False

    def __repr__(self):
        return "AUSENTE"


AUSENTE = _Ausente()


@dataclass(frozen=True)
class RegistroEntrenador:
    sigla_tipo_documento: str
    nombres: str
    apellidos: str
    numero_documento: str
    correo: str
    facultad_nombres: list[str]
    fecha_fin: Optional[date] = None


@dataclass(frozen=True)
class ActualizacionEntrenador:
    # parámetro de la función CC.ModificarInformacionEntrenadorUFT en metadata
    nuevos_nombres: Any = field(default=AUSENTE, metadata={"parametro": "pNuevosNombres"})
    nuevos_apellidos: Any = field(default=AUSENTE, metadata={"parametro": "pNuevosApellidos"})
    nuevo_correo: Any = field(default=AUSENTE, metadata={"parametro": "pNuevoCorreo"})
    nueva_fecha_fin: Any = field(default=AUSENTE, metadata={"parametro": "pNuevaFechaFin"})
    nuevos_nombres_facultades: Any = field(default=AUSENTE, metadata={"parametro": "pNuevosNombresFacultades"})

    def parametros_presentes(self) -> dict[str, Any]:
        """Pares parámetro -> valor solo de los campos presentes, en el orden de la firma."""
        return {
            f.metadata["parametro"]: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not AUSENTE
        }

    @property
    def vacia(self) -> bool:
        return not self.parametros_presentes()


@dataclass
class Entrenador:
    id: str
    nombres: str
    apellidos: str
    sigla_tipo_documento: Optional[str]
    numero_documento: Optional[str]
    correo: Optional[str]
    facultades: list[str]
    estado: Optional[str]

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "nombres": self.nombres,
            "apellidos": self.apellidos,
            "siglaTipoDocumento": self.sigla_tipo_documento,
            "numeroDocumento": self.numero_documento,
            "correo": self.correo,
            "facultades": self.facultades,
            "estado": self.estado,
        }


@dataclass
class ResultadoEscritura:
    """Fila devuelta por las funciones de registro/modificación/desactivación."""

    mensaje: str
    entrenador_id: Optional[str] = None
    detalles: Optional[Any] = None
    exito: Optional[bool] = None

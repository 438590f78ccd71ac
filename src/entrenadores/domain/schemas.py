#entrenadores/domain/schemas.py

import re
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from comun.validacion import normalizar_correo
from entrenadores.domain.entities import AUSENTE, ActualizacionEntrenador, RegistroEntrenador

SOLO_DIGITOS = re.compile(r"^[0-9]{5,20}$")
FECHA_ISO = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
MENSAJE_FECHA_ISO = "La fecha de fin debe tener formato de fecha ISO-8601 (YYYY-MM-DD)."


def _texto_en_rango(valor: str, minimo: int, maximo: int, mensaje: str) -> str:
    valor = valor.strip()
    if not minimo <= len(valor) <= maximo:
        raise ValueError(mensaje)
    return valor


def _lista_facultades(valores: list[str]) -> list[str]:
    limpios = [v.strip() for v in valores]
    if any(not v for v in limpios):
        raise ValueError("Cada nombre de facultad en el array debe ser un texto no vacío.")
    return limpios


def _fecha_iso(valor):
    """Solo acepta una fecha YYYY-MM-DD (o un date); rechaza timestamps y fechas con hora."""
    if valor is None:
        return valor
    if isinstance(valor, date) and not isinstance(valor, datetime):
        return valor
    if isinstance(valor, str) and FECHA_ISO.match(valor.strip()):
        return valor.strip()
    raise ValueError(MENSAJE_FECHA_ISO)


# ========================
# Registro
# ========================
class RegistroEntrenadorRequest(BaseModel):
    siglaTipoDocumento: str
    nombres: str
    apellidos: str
    numeroDocumento: str
    correo: str
    facultadNombres: list[str]
    fechaFin: Optional[date] = None

    @field_validator("siglaTipoDocumento")
    @classmethod
    def validar_sigla(cls, valor: str) -> str:
        return _texto_en_rango(valor, 1, 5, "La sigla del tipo de documento es requerida y debe tener entre 1 y 5 caracteres.")

    @field_validator("nombres")
    @classmethod
    def validar_nombres(cls, valor: str) -> str:
        return _texto_en_rango(valor, 1, 200, "Los nombres son requeridos y deben tener entre 1 y 200 caracteres.")

    @field_validator("apellidos")
    @classmethod
    def validar_apellidos(cls, valor: str) -> str:
        return _texto_en_rango(valor, 1, 200, "Los apellidos son requeridos y deben tener entre 1 y 200 caracteres.")

    @field_validator("numeroDocumento")
    @classmethod
    def validar_numero_documento(cls, valor: str) -> str:
        valor = valor.strip()
        if not SOLO_DIGITOS.match(valor):
            raise ValueError("El número de documento debe contener solo dígitos y tener entre 5 y 20 caracteres.")
        return valor

    @field_validator("correo")
    @classmethod
    def validar_correo(cls, valor: str) -> str:
        return normalizar_correo(valor)

    @field_validator("facultadNombres")
    @classmethod
    def validar_facultades(cls, valor: list[str]) -> list[str]:
        if not valor:
            raise ValueError("Se requiere al menos una facultad y debe ser un array.")
        return _lista_facultades(valor)

    @field_validator("fechaFin", mode="before")
    @classmethod
    def validar_formato_fecha_fin(cls, valor):
        return _fecha_iso(valor)

    @field_validator("fechaFin")
    @classmethod
    def validar_fecha_fin(cls, valor: Optional[date]) -> Optional[date]:
        if valor is not None and valor < date.today():
            raise ValueError("La fecha de fin no puede ser anterior a la fecha actual.")
        return valor

    def a_entidad(self) -> RegistroEntrenador:
        return RegistroEntrenador(
            sigla_tipo_documento=self.siglaTipoDocumento,
            nombres=self.nombres,
            apellidos=self.apellidos,
            numero_documento=self.numeroDocumento,
            correo=self.correo,
            facultad_nombres=list(self.facultadNombres),
            fecha_fin=self.fechaFin,
        )


# ========================
# Actualización
# ========================
class ActualizacionEntrenadorRequest(BaseModel):
    nuevosNombres: Optional[str] = None
    nuevosApellidos: Optional[str] = None
    nuevoCorreo: Optional[str] = None
    nuevaFechaFin: Optional[date] = None
    nuevosNombresFacultades: Optional[list[str]] = None

    @field_validator("nuevosNombres")
    @classmethod
    def validar_nombres(cls, valor: Optional[str]) -> Optional[str]:
        if valor is None:
            return valor
        return _texto_en_rango(valor, 2, 200, "Los nuevos nombres deben tener entre 2 y 200 caracteres.")

    @field_validator("nuevosApellidos")
    @classmethod
    def validar_apellidos(cls, valor: Optional[str]) -> Optional[str]:
        if valor is None:
            return valor
        return _texto_en_rango(valor, 2, 200, "Los nuevos apellidos deben tener entre 2 y 200 caracteres.")

    @field_validator("nuevoCorreo")
    @classmethod
    def validar_correo(cls, valor: Optional[str]) -> Optional[str]:
        if valor is None:
            return valor
        return normalizar_correo(valor)

    @field_validator("nuevaFechaFin", mode="before")
    @classmethod
    def validar_formato_fecha_fin(cls, valor):
        return _fecha_iso(valor)

    @field_validator("nuevosNombresFacultades")
    @classmethod
    def validar_facultades(cls, valor: Optional[list[str]]) -> Optional[list[str]]:
        if not valor:
            return valor
        return _lista_facultades(valor)

    def a_entidad(self) -> ActualizacionEntrenador:
        """
        Solo se envían los campos que vinieron en la petición.
        nombres/apellidos/correo en null equivalen a "sin cambio"; fecha de fin y
        facultades en null (o facultades como lista vacía) significan "limpiar".
        """
        presentes = self.model_fields_set

        def _valor(campo: str, admite_null: bool = False):
            if campo not in presentes:
                return AUSENTE
            valor = getattr(self, campo)
            if valor is None and not admite_null:
                return AUSENTE
            return valor

        return ActualizacionEntrenador(
            nuevos_nombres=_valor("nuevosNombres"),
            nuevos_apellidos=_valor("nuevosApellidos"),
            nuevo_correo=_valor("nuevoCorreo"),
            nueva_fecha_fin=_valor("nuevaFechaFin", admite_null=True),
            nuevos_nombres_facultades=_valor("nuevosNombresFacultades", admite_null=True),
        )

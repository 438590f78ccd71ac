#autenticacion/domain/schemas.py

from pydantic import BaseModel, field_validator


class LoginAdminRequest(BaseModel):
    numeroDocumento: str

    @field_validator("numeroDocumento")
    @classmethod
    def validar_documento(cls, valor: str) -> str:
        valor = valor.strip()
        if not valor:
            raise ValueError("Número de documento requerido.")
        return valor


class LoginEntrenadorRequest(BaseModel):
    correo: str
    numeroDocumento: str

    @field_validator("correo")
    @classmethod
    def validar_correo(cls, valor: str) -> str:
        valor = valor.strip().lower()
        if not valor:
            raise ValueError("Correo requerido.")
        return valor

    @field_validator("numeroDocumento")
    @classmethod
    def validar_documento(cls, valor: str) -> str:
        valor = valor.strip()
        if not valor:
            raise ValueError("Número de documento requerido.")
        return valor

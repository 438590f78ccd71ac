# autenticacion/infrastructure/auth_repository.py

from typing import Optional

from autenticacion.domain.entities import UsuarioAutenticado
from comun.database import BaseDatos


class AuthRepository:
    def __init__(self, db: BaseDatos):
        if db is None:
            raise ValueError("❌ La conexión con la base de datos es None.")
        self.db = db

    def buscar_admin_activo(self, numero_documento: str) -> Optional[UsuarioAutenticado]:
        query = """
        SELECT id, nombres, apellidos
        FROM CC.Administrador
        WHERE numeroDocumento = %s AND fechaFin > CURRENT_TIMESTAMP
        """
        filas = self.db.consultar(query, (numero_documento,))
        if not filas:
            return None
        return self._a_usuario(filas[0])

    def buscar_entrenador_activo(self, correo: str, numero_documento: str) -> Optional[UsuarioAutenticado]:
        query = """
        SELECT id, nombres, apellidos
        FROM CC.Entrenador
        WHERE correo = %s AND numeroDocumento = %s AND fechaFin > CURRENT_TIMESTAMP
        """
        filas = self.db.consultar(query, (correo, numero_documento))
        if not filas:
            return None
        return self._a_usuario(filas[0])

    @staticmethod
    def _a_usuario(fila: dict) -> UsuarioAutenticado:
        return UsuarioAutenticado(
            id=str(fila["id"]),
            nombres=fila.get("nombres"),
            apellidos=fila.get("apellidos"),
        )

# catalogos/infrastructure/catalogo_repository.py

import logging

from comun.database import BaseDatos

logger = logging.getLogger(__name__)


class CatalogoRepository:
    def __init__(self, db: BaseDatos):
        if db is None:
            raise ValueError("❌ La conexión con la base de datos es None.")
        self.db = db

    def listar_facultades(self) -> list[dict]:
        query = "SELECT id, nombre FROM CC.ListarFacultadesUV ORDER BY nombre;"
        filas = self.db.consultar(query)
        logger.info(f"📋 {len(filas)} facultades encontradas.")
        return [{"id": _id(f["id"]), "nombre": f["nombre"]} for f in filas]

    def listar_tipos_documento(self) -> list[dict]:
        query = "SELECT id, sigla, nombre FROM CC.ListarTiposDocumentoUV ORDER BY nombre;"
        filas = self.db.consultar(query)
        logger.info(f"📋 {len(filas)} tipos de documento encontrados.")
        return [{"id": _id(f["id"]), "sigla": f["sigla"], "nombre": f["nombre"]} for f in filas]


def _id(valor):
    # los ids pueden venir como UUID o como entero según la tabla
    return valor if isinstance(valor, int) else str(valor)

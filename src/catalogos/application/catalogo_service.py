# catalogos/application/catalogo_service.py

from catalogos.infrastructure.catalogo_repository import CatalogoRepository
from comun.resultado import ResultadoOperacion
from comun.traductor import traducir_error


class CatalogoService:
    def __init__(self, repo: CatalogoRepository):
        self.repo = repo

    def listar_facultades(self) -> ResultadoOperacion[list[dict]]:
        try:
            return ResultadoOperacion.exito(self.repo.listar_facultades())
        except Exception as e:
            return traducir_error(e, "LISTAR_FACULTADES")

    def listar_tipos_documento(self) -> ResultadoOperacion[list[dict]]:
        try:
            return ResultadoOperacion.exito(self.repo.listar_tipos_documento())
        except Exception as e:
            return traducir_error(e, "LISTAR_TIPOS_DOCUMENTO")

# entrenadores/infrastructure/entrenador_repository.py

import logging
from typing import Optional

from comun.database import BaseDatos
from entrenadores.domain.entities import (
    ActualizacionEntrenador,
    Entrenador,
    RegistroEntrenador,
    ResultadoEscritura,
)

logger = logging.getLogger(__name__)


def _primero(fila: dict, *claves, default=None):
    for clave in claves:
        if fila.get(clave) is not None:
            return fila[clave]
    return default


class EntrenadorRepository:
    """Adaptador SQL de las funciones y vistas del esquema CC para entrenadores."""

    def __init__(self, db: BaseDatos):
        if db is None:
            raise ValueError("❌ La conexión con la base de datos es None.")
        self.db = db

    def registrar(self, registro: RegistroEntrenador) -> Optional[ResultadoEscritura]:
        params = [
            registro.sigla_tipo_documento,
            registro.nombres,
            registro.apellidos,
            registro.numero_documento,
            registro.correo,
            registro.facultad_nombres,
        ]
        # 🔹 la función está sobrecargada por aridad: sin fecha de fin se llama con 6 parámetros
        if registro.fecha_fin is not None:
            params.append(registro.fecha_fin)
        marcadores = ", ".join(["%s"] * len(params))
        query = f"SELECT * FROM CC.RegistrarEntrenadorUFT({marcadores});"

        logger.debug(f"Ejecutando registrar: {query} params={params}")
        filas = self.db.consultar(query, params)
        if not filas:
            logger.warning("⚠️ CC.RegistrarEntrenadorUFT no devolvió filas.")
            return None

        fila = filas[0]
        logger.debug(f"Fila devuelta por RegistrarEntrenadorUFT: {fila}")
        return ResultadoEscritura(
            mensaje=fila.get("mensaje"),
            entrenador_id=_str_o_none(_primero(fila, "identrenador", "entrenadorid")),
            detalles=fila.get("detalles"),
        )

    def listar(self, nombre_facultad: Optional[str] = None) -> list[Entrenador]:
        query = "SELECT * FROM CC.DetalleEntrenadoresFacultadesUV"
        params = []
        if nombre_facultad:
            query += " WHERE %s = ANY(facultadesAsignadas)"
            params.append(nombre_facultad)
        query += " ORDER BY apellidosEntrenador, nombresEntrenador;"

        logger.debug(f"Ejecutando listar: {query} params={params}")
        filas = self.db.consultar(query, params)
        logger.info(f"📋 {len(filas)} entrenadores encontrados.")
        return [self._a_entrenador(f) for f in filas]

    def actualizar(self, entrenador_id: str, cambios: ActualizacionEntrenador) -> Optional[ResultadoEscritura]:
        # 🔹 notación nombrada: los campos ausentes no se envían y la función usa sus defaults
        argumentos = {"pEntrenadorID": str(entrenador_id), **cambios.parametros_presentes()}
        asignaciones = ", ".join(f"{nombre} => %s" for nombre in argumentos)
        query = f"SELECT * FROM CC.ModificarInformacionEntrenadorUFT({asignaciones});"
        params = list(argumentos.values())

        logger.debug(f"Ejecutando actualizar: {query} params={params}")
        filas = self.db.consultar(query, params)
        if not filas:
            logger.warning("⚠️ CC.ModificarInformacionEntrenadorUFT no devolvió filas.")
            return None

        fila = filas[0]
        return ResultadoEscritura(
            mensaje=fila.get("mensaje"),
            entrenador_id=_str_o_none(_primero(fila, "entrenadorid", "identrenador")),
            detalles=fila.get("detalles"),
        )

    def desactivar(self, entrenador_id: str) -> Optional[ResultadoEscritura]:
        query = "SELECT * FROM CC.DesactivarEntrenadorUFT(%s);"
        logger.debug(f"Ejecutando desactivar para {entrenador_id}")
        filas = self.db.consultar(query, (str(entrenador_id),))
        if not filas:
            logger.warning("⚠️ CC.DesactivarEntrenadorUFT no devolvió filas.")
            return None

        fila = filas[0]
        return ResultadoEscritura(
            mensaje=fila.get("mensaje"),
            entrenador_id=_str_o_none(_primero(fila, "entrenadorid", "identrenador")),
            exito=bool(fila.get("exito")),
        )

    @staticmethod
    def _a_entrenador(fila: dict) -> Entrenador:
        return Entrenador(
            id=_str_o_none(_primero(fila, "identrenador", "id")),
            nombres=_primero(fila, "nombresentrenador", "nombres"),
            apellidos=_primero(fila, "apellidosentrenador", "apellidos"),
            sigla_tipo_documento=_primero(fila, "siglatipodocumento", "sigla"),
            numero_documento=_primero(fila, "numerodocumento"),
            correo=_primero(fila, "correoentrenador", "correo"),
            facultades=list(_primero(fila, "facultadesasignadas", default=[])),
            estado=_primero(fila, "estado", "estadoentrenador"),
        )


def _str_o_none(valor) -> Optional[str]:
    return str(valor) if valor is not None else None

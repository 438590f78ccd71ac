# comun/database.py

import logging
import threading
from contextlib import contextmanager
from typing import Any, Optional, Sequence

import psycopg2
from psycopg2.extras import RealDictCursor
from psycopg2.pool import ThreadedConnectionPool
from starlette.requests import Request

logger = logging.getLogger(__name__)


class BaseDatos:
    """Gestiona el pool de conexiones con la base CC. Cada consulta toma una conexión y la devuelve."""

    def __init__(self, host, port, dbname, user, password, minconn=1, maxconn=10, connect_timeout=10):
        self.parametros = {
            "host": host,
            "port": port,
            "dbname": dbname,
            "user": user,
            "password": password,
            "connect_timeout": connect_timeout,
        }
        self.minconn = minconn
        self.maxconn = maxconn
        self.pool: Optional[ThreadedConnectionPool] = None
        # getconn() falla con PoolError si no hay conexiones libres: las peticiones esperan turno aquí
        self.cupos = threading.BoundedSemaphore(maxconn)

    @classmethod
    def desde_settings(cls, settings) -> "BaseDatos":
        return cls(
            host=settings.DB_HOST,
            port=settings.DB_PORT,
            dbname=settings.DB_NAME,
            user=settings.DB_USER,
            password=settings.DB_PASS,
            minconn=settings.DB_POOL_MIN,
            maxconn=settings.DB_POOL_MAX,
            connect_timeout=settings.DB_CONNECT_TIMEOUT,
        )

    def abrir(self):
        if self.pool is not None:
            return
        try:
            self.pool = ThreadedConnectionPool(self.minconn, self.maxconn, **self.parametros)
            logger.info(
                f"✅ Pool de conexiones con {self.parametros['dbname']} "
                f"en {self.parametros['host']}:{self.parametros['port']} establecido."
            )
        except psycopg2.Error as e:
            logger.error(f"❌ Error al conectar a la base de datos: {e}")
            raise

    def cerrar(self):
        if self.pool is not None:
            self.pool.closeall()
            self.pool = None
            logger.info("🔒 Pool de conexiones cerrado.")

    @contextmanager
    def conexion(self):
        if self.pool is None:
            raise RuntimeError("El pool de conexiones no está abierto.")
        with self.cupos:
            conn = self.pool.getconn()
            try:
                yield conn
            finally:
                self.pool.putconn(conn)

    def consultar(self, query: str, params: Optional[Sequence[Any]] = None) -> list[dict]:
        """Ejecuta una sentencia y devuelve todas las filas como dicts. Confirma la transacción al terminar."""
        with self.conexion() as conn:
            try:
                with conn.cursor(cursor_factory=RealDictCursor) as cur:
                    cur.execute(query, params)
                    filas = cur.fetchall() if cur.description else []
                conn.commit()
                return [dict(f) for f in filas]
            except Exception:
                conn.rollback()
                raise


def obtener_db(request: Request) -> BaseDatos:
    """Dependencia FastAPI: entrega el pool abierto en el lifespan de la aplicación."""
    return request.app.state.db

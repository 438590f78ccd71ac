# api_gateway/main.py

import argparse
import time
import traceback
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api_gateway.config import settings
from api_gateway.routers import health
from autenticacion.api.routes import router as auth_router
from catalogos.api.routes import router as catalogos_router
from comun.database import BaseDatos
from comun.errores import ErrorAplicacion, TipoError
from comun.logging_factory import configurar_logging
from comun.validacion import formatear_errores
from entrenadores.api.routes import router as entrenadores_router

logger = configurar_logging(settings.nivel_log)


def crear_app(db: Optional[BaseDatos] = None) -> FastAPI:
    """
    Crea la aplicación. Si no se inyecta una base de datos, el pool se abre al iniciar
    y se cierra al apagar el servidor.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        propio = getattr(app.state, "db", None) is None
        if propio:
            app.state.db = BaseDatos.desde_settings(settings)
            app.state.db.abrir()
        logger.info(f"🚀 API de entrenadores iniciada (modo {settings.APP_ENV}).")
        try:
            yield
        finally:
            if propio:
                app.state.db.cerrar()
                app.state.db = None

    app = FastAPI(
        title="Gestión de Entrenadores API",
        description="Autenticación, registro y administración de entrenadores por facultad",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        swagger_ui_parameters={"persistAuthorization": True},
        lifespan=lifespan,
    )
    app.state.db = db

    # CORS va después del middleware de log: así envuelve también las respuestas 500
    _registrar_middlewares(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(health.router, prefix="/health")
    app.include_router(auth_router)
    app.include_router(entrenadores_router)
    app.include_router(catalogos_router)

    _registrar_manejadores(app)
    return app


def _registrar_middlewares(app: FastAPI):
    @app.middleware("http")
    async def registrar_peticion(request: Request, call_next):
        inicio = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            response = _respuesta_error_interno(request, exc)
        duracion_ms = (time.perf_counter() - inicio) * 1000
        logger.info(
            f"{request.client.host if request.client else '-'} "
            f"{request.method} {request.url.path} {response.status_code} {duracion_ms:.1f}ms"
        )
        return response


def _registrar_manejadores(app: FastAPI):
    @app.exception_handler(ErrorAplicacion)
    async def manejar_error_aplicacion(request: Request, exc: ErrorAplicacion):
        contenido = {"message": exc.mensaje}
        if exc.es_error_cliente:
            logger.warning(f"⚠️ Error de cliente ({exc.status}) en {request.method} {request.url.path}: {exc.mensaje}")
            if exc.tipo is TipoError.VALIDACION and isinstance(exc.detalles, list):
                contenido["errors"] = exc.detalles
            elif exc.detalles is not None:
                contenido["details"] = exc.detalles
        else:
            logger.error(f"❌ Error de servidor ({exc.status}) en {request.method} {request.url.path}: {exc.mensaje}")
            if not settings.es_produccion and exc.detalles is not None:
                contenido["details"] = exc.detalles
        return JSONResponse(status_code=exc.status, content=contenido)

    @app.exception_handler(RequestValidationError)
    async def manejar_validacion(request: Request, exc: RequestValidationError):
        errores = formatear_errores(exc.errors())
        logger.warning(f"⚠️ Fallaron las validaciones de entrada en {request.url.path}: {errores}")
        return JSONResponse(status_code=400, content={"message": "Errores de validación.", "errors": errores})

    @app.exception_handler(StarletteHTTPException)
    async def manejar_http(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404 and exc.detail == "Not Found":
            logger.warning(f"⚠️ Ruta no encontrada: {request.method} {request.url.path}")
            mensaje = f"Ruta no encontrada: {request.method} {request.url.path}"
        elif exc.status_code == 405:
            mensaje = f"Método no permitido: {request.method} {request.url.path}"
        else:
            mensaje = str(exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"message": mensaje}, headers=exc.headers)

    @app.exception_handler(Exception)
    async def manejar_error_no_controlado(request: Request, exc: Exception):
        return _respuesta_error_interno(request, exc)


def _respuesta_error_interno(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"❌ Error de servidor no controlado en {request.method} {request.url.path}", exc_info=exc)
    contenido = {"message": "Error interno del servidor."}
    if not settings.es_produccion:
        contenido["stack"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return JSONResponse(status_code=500, content=contenido)


app = crear_app()


def run():
    parser = argparse.ArgumentParser(description="API de gestión de entrenadores")
    parser.add_argument("--host", type=str, default=settings.HOST, help="Host para servir la API")
    parser.add_argument("--port", type=int, default=settings.PORT, help="Puerto del servicio")
    parser.add_argument("--reload", action="store_true", help="Recarga automática (solo desarrollo)")
    args = parser.parse_args()

    uvicorn.run(
        "api_gateway.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    run()

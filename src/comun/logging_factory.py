#comun/logging_factory.py

import logging

FORMATO = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def get_logger(name: str, level: str = "INFO") -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(FORMATO, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def configurar_logging(level: str) -> logging.Logger:
    """Configura los loggers de los paquetes de la aplicación bajo un mismo handler."""
    for paquete in ("api_gateway", "autenticacion", "entrenadores", "catalogos", "comun"):
        get_logger(paquete, level)
    # uvicorn ya trae su propio access log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    return logging.getLogger("api_gateway")

"""Configuración de pytest: src/ en el PYTHONPATH, base de datos falsa y tokens de prueba."""

import sys
from pathlib import Path

import pytest

src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from fastapi.testclient import TestClient  # noqa: E402

from api_gateway.main import crear_app  # noqa: E402
from autenticacion.infrastructure.token_service import generar_token  # noqa: E402
from fakes import BaseDatosFalsa  # noqa: E402

ADMIN_ID = "0b5c8a52-2d5e-4c1f-9c3e-7d0f6a8e1a11"
ENTRENADOR_ID = "6f1d2e3c-4b5a-4968-8776-655443322110"


@pytest.fixture
def db():
    return BaseDatosFalsa()


@pytest.fixture
def app(db):
    return crear_app(db)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def token_admin():
    return generar_token(ADMIN_ID, "admin")


@pytest.fixture
def token_entrenador():
    return generar_token(ENTRENADOR_ID, "entrenador")


@pytest.fixture
def headers_admin(token_admin):
    return {"Authorization": f"Bearer {token_admin}"}


@pytest.fixture
def headers_entrenador(token_entrenador):
    return {"Authorization": f"Bearer {token_entrenador}"}

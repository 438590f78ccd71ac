import logging
from datetime import datetime, timedelta, timezone

import jwt

from api_gateway.config import settings
from conftest import ADMIN_ID, ENTRENADOR_ID
from fakes import ErrorPgFalso

ADMIN = {"id": ADMIN_ID, "nombres": "Laura", "apellidos": "Gómez"}
ENTRENADOR = {"id": ENTRENADOR_ID, "nombres": "Ana", "apellidos": "Lopez"}


def _decodificar(token: str) -> dict:
    return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])


def test_login_admin_exitoso(client, db):
    db.responder([ADMIN])

    response = client.post("/api/login/admin", json={"numeroDocumento": "1020304050"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["role"] == "admin"
    assert body["user"] == ADMIN
    payload = _decodificar(body["token"])
    assert payload["id"] == ADMIN_ID
    assert payload["role"] == "admin"
    assert payload["exp"] > datetime.now(timezone.utc).timestamp()

    query, params = db.ultima
    assert "FROM CC.Administrador" in query
    assert "fechaFin > CURRENT_TIMESTAMP" in query
    assert params == ["1020304050"]


def test_login_admin_credenciales_invalidas(client, db):
    response = client.post("/api/login/admin", json={"numeroDocumento": "999999"})

    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Credenciales inválidas o administrador inactivo."}


def test_login_admin_sin_documento(client, db):
    response = client.post("/api/login/admin", json={})

    assert response.status_code == 400
    assert response.json()["errors"][0]["campo"] == "numeroDocumento"
    assert db.consultas == []


def test_login_admin_documento_vacio(client, db):
    response = client.post("/api/login/admin", json={"numeroDocumento": "   "})

    assert response.status_code == 400
    assert response.json()["errors"][0]["mensaje"] == "Número de documento requerido."


def test_login_admin_error_de_bd_es_500(client, db):
    db.responder(ErrorPgFalso("could not connect to server"))

    response = client.post("/api/login/admin", json={"numeroDocumento": "1020304050"})

    assert response.status_code == 500
    assert response.json()["message"] == "Error interno del servidor."


def test_login_entrenador_exitoso_normaliza_correo(client, db):
    db.responder([ENTRENADOR])

    response = client.post(
        "/api/login/entrenador",
        json={"correo": "  Ana@X.com ", "numeroDocumento": "1020304050"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["role"] == "entrenador"
    assert _decodificar(body["token"])["id"] == ENTRENADOR_ID

    query, params = db.ultima
    assert "FROM CC.Entrenador" in query
    assert params == ["ana@x.com", "1020304050"]


def test_login_entrenador_inactivo(client, db):
    response = client.post("/api/login/entrenador", json={"correo": "ana@x.com", "numeroDocumento": "1020304050"})

    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Credenciales inválidas o entrenador inactivo."}


def test_perfil_entrenador(client, headers_entrenador):
    response = client.get("/api/entrenador/perfil", headers=headers_entrenador)

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == ENTRENADOR_ID
    assert body["role"] == "entrenador"


def test_perfil_con_token_de_admin_es_403(client, headers_admin):
    response = client.get("/api/entrenador/perfil", headers=headers_admin)

    assert response.status_code == 403
    assert response.json()["message"] == "Acceso denegado: Se requiere rol de Entrenador."


def test_perfil_sin_token_es_401(client):
    response = client.get("/api/entrenador/perfil")

    assert response.status_code == 401
    assert response.json()["message"] == "Acceso denegado: Token no proporcionado."


def test_token_expirado_es_403(client):
    vencido = jwt.encode(
        {"id": ENTRENADOR_ID, "role": "entrenador", "exp": datetime.now(timezone.utc) - timedelta(minutes=5)},
        settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
    )

    response = client.get("/api/entrenador/perfil", headers={"Authorization": f"Bearer {vencido}"})

    assert response.status_code == 403
    assert response.json()["message"] == "Acceso denegado: Token inválido."


def test_token_con_otra_firma_es_403(client):
    falso = jwt.encode(
        {"id": ENTRENADOR_ID, "role": "entrenador", "exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
        "otra-clave-secreta-de-prueba-con-longitud",
        algorithm="HS256",
    )

    response = client.get("/api/entrenador/perfil", headers={"Authorization": f"Bearer {falso}"})

    assert response.status_code == 403


def test_token_malformado_es_403(client):
    response = client.get("/api/entrenador/perfil", headers={"Authorization": "Bearer no.es.jwt"})

    assert response.status_code == 403


def test_login_entrenador_no_registra_correo_en_info(client, db, caplog):
    db.responder([ENTRENADOR])

    with caplog.at_level(logging.DEBUG):
        client.post("/api/login/entrenador", json={"correo": "ana@x.com", "numeroDocumento": "1020304050"})

    info = [r.getMessage() for r in caplog.records if r.levelno >= logging.INFO]
    assert info
    assert not any("ana@x.com" in mensaje for mensaje in info)

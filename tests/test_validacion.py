from datetime import date, timedelta

import pytest

from comun.errores import ErrorValidacion
from comun.validacion import validar
from entrenadores.domain.entities import AUSENTE
from entrenadores.domain.schemas import ActualizacionEntrenadorRequest, RegistroEntrenadorRequest

REGISTRO_VALIDO = {
    "siglaTipoDocumento": "CC",
    "nombres": "Ana",
    "apellidos": "Lopez",
    "numeroDocumento": "1020304050",
    "correo": "ana@x.com",
    "facultadNombres": ["Ingeniería"],
}


def _campos(error: ErrorValidacion) -> set:
    return {e["campo"] for e in error.errores}


def test_registro_sin_campos_reporta_todos_los_faltantes_juntos():
    with pytest.raises(ErrorValidacion) as exc:
        validar(RegistroEntrenadorRequest, {})

    assert exc.value.status == 400
    assert _campos(exc.value) == {
        "siglaTipoDocumento",
        "nombres",
        "apellidos",
        "numeroDocumento",
        "correo",
        "facultadNombres",
    }
    assert all(e["mensaje"].endswith("es requerido.") for e in exc.value.errores)


def test_registro_acumula_errores_de_formato():
    datos = {
        **REGISTRO_VALIDO,
        "siglaTipoDocumento": "CCCCCC",
        "numeroDocumento": "12a45",
        "correo": "no-es-correo",
        "facultadNombres": [],
    }
    with pytest.raises(ErrorValidacion) as exc:
        validar(RegistroEntrenadorRequest, datos)

    assert _campos(exc.value) == {"siglaTipoDocumento", "numeroDocumento", "correo", "facultadNombres"}


def test_registro_normaliza_correo_y_recorta_textos():
    registro = validar(
        RegistroEntrenadorRequest,
        {**REGISTRO_VALIDO, "correo": "  Ana.Lopez@X.COM ", "nombres": "  Ana María "},
    )
    assert registro.correo == "ana.lopez@x.com"
    assert registro.nombres == "Ana María"


@pytest.mark.parametrize("numero", ["1234", "1" * 21, "12 345", "abcde"])
def test_numero_documento_solo_digitos_entre_5_y_20(numero):
    with pytest.raises(ErrorValidacion) as exc:
        validar(RegistroEntrenadorRequest, {**REGISTRO_VALIDO, "numeroDocumento": numero})
    assert _campos(exc.value) == {"numeroDocumento"}


def test_facultades_con_elemento_vacio():
    with pytest.raises(ErrorValidacion) as exc:
        validar(RegistroEntrenadorRequest, {**REGISTRO_VALIDO, "facultadNombres": ["Ingeniería", "  "]})
    assert exc.value.errores[0]["mensaje"] == "Cada nombre de facultad en el array debe ser un texto no vacío."


def test_fecha_fin_no_puede_ser_pasada():
    ayer = (date.today() - timedelta(days=1)).isoformat()
    with pytest.raises(ErrorValidacion) as exc:
        validar(RegistroEntrenadorRequest, {**REGISTRO_VALIDO, "fechaFin": ayer})
    assert exc.value.errores[0]["campo"] == "fechaFin"


def test_fecha_fin_hoy_es_valida():
    registro = validar(RegistroEntrenadorRequest, {**REGISTRO_VALIDO, "fechaFin": date.today().isoformat()})
    assert registro.a_entidad().fecha_fin == date.today()


def test_fecha_fin_con_formato_invalido():
    with pytest.raises(ErrorValidacion) as exc:
        validar(RegistroEntrenadorRequest, {**REGISTRO_VALIDO, "fechaFin": "31/12/2030"})
    assert exc.value.errores[0]["campo"] == "fechaFin"
    assert "ISO-8601" in exc.value.errores[0]["mensaje"]


def test_actualizacion_vacia_es_valida_y_no_tiene_parametros():
    cambios = validar(ActualizacionEntrenadorRequest, {}).a_entidad()
    assert cambios.vacia
    assert cambios.parametros_presentes() == {}


def test_actualizacion_distingue_ausente_de_null():
    cambios = validar(
        ActualizacionEntrenadorRequest,
        {"nuevosNombres": None, "nuevaFechaFin": None, "nuevosNombresFacultades": []},
    ).a_entidad()

    assert cambios.nuevos_nombres is AUSENTE
    assert cambios.nuevos_apellidos is AUSENTE
    assert cambios.parametros_presentes() == {
        "pNuevaFechaFin": None,
        "pNuevosNombresFacultades": [],
    }


def test_actualizacion_reglas_de_longitud_y_correo():
    with pytest.raises(ErrorValidacion) as exc:
        validar(
            ActualizacionEntrenadorRequest,
            {"nuevosNombres": "A", "nuevosApellidos": "x" * 201, "nuevoCorreo": "malo", "nuevosNombresFacultades": [""]},
        )
    assert _campos(exc.value) == {"nuevosNombres", "nuevosApellidos", "nuevoCorreo", "nuevosNombresFacultades"}


def test_actualizacion_normaliza_correo():
    cambios = validar(ActualizacionEntrenadorRequest, {"nuevoCorreo": "Nuevo@Correo.EDU.CO"}).a_entidad()
    assert cambios.parametros_presentes() == {"pNuevoCorreo": "nuevo@correo.edu.co"}


@pytest.mark.parametrize("numero", ["١٢٣٤٥", "１２３４５", "12345٦"])
def test_numero_documento_rechaza_digitos_no_ascii(numero):
    with pytest.raises(ErrorValidacion) as exc:
        validar(RegistroEntrenadorRequest, {**REGISTRO_VALIDO, "numeroDocumento": numero})
    assert _campos(exc.value) == {"numeroDocumento"}


@pytest.mark.parametrize(
    "fecha",
    ["2099-12-31T00:00:00", "2099-12-31 00:00", 4102358400, "20991231"],
)
def test_fecha_fin_solo_acepta_formato_iso(fecha):
    with pytest.raises(ErrorValidacion) as exc:
        validar(RegistroEntrenadorRequest, {**REGISTRO_VALIDO, "fechaFin": fecha})
    assert exc.value.errores[0]["campo"] == "fechaFin"
    assert "ISO-8601" in exc.value.errores[0]["mensaje"]


def test_nueva_fecha_fin_solo_acepta_formato_iso():
    with pytest.raises(ErrorValidacion) as exc:
        validar(ActualizacionEntrenadorRequest, {"nuevaFechaFin": "2099-12-31T00:00:00"})
    assert exc.value.errores[0]["campo"] == "nuevaFechaFin"

    cambios = validar(ActualizacionEntrenadorRequest, {"nuevaFechaFin": "2099-12-31"}).a_entidad()
    assert cambios.parametros_presentes() == {"pNuevaFechaFin": date(2099, 12, 31)}

import pytest
from fastapi import HTTPException

from verduleria.api.productos.repositories.repo_producto import CAMPOS_BUSQUEDA
from verduleria.utils.search_spec import Criterio, build_filtro, parse_criterios


def test_parse_criterios():
    assert parse_criterios("nombre:papa,precioVenta>100") == [
        Criterio("nombre", ":", "papa"),
        Criterio("precioVenta", ">", "100"),
    ]


def test_parse_criterios_vacio_o_mal_formado():
    assert parse_criterios("") == []
    assert parse_criterios(None) == []
    assert parse_criterios("sin operador") == []


def test_build_filtro_sin_criterios():
    assert build_filtro("", CAMPOS_BUSQUEDA) is None


def test_build_filtro_clave_desconocida():
    with pytest.raises(HTTPException) as exc:
        build_filtro("color:rojo", CAMPOS_BUSQUEDA)
    assert exc.value.status_code == 400


def test_build_filtro_valor_numerico_invalido():
    with pytest.raises(HTTPException) as exc:
        build_filtro("id:abc", CAMPOS_BUSQUEDA)
    assert exc.value.status_code == 400

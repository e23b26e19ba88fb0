from verduleria.client.notifications import Notificador, VarianteToast
from verduleria.client.preferences import Preferencias


def test_modo_oscuro_por_defecto_y_persistido(tmp_path):
    path = tmp_path / "prefs" / "preferencias.json"
    prefs = Preferencias(path)
    assert prefs.modo_oscuro is True

    assert prefs.alternar_modo_oscuro() is False
    assert path.exists()
    assert Preferencias(path).modo_oscuro is False


def test_preferencias_corruptas_vuelven_al_default(tmp_path):
    path = tmp_path / "preferencias.json"
    path.write_text("{no es json", encoding="utf-8")
    assert Preferencias(path).modo_oscuro is True


def test_notificador():
    notificador = Notificador()
    assert notificador.ultimo is None

    notificador.exito("Guardado")
    aviso = notificador.advertencia("Cuidado", "restricción")
    notificador.error("Error", "falló")
    assert [t.variante for t in notificador.toasts] == [
        VarianteToast.SUCCESS,
        VarianteToast.WARNING,
        VarianteToast.ERROR,
    ]

    notificador.descartar(aviso)
    assert len(notificador.toasts) == 2
    notificador.limpiar()
    assert notificador.toasts == []

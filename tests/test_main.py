"""
Tests for the command line entry point
"""
import pytest

import main


@pytest.fixture
def cli(db, asset_root, monkeypatch):
    monkeypatch.setitem(main.ASSET_CONFIG, "root", str(asset_root))
    return main.main


def test_create_list_and_delete(cli, capsys):
    assert cli(["create-admin", "--nombre", "Sistemas", "--correo", "sistemas@cuautla.tecnm.mx",
                "--password", "secreto123"]) == 0
    assert "sistemas@cuautla.tecnm.mx" in capsys.readouterr().out

    assert cli(["list-admins", "--search", "sistemas"]) == 0
    assert "Página 1 de 1" in capsys.readouterr().out

    assert cli(["delete-admin", "1"]) == 0
    assert cli(["delete-admin", "1"]) == 1


def test_create_admin_rejects_invalid_email(cli, capsys):
    assert cli(["create-admin", "--nombre", "X", "--correo", "no-es-correo",
                "--password", "secreto123"]) == 1
    assert "formato" in capsys.readouterr().err


def test_list_admins_empty(cli, capsys):
    assert cli(["list-admins"]) == 1


def test_export_admins(cli, tmp_path):
    cli(["create-admin", "--nombre", "Sistemas", "--correo", "sistemas@cuautla.tecnm.mx",
         "--password", "secreto123"])
    output = tmp_path / "out" / "administradores.pdf"
    assert cli(["export-admins", "--output", str(output)]) == 0
    assert output.read_bytes().startswith(b"%PDF")


def test_export_periods(cli, tmp_path):
    output = tmp_path / "periodos.pdf"
    assert cli(["export-periods", "--carrera", "Sistemas", "--output", str(output)]) == 0
    assert output.read_bytes().startswith(b"%PDF")


def test_missing_assets_exit(cli, tmp_path, monkeypatch):
    monkeypatch.setitem(main.ASSET_CONFIG, "root", str(tmp_path / "nothing"))
    with pytest.raises(SystemExit) as exc_info:
        cli(["export-admins", "--output", str(tmp_path / "a.pdf")])
    assert exc_info.value.code == 1

# Tests configuration for the academic monitoring reports
import io
import os
import shutil
import sys
from pathlib import Path

import pytest
import reportlab
from PIL import Image

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pdf_generators.assets import load_assets

# ReportLab ships the Bitstream Vera faces; they stand in for Montserrat
VERA_FONTS = {
    "Montserrat-Regular.ttf": "Vera.ttf",
    "Montserrat-Bold.ttf": "VeraBd.ttf",
    "Montserrat-Italic.ttf": "VeraIt.ttf",
    "Montserrat-BoldItalic.ttf": "VeraBI.ttf",
}

FECHA = "19 de octubre de 2026"


def make_png(width=120, height=80, color=(24, 49, 107)):
    buffer = io.BytesIO()
    Image.new("RGB", (width, height), color).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture(scope="session")
def asset_root(tmp_path_factory):
    """Asset directory with the fonts and logos the reports need"""
    root = tmp_path_factory.mktemp("assets")
    fonts_dir = root / "fonts"
    fonts_dir.mkdir()
    reportlab_fonts = os.path.join(os.path.dirname(reportlab.__file__), "fonts")
    for target, source in VERA_FONTS.items():
        shutil.copyfile(os.path.join(reportlab_fonts, source), fonts_dir / target)

    (root / "tnm_logo.png").write_bytes(make_png(120, 80))
    (root / "itc.png").write_bytes(make_png(60, 90, color=(200, 30, 30)))
    return root


@pytest.fixture(scope="session")
def assets(asset_root):
    return load_assets(str(asset_root))


@pytest.fixture
def chart_png():
    return make_png(800, 400, color=(46, 204, 113))


@pytest.fixture
def fecha():
    return FECHA


@pytest.fixture
def admins():
    """32 administrators, enough for three pages of 15"""
    return [
        {
            "nombre": f"Administrador {i:02d}",
            "correo": f"admin{i:02d}@cuautla.tecnm.mx",
            "fechaRegistro": "01 de agosto de 2026",
            "horaRegistro": f"10:{i:02d}:00",
        }
        for i in range(32)
    ]


@pytest.fixture
def students():
    return [
        {
            "nombre": "Ana López",
            "calificaciones": [
                {"promedioUnidad": 90, "actividades": [
                    {"nombreActividad": "Examen", "calificacionActividad": 95},
                    {"nombreActividad": "Tarea 1", "calificacionActividad": 85},
                ]},
                {"promedioUnidad": 80, "actividades": [
                    {"nombreActividad": "Proyecto", "calificacionActividad": 80},
                ]},
            ],
        },
        {
            "nombre": "Bruno Díaz",
            "calificaciones": [
                {"promedioUnidad": 60, "actividades": [
                    {"nombreActividad": "Tarea 1", "calificacionActividad": 60},
                ]},
            ],
        },
        {
            "nombre": "Carla Ruiz",
            "calificaciones": [],
        },
    ]


@pytest.fixture
def db(tmp_path, monkeypatch):
    """Empty database in a temporary file"""
    import auth.validators
    import database.connection
    from database import create_tables

    monkeypatch.setattr(database.connection, "DB_PATH", str(tmp_path / "test.db"))
    monkeypatch.setattr(auth.validators, "BCRYPT_ROUNDS", 4)
    create_tables()
    return tmp_path / "test.db"

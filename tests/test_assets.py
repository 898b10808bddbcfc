"""
Tests for the asset loader
"""
import logging
import shutil

import pytest
from reportlab.pdfbase import pdfmetrics

from pdf_generators.assets import MissingAssetError, buffer_to_data_url, load_assets


class TestLoadAssets:

    def test_loads_fonts_and_logos(self, assets, asset_root):
        assert set(assets.fonts) == {
            "Montserrat-Regular.ttf",
            "Montserrat-Bold.ttf",
            "Montserrat-Italic.ttf",
            "Montserrat-BoldItalic.ttf",
        }
        assert assets.primary_logo_data == (asset_root / "tnm_logo.png").read_bytes()
        assert assets.secondary_logo_data == (asset_root / "itc.png").read_bytes()

    def test_fonts_registered_with_reportlab(self, assets):
        registered = pdfmetrics.getRegisteredFontNames()
        names = assets.font_names
        for face in (names.normal, names.bold, names.italic, names.bolditalic):
            assert face in registered

    def test_loading_twice_reuses_registered_fonts(self, asset_root, assets):
        again = load_assets(str(asset_root))
        assert again.font_names == assets.font_names
        assert again.fonts == assets.fonts

    def test_bundle_is_read_only(self, assets):
        with pytest.raises(TypeError):
            assets.images["other.png"] = b""
        with pytest.raises(TypeError):
            assets.fonts["Montserrat-Regular.ttf"] = b""
        with pytest.raises(AttributeError):
            assets.primary_logo = "other.png"

    def test_missing_font_names_path(self, tmp_path, asset_root):
        (tmp_path / "fonts").mkdir()
        with pytest.raises(MissingAssetError) as exc_info:
            load_assets(str(tmp_path))
        assert exc_info.value.path.endswith("Montserrat-Regular.ttf")

    def test_missing_logo_names_path(self, asset_root):
        with pytest.raises(MissingAssetError) as exc_info:
            load_assets(str(asset_root), secondary_logo="missing.png")
        assert exc_info.value.path.endswith("missing.png")

    def test_missing_asset_is_file_not_found(self):
        assert issubclass(MissingAssetError, FileNotFoundError)

    def test_incomplete_font_mapping_rejected(self, asset_root):
        with pytest.raises(ValueError):
            load_assets(str(asset_root), font_files={"normal": "Montserrat-Regular.ttf"})


class TestDataUrls:

    def test_buffer_to_data_url(self):
        assert buffer_to_data_url(b"abc") == "data:image/png;base64,YWJj"
        assert buffer_to_data_url(b"abc", "jpeg").startswith("data:image/jpeg;base64,")

    def test_image_data_url(self, assets):
        url = assets.image_data_url("tnm_logo.png")
        assert url.startswith("data:image/png;base64,iVBOR")

    def test_font_base64(self, assets):
        assert assets.font_base64("Montserrat-Bold.ttf")


class TestFontRegistration:

    def test_different_files_under_same_family_warn(self, asset_root, assets, tmp_path, caplog):
        shutil.copytree(asset_root, tmp_path / "other")
        fonts_dir = tmp_path / "other" / "fonts"
        (fonts_dir / "Montserrat-Regular.ttf").write_bytes(
            (fonts_dir / "Montserrat-Bold.ttf").read_bytes())

        caplog.set_level(logging.WARNING, logger="pdf_generators.assets")
        other = load_assets(str(tmp_path / "other"))

        assert other.font_names == assets.font_names
        assert "Montserrat is already registered from a different file" in caplog.text

    def test_same_files_do_not_warn(self, asset_root, assets, caplog):
        caplog.set_level(logging.WARNING, logger="pdf_generators.assets")
        load_assets(str(asset_root))
        assert "already registered" not in caplog.text

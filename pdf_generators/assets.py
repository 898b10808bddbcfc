"""Static assets (fonts and logos) shared by every report.

Assets are read from disk once, when the process starts, and kept in an
immutable bundle that can be handed to any number of concurrent report
generations.
"""

import base64
import hashlib
import io
import logging
import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from config import ASSET_CONFIG

logger = logging.getLogger(__name__)

FONT_VARIANTS = ('normal', 'bold', 'italic', 'bolditalic')

# Face name -> digest of the font file registered under it by this module
_registered_faces = {}


class MissingAssetError(FileNotFoundError):
    """A required font or image file is not present in the asset root"""

    def __init__(self, path):
        self.path = str(path)
        super().__init__(f"Required asset not found: {self.path}")


@dataclass(frozen=True)
class FontFamily:
    normal: str
    bold: str
    italic: str
    bolditalic: str


@dataclass(frozen=True)
class AssetBundle:
    font_family: str
    fonts: Mapping[str, bytes]
    font_variants: Mapping[str, str]
    images: Mapping[str, bytes]
    primary_logo: str
    secondary_logo: str

    def image(self, name) -> bytes:
        return self.images[name]

    def image_data_url(self, name, image_type="png") -> str:
        return buffer_to_data_url(self.images[name], image_type)

    def font_base64(self, name) -> str:
        return base64.b64encode(self.fonts[name]).decode('ascii')

    @property
    def primary_logo_data(self):
        return self.images[self.primary_logo]

    @property
    def secondary_logo_data(self):
        return self.images[self.secondary_logo]

    @property
    def font_names(self) -> FontFamily:
        family = self.font_family
        return FontFamily(
            normal=family,
            bold=f"{family}-Bold",
            italic=f"{family}-Italic",
            bolditalic=f"{family}-BoldItalic",
        )


def buffer_to_data_url(buffer, image_type="png"):
    """Encode a binary buffer as a base64 data URL"""
    return f"data:image/{image_type};base64,{base64.b64encode(bytes(buffer)).decode('ascii')}"


def _read_required(path):
    if not os.path.isfile(path):
        logger.error(f"Missing asset: {path}")
        raise MissingAssetError(path)
    with open(path, 'rb') as f:
        return f.read()


def load_assets(asset_root=None, font_files: Optional[Mapping[str, str]] = None,
                font_family=None, primary_logo=None, secondary_logo=None) -> AssetBundle:
    """
    Load every font and logo required by the reports

    Args:
        asset_root: Directory holding the logos and a ``fonts`` subdirectory
        font_files: Mapping of font variant (normal, bold, italic, bolditalic) to file name
        font_family: Family name the fonts are registered under
        primary_logo: File name of the left logo
        secondary_logo: File name of the right logo

    Returns:
        AssetBundle: Immutable bundle with fonts registered for rendering

    Raises:
        MissingAssetError: If any required file is absent
    """
    asset_root = asset_root or ASSET_CONFIG['root']
    font_files = dict(font_files or ASSET_CONFIG['font_files'])
    font_family = font_family or ASSET_CONFIG['font_family']
    primary_logo = primary_logo or ASSET_CONFIG['primary_logo']
    secondary_logo = secondary_logo or ASSET_CONFIG['secondary_logo']

    missing_variants = [variant for variant in FONT_VARIANTS if variant not in font_files]
    if missing_variants:
        raise ValueError(f"Font files missing for variants: {', '.join(missing_variants)}")

    fonts_dir = os.path.join(asset_root, 'fonts')
    fonts = {}
    for variant in FONT_VARIANTS:
        file_name = font_files[variant]
        fonts[file_name] = _read_required(os.path.join(fonts_dir, file_name))

    images = {}
    for file_name in (primary_logo, secondary_logo):
        images[file_name] = _read_required(os.path.join(asset_root, file_name))

    bundle = AssetBundle(
        font_family=font_family,
        fonts=MappingProxyType(fonts),
        font_variants=MappingProxyType({variant: font_files[variant] for variant in FONT_VARIANTS}),
        images=MappingProxyType(images),
        primary_logo=primary_logo,
        secondary_logo=secondary_logo,
    )
    register_fonts(bundle)

    logger.info(f"Loaded {len(fonts)} fonts and {len(images)} images from {asset_root}")
    return bundle


def register_fonts(bundle: AssetBundle) -> FontFamily:
    """
    Register the bundle's TrueType fonts with ReportLab

    Registration happens once per font name; later calls reuse the faces
    already registered so the font registry is never rewritten while
    reports are being rendered. A bundle whose files differ from the
    registered faces is rendered with the registered ones and a warning
    is logged.
    """
    names = bundle.font_names
    registered = set(pdfmetrics.getRegisteredFontNames())

    for variant in FONT_VARIANTS:
        face_name = getattr(names, variant)
        data = bundle.fonts[bundle.font_variants[variant]]
        digest = hashlib.sha256(data).hexdigest()
        if face_name in registered:
            if _registered_faces.get(face_name) != digest:
                logger.warning(
                    f"Font {face_name} is already registered from a different file, "
                    f"{bundle.font_variants[variant]} is ignored"
                )
            continue
        pdfmetrics.registerFont(TTFont(face_name, io.BytesIO(data)))
        _registered_faces[face_name] = digest
        logger.debug(f"Registered font {face_name}")

    pdfmetrics.registerFontFamily(
        names.normal,
        normal=names.normal,
        bold=names.bold,
        italic=names.italic,
        boldItalic=names.bolditalic,
    )
    return names

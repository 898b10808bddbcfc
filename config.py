# config.py
from dotenv import load_dotenv
import os

# Load variables from .env into environment
load_dotenv()

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Application Configuration
APP_CONFIG = {
    "institution_name": "INSTITUTO TECNOLÓGICO DE CUAUTLA",
    "program_name": "SISTEMA WEB DE MONITOREO EDUCATIVO ENFOCADO A ÍNDICES DE REPROBACIÓN Y DESERCIÓN ESCOLAR",
    "city_line": "Yecapixtla, Morelos",
    "app_name": "Academic Monitoring Reports",
    "version": "1.0.0",
}

# Static assets (fonts and logos)
ASSET_CONFIG = {
    "root": os.getenv('ASSETS_PATH', os.path.join(BASE_DIR, "assets")),
    "font_family": "Montserrat",
    "font_files": {
        "normal": "Montserrat-Regular.ttf",
        "bold": "Montserrat-Bold.ttf",
        "italic": "Montserrat-Italic.ttf",
        "bolditalic": "Montserrat-BoldItalic.ttf",
    },
    "primary_logo": "tnm_logo.png",
    "secondary_logo": "itc.png",
}

# Report generation
REPORT_CONFIG = {
    "output_dir": os.getenv('REPORTS_DIR', os.path.join("data", "reports")),
    "render_timeout": float(os.getenv('RENDER_TIMEOUT', '60')),  # seconds
}

# Database Configuration
DB_CONFIG = {
    "path": os.getenv('DATABASE_PATH', os.path.join("data", "monitoreo.db")),
    "enable_foreign_keys": True
}

# Logging Configuration
LOG_CONFIG = {
    "level": os.getenv('LOG_LEVEL', 'INFO'),
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "dir": "logs",
    "file": "logs/app.log",
    "error_file": "logs/error.log",
    "max_size": 10 * 1024 * 1024,  # 10MB
    "backup_count": 5
}

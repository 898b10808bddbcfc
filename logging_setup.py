# logging_setup.py
import logging
import logging.handlers
import os
import sys
from config import LOG_CONFIG

def setup_logging():
    """Setup logging configuration with rotating UTF-8 file handlers and console output"""
    try:
        os.makedirs(LOG_CONFIG['dir'], exist_ok=True)

        formatter = logging.Formatter(LOG_CONFIG['format'])

        file_handler = logging.handlers.RotatingFileHandler(
            LOG_CONFIG['file'],
            maxBytes=LOG_CONFIG['max_size'],
            backupCount=LOG_CONFIG['backup_count'],
            mode='a',
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)

        logging.basicConfig(
            level=getattr(logging, LOG_CONFIG['level']),
            handlers=[file_handler, console_handler],
            force=True
        )

        # Errors also go to their own file
        error_handler = logging.handlers.RotatingFileHandler(
            LOG_CONFIG['error_file'],
            maxBytes=LOG_CONFIG['max_size'],
            backupCount=LOG_CONFIG['backup_count'],
            encoding='utf-8'
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)

        logging.getLogger().addHandler(error_handler)

        return True
    except OSError as e:
        # Fallback to console logging only
        logging.basicConfig(
            level=getattr(logging, LOG_CONFIG['level']),
            format=LOG_CONFIG['format'],
            handlers=[logging.StreamHandler(sys.stdout)],
            force=True
        )
        logging.getLogger(__name__).warning(f"Could not setup file logging: {e}")
        return False

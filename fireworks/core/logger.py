"""
Logging System for Fireworks
Provides centralized logging with file output and level controls
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

class FireworksLogger:
    _instance: Optional['FireworksLogger'] = None

    def __init__(self, log_dir: str = "logs", log_level: int = logging.INFO):
        if FireworksLogger._instance is not None:
            raise RuntimeError("FireworksLogger is a singleton. Use get_logger() instead.")

        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.log_file = self.log_dir / f"fireworks_{timestamp}.log"

        self.logger = logging.getLogger("Fireworks")
        self.logger.setLevel(logging.DEBUG)

        if self.logger.handlers:
            for handler in self.logger.handlers:
                handler.close()
            self.logger.handlers.clear()

        file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)

        formatter = logging.Formatter(
            '[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s',
            datefmt='%H:%M:%S'
        )
        file_handler.setFormatter(formatter)
        console_handler.setFormatter(formatter)

        self.logger.addHandler(file_handler)
        self.logger.addHandler(console_handler)

        FireworksLogger._instance = self
        self.debug("Logger initialized")

    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str, exc_info: bool = False):
        self.logger.error(message, exc_info=exc_info)

    def critical(self, message: str, exc_info: bool = False):
        self.logger.critical(message, exc_info=exc_info)

    @classmethod
    def get_instance(cls) -> 'FireworksLogger':
        if cls._instance is None:
            cls._instance = FireworksLogger()
        return cls._instance

    @classmethod
    def shutdown(cls):
        if cls._instance:
            for handler in cls._instance.logger.handlers:
                handler.close()
            cls._instance.logger.handlers.clear()
            cls._instance = None

def get_logger() -> FireworksLogger:
    return FireworksLogger.get_instance()

def init_logger(log_dir: str = "logs", log_level: int = logging.INFO):
    if FireworksLogger._instance is None:
        FireworksLogger(log_dir, log_level)
    return get_logger()

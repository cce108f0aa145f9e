# File: src/txbridge/monitoring/logging_config.py

import logging
import logging.handlers
import os
from datetime import datetime
from typing import Optional, Union

HANDLER_NAME = "txbridge"

class LogConfig:
    def __init__(
        self,
        log_dir: Optional[str] = None,
        level: Union[str, int] = "INFO",
        max_size: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5
    ):
        self.log_dir = log_dir
        self.level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
        self.max_size = max_size
        self.backup_count = backup_count

        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

    def log_file(self) -> Optional[str]:
        if not self.log_dir:
            return None
        return os.path.join(
            self.log_dir,
            f'txbridge_{datetime.now().strftime("%Y%m%d")}.log'
        )

    def setup_logging(self) -> logging.Logger:
        console_formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s'
        )

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(console_formatter)
        console_handler.setLevel(self.level)
        console_handler.set_name(HANDLER_NAME)

        root_logger = logging.getLogger()
        # Calling again replaces the handlers installed last time
        for handler in [h for h in root_logger.handlers if h.get_name() == HANDLER_NAME]:
            root_logger.removeHandler(handler)
            handler.close()
        root_logger.setLevel(self.level)
        root_logger.addHandler(console_handler)

        log_file = self.log_file()
        if log_file:
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=self.max_size,
                backupCount=self.backup_count
            )
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            file_handler.setLevel(logging.DEBUG)
            file_handler.set_name(HANDLER_NAME)
            root_logger.addHandler(file_handler)

        return root_logger

"""
Settings read from environment variables.

Values are computed once, when this module is imported, so set the
variables before importing anything from ``isp_crud``.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    log_level: str = os.getenv("ISP_CRUD_LOG_LEVEL", "WARNING")
    log_file: Optional[str] = os.getenv("ISP_CRUD_LOG_FILE") or None
    # products with stock strictly below this count as low stock
    low_stock_threshold: int = int(os.getenv("ISP_CRUD_LOW_STOCK_THRESHOLD", "20"))


settings = Settings()

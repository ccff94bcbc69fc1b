"""
Service configuration, read from the environment.
"""

import os


class Config:
    LOG_LEVEL = os.environ.get("FIX_LATIN_LOG_LEVEL", "INFO").upper()

    # Upload size limit for POST /fix
    MAX_CONTENT_LENGTH = int(os.environ.get("FIX_LATIN_MAX_CONTENT_LENGTH", str(16 * 1024 * 1024)))  # 16MB

"""
Configuration Management

Loads configuration from .env files and provides typed config objects.
Handles the build output location and logging level.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .models import Config


def load_config(env_file: Optional[Path] = None) -> Config:
    """
    Load configuration from .env file and environment variables.

    Searches for .env file in:
    1. Provided env_file path
    2. Current directory
    3. User's home directory

    Environment variables override .env file values.

    Args:
        env_file: Optional path to .env file

    Returns:
        Config object with all settings

    Example:
        config = load_config()
        report = analyze(config.build_path)
    """
    if env_file and env_file.exists():
        load_dotenv(env_file)
    elif Path(".env").exists():
        load_dotenv(".env")
    elif (Path.home() / ".env").exists():
        load_dotenv(Path.home() / ".env")

    config = Config(
        project_root=Path(os.getenv("SITE_AUDIT_PROJECT_ROOT", str(Path.cwd()))),
        build_dir=os.getenv("SITE_AUDIT_BUILD_DIR", ".next"),
        log_level=os.getenv("SITE_AUDIT_LOG_LEVEL", "WARNING"),
    )

    return config

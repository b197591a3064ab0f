"""
Server configuration module.

Centralizes all configuration values and constants. Values are read once at
import time; nothing here is mutated afterwards.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Project paths
PROJECT_ROOT = Path(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Load environment variables from .env file
load_dotenv(os.path.join(PROJECT_ROOT, ".env"))


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Server identity reported during initialize
SERVER_NAME = os.environ.get("TOOLBOX_MCP_SERVER_NAME", "MyMCPServer")
SERVER_VERSION = os.environ.get("TOOLBOX_MCP_SERVER_VERSION", "1.0.0")

# Per-request traces on stderr
DEBUG = _env_flag("TOOLBOX_MCP_DEBUG")

# Timestamp layout for the system status resource
STATUS_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


# Measurement units accepted by the weather tool
class Units:
    METRIC = "metric"
    IMPERIAL = "imperial"


# Resource URIs
class ResourceURI:
    KNOWLEDGE_BASE = "resource://knowledge-base/articles"
    SYSTEM_STATUS = "resource://system/status"

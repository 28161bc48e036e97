"""Exein API configuration constants."""

import os
from importlib.metadata import version
from pathlib import Path

CLIENT_NAME = "ExeinCLI"
CLI_VERSION = version("exein-cli")
USER_AGENT = f"{CLIENT_NAME}/{CLI_VERSION}"

API_HOST = os.environ.get("EXEIN_API_HOST", "cloud.exein.io")
API_PORT = os.environ.get("EXEIN_API_PORT", "443")
API_TLS = os.environ.get("EXEIN_API_TLS", "true").lower() not in ("0", "false", "no")

AUTH_TOKEN_URL = os.environ.get(
    "EXEIN_AUTH_TOKEN_URL",
    "https://auth.exein.io/realms/exein/protocol/openid-connect/token",
)
AUTH_CLIENT_ID = os.environ.get("EXEIN_AUTH_CLIENT_ID", "exein-cli")

EXEIN_CONFIG_DIR = Path(os.environ.get("EXEIN_CONFIG_DIR", Path.home() / ".exein"))
CREDENTIALS_FILE = EXEIN_CONFIG_DIR / "credentials.json"
DEFAULT_TIMEOUT = 30  # seconds
TOKEN_EXPIRY_MARGIN = 30  # seconds

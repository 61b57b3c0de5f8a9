"""Configuration for Camp Grocery."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# App directories
APP_NAME = "camp-grocery"
CONFIG_DIR = Path(os.getenv("CAMP_GROCERY_HOME", str(Path.home() / f".{APP_NAME}")))
PANTRY_FILE = CONFIG_DIR / "pantry.json"

# Logging
LOG_LEVEL = os.getenv("CAMP_GROCERY_LOG_LEVEL", "WARNING")

# Recipe fetching
HTTP_TIMEOUT = float(os.getenv("CAMP_GROCERY_HTTP_TIMEOUT", "30.0"))
USER_AGENT = f"{APP_NAME}/1.0"

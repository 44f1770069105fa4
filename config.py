"""
Model Configuration - Centralized path and settings management.

This module contains all configurable paths and settings for the schema model
tools (CLI and REPL). The model itself is configured in model_structure.config.
"""
import logging
import os
from pathlib import Path

# =============================================================================
# PATH CONFIGURATION
# =============================================================================

# Base directory (project root)
BASE_DIR = Path(__file__).parent

# Sample raw bundles (parser output serialized as JSON)
SAMPLES_DIR = BASE_DIR / "samples"

# REPL command history
HISTORY_FILE = Path(os.environ.get("MODEL_HISTORY_FILE", BASE_DIR / ".model_history"))


# =============================================================================
# SAMPLE BUNDLES
# =============================================================================
# Bundles offered by the interactive menu of main.py

SAMPLE_BUNDLES = {
    "1": {
        "name": "E-commerce (public schema only)",
        "bundle_file": SAMPLES_DIR / "ecommerce.json",
    },
    "2": {
        "name": "Multi-schema (core + billing)",
        "bundle_file": SAMPLES_DIR / "multi_schema.json",
    },
}


# =============================================================================
# OUTPUT & LOGGING
# =============================================================================

JSON_INDENT = 2

LOG_LEVEL = getattr(logging, os.environ.get("MODEL_LOG_LEVEL", "WARNING").upper(), logging.WARNING)
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

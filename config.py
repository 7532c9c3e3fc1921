"""
Configuration for the WooWoo project core.

Settings are explicit: build an AnalyzerSettings (or call load_settings())
and pass it to whatever needs it. Nothing reads ambient global state after
import except the .env loading below.
"""

import os
import yaml
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Workspace conventions
MARKER_FILENAME = "Woofile"
DOCUMENT_SUFFIX = ".woo"

# Paths
SETTINGS_FILE = Path("woowoo.yaml")


class AnalyzerSettings(BaseModel):
    """
    Everything the core and its collaborators are configured with.

    dialect_path replaces the old process-wide dialect manager: collaborators
    that need the dialect read it from the settings object they were given.
    """
    model_config = ConfigDict(extra="ignore")  # Unknown keys in woowoo.yaml are fine

    dialect_path: Optional[str] = None
    exclude_dirs: list[str] = Field(default_factory=list)  # Names pruned from the load walk; none by default
    follow_symlinks: bool = False
    encoding: str = "utf-8"
    verbose: bool = True


def _env_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_settings(path: Optional[Path] = None) -> AnalyzerSettings:
    """
    Load analyzer settings.

    Priority (later wins):
    1. Defaults
    2. YAML file (path, or woowoo.yaml in the current directory)
    3. Environment: WOOWOO_DIALECT, WOOWOO_EXCLUDE_DIRS, WOOWOO_VERBOSE
    """
    data: dict = {}

    settings_file = Path(path) if path else SETTINGS_FILE
    if settings_file.exists():
        with open(settings_file) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{settings_file} must contain a mapping, got {type(data).__name__}")

    dialect = os.environ.get("WOOWOO_DIALECT")
    if dialect:
        data["dialect_path"] = dialect

    exclude = os.environ.get("WOOWOO_EXCLUDE_DIRS")
    if exclude is not None:
        data["exclude_dirs"] = [d.strip() for d in exclude.split(",") if d.strip()]

    verbose = os.environ.get("WOOWOO_VERBOSE")
    if verbose is not None:
        data["verbose"] = _env_flag(verbose)

    return AnalyzerSettings.model_validate(data)

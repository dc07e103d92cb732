"""
Configuration for eitherkit.
"""

from typing import Final

# --- Demo Pipeline ---
DEFAULT_INPUTS: Final[tuple[float, ...]] = (0.25, 0.5)
DIVIDE_BY_ZERO_MESSAGE: Final[str] = "divide by zero"
RESULT_PREFIX: Final[str] = "Result: "
PIPELINE_OFFSET: Final[float] = 2.0

# --- Runtime Type Checking ---
BEARTYPE_THIS_PACKAGE_ENV: Final[str] = "EITHERKIT_BEARTYPE_THIS_PACKAGE"
BEARTYPE_ALL_ENV: Final[str] = "EITHERKIT_BEARTYPE_ALL"

# --- UI Configuration ---
SUCCESS_STYLE: Final[str] = "bold green"
FAILURE_STYLE: Final[str] = "bold red"
PANEL_BORDER_STYLE: Final[str] = "blue"

# --- SSoT Enforcement ---
__all__ = [
    "BEARTYPE_ALL_ENV",
    "BEARTYPE_THIS_PACKAGE_ENV",
    "DEFAULT_INPUTS",
    "DIVIDE_BY_ZERO_MESSAGE",
    "FAILURE_STYLE",
    "PANEL_BORDER_STYLE",
    "PIPELINE_OFFSET",
    "RESULT_PREFIX",
    "SUCCESS_STYLE",
]

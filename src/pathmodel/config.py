"""
Configuration for the pathmodel command line.

Defaults come from the environment (or a .env file). The path library
itself never reads this module.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .core.constants import PATH_SEPARATOR

# Load environment variables from .env file
load_dotenv()


@dataclass
class Config:
    """Configuration settings for the pathmodel command line."""

    separator: str = field(default_factory=lambda: os.getenv('PATHMODEL_SEPARATOR', PATH_SEPARATOR))
    theme: str = field(default_factory=lambda: os.getenv('PATHMODEL_THEME', 'manhattan'))
    normalize_results: bool = False  # Normalize results before printing
    export_json: bool = False  # Print results as JSON
    debug: bool = False  # Verbose logging and tracebacks

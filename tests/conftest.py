"""Pytest configuration for the imtuple test suite."""

import sys
from pathlib import Path

# Add src directory to path so the suite runs without installing the package
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

"""
Simple Calendar entry point.
Run this file to open the interactive calendar menu.
Events are loaded from and saved to CALENDAR_DATA_FILE (default: events.csv).
"""

import sys
from pathlib import Path

# Add src to Python path so the script works without installing the package
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from simple_calendar.cli.app import main


if __name__ == "__main__":
    sys.exit(main())

"""
Dashboard launcher: verify the input CSVs, then hand over to Streamlit.
"""

import subprocess
import sys
from pathlib import Path
from typing import List, Sequence

from gendergap.visualization.constants import DATA_FILES

APP_SCRIPT = "streamlit_app.py"
STREAMLIT_FLAGS = ("--browser.gatherUsageStats", "false")


def missing_data_files(paths: Sequence[str] = DATA_FILES) -> List[str]:
    """Input files the dashboard expects but cannot find."""
    return [path for path in paths if not Path(path).is_file()]


def streamlit_command(script: str = APP_SCRIPT) -> List[str]:
    """Command line that serves ``script`` with the current interpreter's Streamlit."""
    return [sys.executable, "-m", "streamlit", "run", script, *STREAMLIT_FLAGS]


def launch_dashboard():
    """Entry point for the ``dashboard`` command."""
    print("🚀 gendergap dashboard")

    missing = missing_data_files()
    if missing:
        print("❌ Cannot start, these inputs are missing:")
        for path in missing:
            print(f"  - {path}")
        print("Copy the indicator and education CSVs into data/ and retry.")
        sys.exit(1)

    print("📊 Inputs: " + ", ".join(DATA_FILES))
    print("🌐 Serving on the Streamlit default port (Ctrl+C stops it)")

    command = streamlit_command()
    try:
        subprocess.run(command, check=True)
    except KeyboardInterrupt:
        print("\n✅ Dashboard stopped")
    except subprocess.CalledProcessError as e:
        print(f"❌ Streamlit exited with status {e.returncode}")
        sys.exit(1)

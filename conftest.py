# conftest.py
# Pytest configuration: route log files into a temp directory before
# manager.log creates its handlers on first import.

import os
import tempfile
from pathlib import Path

os.environ.setdefault(
    "NETMETRICS_LOG_DIR",
    str(Path(tempfile.gettempdir()) / "netmetrics_test_logs"),
)

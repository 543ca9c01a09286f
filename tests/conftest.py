"""Test configuration for the factorial calculator tests."""

import os
import sys
import tempfile
from pathlib import Path

_ROOT_PATH = Path(__file__).resolve().parents[1]
if str(_ROOT_PATH) not in sys.path:
    sys.path.insert(0, str(_ROOT_PATH))

# Keep log files out of the working tree
os.environ.setdefault("FACTORIAL_LOG_DIR", tempfile.mkdtemp(prefix="factorial_logs_"))

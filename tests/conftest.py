"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports and points
settings at test values before the application is imported.
"""

import os
import sys
import tempfile
from pathlib import Path

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Settings are read once at import time.
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("PUBLIC_BASE_URL", "http://testserver")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="foodorder-uploads-"))

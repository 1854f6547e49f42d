import sys
from pathlib import Path

# Ensure the project root is on sys.path for tests run without installation
PROJECT_ROOT = Path(__file__).resolve().parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

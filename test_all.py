import sys
import unittest
from pathlib import Path

# === repo root importable from any working directory ===
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def load_tests(loader, tests, pattern):
    return loader.discover(str(ROOT / "tests"), pattern="test_*.py")


if __name__ == "__main__":
    unittest.main()

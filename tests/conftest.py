import sys
from pathlib import Path

pytest_plugins = [
    "tests.fixtures.books",
    "tests.fixtures.settings",
]

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

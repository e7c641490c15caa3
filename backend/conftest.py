"""Point the app at a throwaway SQLite file before config is imported."""
import os
import sys
import tempfile

sys.path.insert(0, os.path.dirname(__file__) or '.')

_tmp_dir = tempfile.mkdtemp(prefix="deckboards-test-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_tmp_dir, 'test.db')}"

import os
import tempfile

# Point the app at a throwaway SQLite file before anything imports dalil.
_TMP_DIR = tempfile.mkdtemp(prefix="dalil-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_TMP_DIR, 'dalil_test.db')}"
os.environ["APP_ENV"] = "test"
os.environ["SEED_CATALOGUE"] = "true"
os.environ["DEFAULT_PAGE_SIZE"] = "10"
os.environ["MAX_PAGE_SIZE"] = "100"

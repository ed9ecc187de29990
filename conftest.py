import shutil
from pathlib import Path

import pytest

from sqlsnippets import storage

TEST_SNIPPETS_DIR = Path("data-tests")


@pytest.fixture(autouse=True)
def clean_test_data():
    """Wipe and re-init data-tests/ before every test."""
    if TEST_SNIPPETS_DIR.exists():
        shutil.rmtree(TEST_SNIPPETS_DIR)
    storage.init_storage(TEST_SNIPPETS_DIR)
    yield
    # leave data-tests around after tests for inspection; CI can ignore it

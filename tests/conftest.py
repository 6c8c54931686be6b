import os
import sys

from fastapi.testclient import TestClient

# Ensure project root is on sys.path when pytest runs from a different CWD.
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from string_analyzer.main import create_app  # noqa: E402
from string_analyzer.store import StringStore  # noqa: E402
import pytest  # noqa: E402


@pytest.fixture
def store():
    return StringStore()


@pytest.fixture
def client(store):
    with TestClient(create_app(store=store)) as c:
        yield c

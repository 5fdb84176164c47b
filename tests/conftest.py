"""Shared fixtures: a mongomock backed store and a test client for the app.

The store is injected before the app starts, so the startup hook reuses
it instead of connecting to a real server.
"""

import mongomock
import pytest
from fastapi.testclient import TestClient

from address_book_api.app.core import db
from address_book_api.app.main import app as fastapi_app


@pytest.fixture()
def store():
    # mongomock stands in for a live MongoDB server
    s = db.init_db(mongomock.MongoClient())
    yield s
    db.close_db()


@pytest.fixture()
def client(store):
    with TestClient(fastapi_app) as c:
        yield c


def address_body(**fields):
    address = {
        "firstName": "Max",
        "lastName": "Muster",
        "birthday": "1990-01-01",
        "telephone": "123456",
    }
    address.update(fields)
    return {"address": address}

"""
MongoDB integration for the address store.

This module owns the single process‑wide ``MongoClient``.  ``init_db``
creates it when the application starts and ``close_db`` releases it
on shutdown; request handlers obtain the shared store through
``get_store``.  The driver is thread‑safe and pools its connections,
so one client serves every request.

``AddressStore`` is the only place that talks to the driver.  Each of
its operations returns a ``StoreResult`` instead of raising, so a
failed database call always reaches the caller as a value that can be
mapped to a response.  Converting between the string identifiers used
by the API and MongoDB's ``ObjectId`` also happens here.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from .config import settings

logger = logging.getLogger(__name__)

ADDRESS_COLLECTION = "addresses"

_client: Optional[MongoClient] = None
_store: Optional["AddressStore"] = None


@dataclass
class StoreResult:
    """Outcome of a single store operation.

    ``ok`` is ``True`` on success, in which case ``data`` carries the
    operation's payload (the listed documents or the new id).  On
    failure ``error`` describes the cause.
    """

    ok: bool
    data: Any = None
    error: Optional[str] = None

    @classmethod
    def success(cls, data: Any = None) -> "StoreResult":
        return cls(ok=True, data=data)

    @classmethod
    def failure(cls, error: str) -> "StoreResult":
        return cls(ok=False, error=error)


def object_id(value: str) -> ObjectId:
    """Build a store‑native identifier from its string form.

    Raises ``bson.errors.InvalidId`` if ``value`` is not a 24 character
    hex string.
    """
    return ObjectId(value)


def _to_address(document: Dict[str, Any]) -> Dict[str, Any]:
    """Render a stored document with its ``_id`` as a string ``id``."""
    address = {key: value for key, value in document.items() if key != "_id"}
    address["id"] = str(document["_id"])
    return address


class AddressStore:
    """Document operations on the ``addresses`` collection."""

    def __init__(self, database, collection_name: str = ADDRESS_COLLECTION) -> None:
        self.collection = database[collection_name]

    def find_all(self) -> StoreResult:
        try:
            documents = list(self.collection.find({}))
        except PyMongoError as exc:
            return StoreResult.failure(f"find failed: {exc}")
        return StoreResult.success([_to_address(doc) for doc in documents])

    def insert_one(self, document: Dict[str, Any]) -> StoreResult:
        """Insert ``document`` and return its id as a string."""
        try:
            result = self.collection.insert_one(document)
        except PyMongoError as exc:
            return StoreResult.failure(f"insert failed: {exc}")
        return StoreResult.success(str(result.inserted_id))

    def replace_one(self, address_id: str, document: Dict[str, Any]) -> StoreResult:
        """Replace the whole document with id ``address_id``.

        Fails when the id is malformed or matches no document.
        """
        try:
            result = self.collection.replace_one({"_id": object_id(address_id)}, document)
        except (InvalidId, TypeError) as exc:
            return StoreResult.failure(f"invalid id {address_id!r}: {exc}")
        except PyMongoError as exc:
            return StoreResult.failure(f"replace failed: {exc}")
        if result.matched_count == 0:
            return StoreResult.failure(f"no address with id {address_id}")
        return StoreResult.success(address_id)

    def delete_one(self, address_id: str) -> StoreResult:
        """Remove the document with id ``address_id``.

        Fails when the id is malformed or matches no document.
        """
        try:
            result = self.collection.delete_one({"_id": object_id(address_id)})
        except (InvalidId, TypeError) as exc:
            return StoreResult.failure(f"invalid id {address_id!r}: {exc}")
        except PyMongoError as exc:
            return StoreResult.failure(f"delete failed: {exc}")
        if result.deleted_count == 0:
            return StoreResult.failure(f"no address with id {address_id}")
        return StoreResult.success(address_id)


def init_db(client: Optional[MongoClient] = None) -> "AddressStore":
    """Create the shared client and store.

    If the store is already initialised it is returned unchanged.  A
    ready made ``client`` may be passed in, e.g. a ``mongomock``
    client in tests; otherwise one is created from ``settings``.  The
    driver connects lazily, so this does not fail when the server is
    down.
    """
    global _client, _store
    if _store is not None:
        return _store
    if client is None:
        client = MongoClient(
            settings.mongo_url,
            serverSelectionTimeoutMS=settings.mongo_timeout_ms,
        )
        logger.info("MongoDB client created for %s/%s", settings.mongo_url, settings.mongo_db_name)
    _client = client
    _store = AddressStore(client[settings.mongo_db_name])
    return _store


def close_db() -> None:
    """Close the shared client and forget the store."""
    global _client, _store
    if _client is not None:
        _client.close()
        logger.info("MongoDB client closed")
    _client = None
    _store = None


def get_store() -> AddressStore:
    """Return the shared store, creating it on first use."""
    if _store is None:
        return init_db()
    return _store

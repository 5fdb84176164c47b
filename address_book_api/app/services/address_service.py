"""
Service layer for addresses.

This module implements the four address operations offered by the
API: list, insert, edit and delete.  Insert and edit check the
required fields in a fixed order and answer the first empty one with
its message; the message strings are part of the public contract and
must not change.  Store failures of any kind are answered with
``ERROR`` and logged with their cause.

Database calls are blocking, so they run on the thread pool.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

from bson import ObjectId
from fastapi.concurrency import run_in_threadpool
from fastapi.encoders import jsonable_encoder

from address_book_api.app.core.db import StoreResult, get_store
from address_book_api.app.schemas.address import AddressPayload

logger = logging.getLogger(__name__)

ADDRESS_INSERTED = "ADDRESS INSERTED"
ADDRESS_SAVED = "ADDRESS SAVED"
ADDRESS_DELETED = "ADDRESS DELETED"
ERROR = "ERROR"

# (field, message) in validation order.
REQUIRED_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("firstName", "VORNAME IST LEER!"),
    ("lastName", "NACHNAME IST LEER!"),
    ("birthday", "GEBURSTAG IST LEER!"),
    ("telephone", "TELEFONNUMMER IST LEER!"),
)


def _is_empty(value: Optional[str]) -> bool:
    return value is None or value == ""


def validate_address(address: AddressPayload) -> Optional[str]:
    """Return the message for the first empty required field, if any."""
    for name, message in REQUIRED_FIELDS:
        if _is_empty(getattr(address, name)):
            return message
    return None


def build_document(address: AddressPayload) -> Dict[str, str]:
    """Document body holding the four address fields, without an id."""
    return {name: getattr(address, name) for name, _ in REQUIRED_FIELDS}


class AddressService:
    """Service class for managing addresses."""

    @classmethod
    async def list_addresses(cls) -> StoreResult:
        """Return all stored addresses.

        On success the result carries the stored documents rendered as
        JSON compatible dicts, extra keys and non-string values
        included.  A document that cannot be encoded turns the result
        into a failure.  Failures are logged here; the caller decides
        on the response.
        """
        result = await run_in_threadpool(get_store().find_all)
        if result.ok:
            try:
                result = StoreResult.success(
                    jsonable_encoder(result.data, custom_encoder={ObjectId: str})
                )
            except (TypeError, ValueError) as exc:
                result = StoreResult.failure(f"cannot encode stored addresses: {exc}")
        if not result.ok:
            logger.error("Listing addresses failed: %s", result.error)
        return result

    @classmethod
    async def insert_address(cls, address: AddressPayload) -> str:
        """Validate and insert a new address under a fresh id."""
        message = validate_address(address)
        if message is not None:
            return message
        document = {"_id": ObjectId(), **build_document(address)}
        result = await run_in_threadpool(get_store().insert_one, document)
        if not result.ok:
            logger.warning("Inserting address failed: %s", result.error)
            return ERROR
        logger.info("Inserted address %s", result.data)
        return ADDRESS_INSERTED

    @classmethod
    async def edit_address(cls, address: AddressPayload) -> str:
        """Replace all fields of the address with the given id."""
        if _is_empty(address.id):
            return ERROR
        message = validate_address(address)
        if message is not None:
            return message
        result = await run_in_threadpool(get_store().replace_one, address.id, build_document(address))
        if not result.ok:
            logger.warning("Editing address %s failed: %s", address.id, result.error)
            return ERROR
        logger.info("Updated address %s", address.id)
        return ADDRESS_SAVED

    @classmethod
    async def delete_address(cls, address: AddressPayload) -> str:
        """Delete the address with the given id."""
        if _is_empty(address.id):
            return ERROR
        result = await run_in_threadpool(get_store().delete_one, address.id)
        if not result.ok:
            logger.warning("Deleting address %s failed: %s", address.id, result.error)
            return ERROR
        logger.info("Deleted address %s", address.id)
        return ADDRESS_DELETED


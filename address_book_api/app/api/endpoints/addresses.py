"""
Address endpoints.

These routes expose list, insert, edit and delete for the address
book.  Mutating routes take a JSON body of the form
``{"address": {...}}`` and answer with a fixed plaintext message; the
list route answers with a JSON array.  Route paths keep the verb style
(``/getAddresses``, ``/insertAddress`` ...) that existing clients call.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, PlainTextResponse

from address_book_api.app.schemas.address import AddressRequest
from address_book_api.app.services.address_service import ERROR, AddressService

router = APIRouter()


@router.get("/getAddresses", response_class=JSONResponse)
async def get_addresses():
    """Return every stored address as it is stored.

    Documents are passed through unchanged apart from ``_id``, which
    is rendered as the string ``id``.  Answers ``ERROR`` with HTTP 500
    if the database cannot be read or its documents cannot be encoded.
    """
    result = await AddressService.list_addresses()
    if not result.ok:
        return PlainTextResponse(ERROR, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return JSONResponse(content=result.data)


@router.post("/insertAddress", response_class=PlainTextResponse)
async def insert_address(body: AddressRequest) -> str:
    """Insert a new address."""
    return await AddressService.insert_address(body.address)


@router.post("/editAddress", response_class=PlainTextResponse)
async def edit_address(body: AddressRequest) -> str:
    """Replace an existing address."""
    return await AddressService.edit_address(body.address)


@router.post("/deleteAddress", response_class=PlainTextResponse)
async def delete_address(body: AddressRequest) -> str:
    """Delete an address by id."""
    return await AddressService.delete_address(body.address)

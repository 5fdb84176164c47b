"""Tests for address validation and document building."""

from address_book_api.app.schemas.address import AddressPayload
from address_book_api.app.services.address_service import build_document, validate_address


def test_validate_complete_address():
    address = AddressPayload(firstName="Max", lastName="Muster", birthday="1990-01-01", telephone="1")
    assert validate_address(address) is None


def test_validate_reports_first_empty_field():
    assert validate_address(AddressPayload()) == "VORNAME IST LEER!"
    assert validate_address(AddressPayload(firstName="Max", birthday="")) == "NACHNAME IST LEER!"
    assert (
        validate_address(AddressPayload(firstName="Max", lastName="Muster", telephone="1"))
        == "GEBURSTAG IST LEER!"
    )


def test_whitespace_is_not_empty():
    address = AddressPayload(firstName=" ", lastName=" ", birthday=" ", telephone=" ")
    assert validate_address(address) is None


def test_build_document_excludes_id():
    address = AddressPayload(id="abc", firstName="Max", lastName="Muster", birthday="b", telephone="t")
    assert build_document(address) == {
        "firstName": "Max",
        "lastName": "Muster",
        "birthday": "b",
        "telephone": "t",
    }

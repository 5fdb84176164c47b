"""
Address Book API.

HTTP CRUD backend for an address book stored in MongoDB.  The
application lives in the :mod:`address_book_api.app` subpackage.
"""

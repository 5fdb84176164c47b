"""
Address Book API application package.

The FastAPI application lives in :mod:`address_book_api.app.main`.
"""

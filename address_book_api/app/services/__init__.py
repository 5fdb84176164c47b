"""
Service layer abstraction.

Services hold the request handling logic and talk to the store through
``core.db``; API handlers only translate their results into HTTP
responses.
"""

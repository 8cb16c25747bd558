"""
Service layer abstraction.

Each service encapsulates the business logic behind a group of
endpoints.  Services work against the ``AddressBook`` they are given
rather than a global, so an application (or a test) decides which book
is shared by its handlers.
"""

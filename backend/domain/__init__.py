"""Domain layer for the users API.

Holds the User entity, its identifier, the field rules and the repository
port, decoupled from the HTTP surface and from the document store.
"""

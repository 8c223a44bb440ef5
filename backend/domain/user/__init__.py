"""User domain module.

This domain manages user records (account + email): identity, field
validation and the persistence contract. Storage lives in infrastructure.
"""

"""REST surface of the users API."""

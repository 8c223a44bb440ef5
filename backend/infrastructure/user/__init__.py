"""User repository implementations (MongoDB, in-memory) and factory."""

"""Shared constants."""

APP_NAME = "kancli"
DB_FILENAME = "kancli.db"

# Storage keys
LISTS_KEY = b"lists"
CORRUPT_KEY = b"lists.corrupt"

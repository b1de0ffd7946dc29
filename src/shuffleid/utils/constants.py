"""Shared constants for the codec and its bundled data."""
from __future__ import annotations

from pathlib import Path

DEFAULT_ALPHABET = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
DEFAULT_MIN_LENGTH = 0

MIN_ALPHABET_LENGTH = 3
MIN_LENGTH_LIMIT = 255
MIN_BLOCKLIST_WORD_LENGTH = 3
MAX_NUMBER = 2**64 - 1

DATA_DIR = Path(__file__).resolve().parents[1] / "data"
BLOCKLIST_SCHEMA_PATH = DATA_DIR / "blocklist.schema.json"

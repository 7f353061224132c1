"""Adapters - I/O implementations of ports."""

from .click_prompter import ClickPrompter
from .json_store import JsonTaskStore, StoreCorrupt, StoreMissing

__all__ = [
    "JsonTaskStore",
    "StoreMissing",
    "StoreCorrupt",
    "ClickPrompter",
]

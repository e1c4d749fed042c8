from .codec import CorruptSelectionError, decode_selection, encode_selection
from .storage import FileStorage, MemoryStorage, SlotStorage
from .store import SelectionStore, open_selection_store

__all__ = [
    "CorruptSelectionError",
    "FileStorage",
    "MemoryStorage",
    "SelectionStore",
    "SlotStorage",
    "decode_selection",
    "encode_selection",
    "open_selection_store",
]

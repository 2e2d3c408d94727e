"""Template stores (file, memory, null, layered) and pass-through wrappers."""

from .base import TemplateStore
from .file import FileStore
from .memory import MemoryStore
from .null import NullStore
from .partial import PartialStore, partial_file_store, partial_memory_store
from .wrappers import OptionalStore, StoreRef

__all__ = [
    "TemplateStore",
    "FileStore",
    "MemoryStore",
    "NullStore",
    "PartialStore",
    "StoreRef",
    "OptionalStore",
    "partial_file_store",
    "partial_memory_store",
]

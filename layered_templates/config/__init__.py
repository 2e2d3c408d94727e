"""Store configuration: pydantic model plus builders."""

from .core import build_resolver, build_store, load_store_config
from .model import StoreConfig

__all__ = ["StoreConfig", "build_resolver", "build_store", "load_store_config"]

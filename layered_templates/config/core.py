"""Build template stores and resolvers from configuration."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from pydantic import ValidationError

from ..errors import ConfigurationError
from ..loader import get_loader
from ..logs.logger import logger
from ..resolver import Resolver
from ..store import FileStore, NullStore, TemplateStore, partial_file_store
from .model import StoreConfig


def load_store_config(environ: Mapping[str, str] | None = None) -> StoreConfig:
    """Read the store configuration from the environment.

    Args:
        environ: Mapping to read instead of ``os.environ``.

    Raises:
        ConfigurationError: The variables describe an invalid configuration.
    """
    env = os.environ if environ is None else environ
    try:
        return StoreConfig.from_env(env)
    except ValidationError as e:
        logger.log_event("config", "invalid", level=logging.ERROR, error=str(e))
        raise ConfigurationError(
            "invalid template store configuration", data={"errors": e.errors()}
        ) from e


def build_store(config: StoreConfig) -> TemplateStore:
    """Build the store described by ``config``.

    No paths yields a ``NullStore``, a default path alone a ``FileStore``, and
    both paths a ``PartialStore`` over two ``FileStore`` instances.
    """
    loader = get_loader(config.format)
    logger.log_event(
        "config",
        "loaded",
        level=logging.DEBUG,
        format=config.format,
        default_path=config.default_path,
        partial_path=config.partial_path,
    )
    if config.default_path is None:
        logger.log_event("config", "null_store", level=logging.DEBUG)
        return NullStore()
    if config.partial_path is None:
        return FileStore(config.default_path, loader)
    return partial_file_store(config.default_path, config.partial_path, loader)


def build_resolver(config: StoreConfig) -> Resolver[TemplateStore]:
    """Build a ``Resolver`` over the store described by ``config``.

    Raises:
        TemplateError: The initial templates could not be loaded.
    """
    return Resolver(build_store(config))

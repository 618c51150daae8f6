from __future__ import annotations

from contextlib import contextmanager

from .container import ReflectionConfig, create_container


@contextmanager
def bootstrap_app(config: ReflectionConfig):
    container = create_container(config)
    container.init_resources()
    try:
        yield container
    finally:
        container.close()


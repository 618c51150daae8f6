from .bootstrap import bootstrap_app
from .container import ReflectionConfig, ReflectionContainer, create_container

__all__ = ["ReflectionConfig", "ReflectionContainer", "bootstrap_app", "create_container"]

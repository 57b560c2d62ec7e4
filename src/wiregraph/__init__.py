from wiregraph.binding_key import DEFAULT_NAME, BindingKey
from wiregraph.container import Container
from wiregraph.exceptions import (
    WiregraphConfigurationError,
    WiregraphConstructionError,
    WiregraphCyclicDependencyError,
    WiregraphDependencyExtractionError,
    WiregraphError,
    WiregraphInvalidArgumentError,
    WiregraphNoBindingFoundError,
    WiregraphNoSuitableInitializerError,
    WiregraphResolutionError,
)
from wiregraph.lock_mode import LockMode
from wiregraph.markers import Named, initializer

__all__ = [
    "DEFAULT_NAME",
    "BindingKey",
    "Container",
    "LockMode",
    "Named",
    "WiregraphConfigurationError",
    "WiregraphConstructionError",
    "WiregraphCyclicDependencyError",
    "WiregraphDependencyExtractionError",
    "WiregraphError",
    "WiregraphInvalidArgumentError",
    "WiregraphNoBindingFoundError",
    "WiregraphNoSuitableInitializerError",
    "WiregraphResolutionError",
    "initializer",
]

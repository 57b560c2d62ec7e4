from __future__ import annotations

import logging
from typing import Any

from wiregraph._internal.initializers import Initializer, InitializerExtractor, InitializerParameter
from wiregraph._internal.registry import BindingRegistry
from wiregraph.binding_key import BindingKey
from wiregraph.exceptions import WiregraphNoSuitableInitializerError

logger = logging.getLogger(__name__)


class InitializerSelector:
    """Pick the initializer used to build an implementation.

    Selection is first-match, not best-match: initializers are tried in
    declaration order and the first one whose parameters are all resolvable
    wins, even when a later one would use more registered dependencies.
    """

    def __init__(self, registry: BindingRegistry, extractor: InitializerExtractor) -> None:
        self._registry = registry
        self._extractor = extractor

    def select(self, implementation: type[Any], name: str) -> Initializer:
        """Return the first usable initializer of ``implementation``.

        Args:
            implementation: Concrete class to build.
            name: Binding name the implementation is being resolved under.

        Raises:
            WiregraphNoSuitableInitializerError: If no initializer is usable.

        """
        for initializer in self._extractor.extract(implementation):
            if all(self.is_resolvable(parameter) for parameter in initializer.parameters):
                logger.debug("Selected initializer %s for %s", initializer.label, name)
                return initializer
        raise WiregraphNoSuitableInitializerError(implementation, name)

    def is_resolvable(self, parameter: InitializerParameter) -> bool:
        """Return true when a parameter can be satisfied or may keep its default.

        Args:
            parameter: Initializer parameter to check.

        """
        return self.key_for(parameter) is not None or parameter.has_default

    def key_for(self, parameter: InitializerParameter) -> BindingKey | None:
        """Return the key a parameter resolves under, if any is registered.

        The exact ``(type, parameter name)`` key wins over the
        ``(type, DEFAULT_NAME)`` fallback.

        Args:
            parameter: Initializer parameter to look up.

        """
        for key in (parameter.key, parameter.default_key):
            if key is not None and self._registry.contains(key):
                return key
        return None


__all__ = ["InitializerSelector"]

"""Name lookup for base references.

The propagation phases never decide visibility rules themselves: they hand a
base name to a `ReferenceFinder`. `PackageReferenceFinder` is the default,
package-scoped strategy.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from decograph.core.config import get_config
from decograph.core.models import ObjectDefinition

logger = logging.getLogger(__name__)


class ReferenceFinder(ABC):
    """Resolve a base name to the definition it refers to."""

    @abstractmethod
    def find(
        self,
        name: str,
        package: str,
        objects: Sequence[ObjectDefinition],
    ) -> ObjectDefinition | None:
        """Return the definition `name` refers to from `package`, if any."""


class PackageReferenceFinder(ReferenceFinder):
    """Look a name up among abstract definitions, package by package.

    The object's own package is searched first, then each default package in
    order. A qualified name (`org.eolang.int`) is only searched in its own
    qualifier. Among matches in one package the shallowest definition wins and
    document order breaks ties.
    """

    def __init__(self, default_packages: Sequence[str] | None = None) -> None:
        if default_packages is None:
            default_packages = get_config().default_packages
        self._default_packages = list(default_packages)

    def find(
        self,
        name: str,
        package: str,
        objects: Sequence[ObjectDefinition],
    ) -> ObjectDefinition | None:
        if not name:
            return None

        if "." in name:
            qualifier, _, name = name.rpartition(".")
            if not qualifier or not name:
                return None
            packages = [qualifier]
        else:
            packages = [package, *self._default_packages]

        candidates = [obj for obj in objects if obj.is_abstract and obj.name == name]
        for pkg in packages:
            matches = [obj for obj in candidates if obj.package == pkg]
            if matches:
                return min(matches, key=lambda obj: obj.depth)

        logger.debug(f"No definition found for '{name}' from package '{package}'")
        return None

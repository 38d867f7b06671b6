# registry.py
# Description: Registry of the property aggregators. Each module under
# computations/properties decorates its aggregator with @REG.register("property", key);
# importing this module imports all of them.

from __future__ import annotations
from typing import Callable, Dict, List
import importlib
import pkgutil

PLUGIN_PACKAGE = "computations.properties"


class Registry:

    def __init__(self) -> None:
        # Example: _groups["property"]["walsh_prop"] is walsh_aggregator.
        self._groups: Dict[str, Dict[str, Callable]] = {}

    def register(self, category: str, key: str) -> Callable[[Callable], Callable]:
        entries = self._groups.setdefault(category.lower(), {})

        def _decorator(aggregator: Callable) -> Callable:
            entries[key.lower()] = aggregator
            return aggregator

        return _decorator

    def get(self, category: str, key: str) -> Callable:
        entries = self._groups.get(category.lower(), {})
        if key.lower() not in entries:
            raise KeyError(f"No '{category}' registered under '{key}'. Known: {sorted(entries)}.")
        return entries[key.lower()]

    def keys(self, category: str) -> List[str]:
        return sorted(self._groups.get(category.lower(), {}))


REG = Registry()


def load_plugins(package_name: str = PLUGIN_PACKAGE) -> None:
    # Imports every module of the package so their @REG.register decorators run.
    package = importlib.import_module(package_name)
    for module_info in pkgutil.walk_packages(package.__path__, package_name + "."):
        importlib.import_module(module_info.name)


# REG exists before the plugins import it back.
load_plugins()

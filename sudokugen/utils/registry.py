# -*- coding: utf-8 -*-
"""A registry for named classes and functions."""
import importlib
from typing import Any, Callable, Dict, List, Optional

from sudokugen.utils.log import get_logger

logger = get_logger(__name__)


class Registry(object):
    """A registry that maps names to classes or functions.

    Modules are either registered eagerly with `register_module`, or listed in
    `default_mapping` as dotted import paths and imported on first `get`.

    Args:
        name (str): Registry name.
        default_mapping (Optional[Dict[str, str]]): Name to dotted path mapping
            of the built-in modules.
    """

    def __init__(self, name: str, default_mapping: Optional[Dict[str, str]] = None):
        self._name = name
        self._modules: Dict[str, Any] = {}
        self._default_mapping: Dict[str, str] = dict(default_mapping or {})

    @property
    def name(self) -> str:
        return self._name

    @property
    def modules(self) -> Dict[str, Any]:
        return self._modules

    def list(self) -> List[str]:
        """Names of every known module, registered or lazily importable."""
        return sorted(set(self._modules) | set(self._default_mapping))

    def __contains__(self, module_key: str) -> bool:
        return module_key in self._modules or module_key in self._default_mapping

    def get(self, module_key: str) -> Any:
        """Get a module by name, or None if it is unknown."""
        if module_key not in self._modules and module_key in self._default_mapping:
            self._import_default(module_key)
        return self._modules.get(module_key, None)

    def _import_default(self, module_key: str) -> None:
        module_path, _, attr = self._default_mapping[module_key].rpartition(".")
        module = importlib.import_module(module_path)
        # importing usually registers the module through the decorator
        if module_key not in self._modules:
            self._modules[module_key] = getattr(module, attr)

    def _register_module(self, module_name: str, module_cls: Any, force: bool = False) -> None:
        if module_name in self._modules and not force:
            raise KeyError(f"{module_name} is already registered in {self.name}")
        self._modules[module_name] = module_cls

    def register_module(
        self, module_name: str, module_cls: Any = None, force: bool = False
    ) -> Callable:
        """Register a module, directly or as a decorator.

        Example:
            >>> SOLVERS = Registry("solvers")
            >>> @SOLVERS.register_module("my_solver")
            >>> class MySolver:
            >>>     pass
        """
        if module_cls is not None:
            self._register_module(module_name, module_cls, force=force)
            return module_cls

        def _register(module_cls: Any) -> Any:
            self._register_module(module_name, module_cls, force=force)
            logger.debug(f"Registered `{module_name}` in registry `{self.name}`.")
            return module_cls

        return _register

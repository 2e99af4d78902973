from __future__ import annotations

import importlib
from typing import Callable, Dict, Type, TypeVar

from .base_agent import BaseStrategy

STRATEGY_REGISTRY: Dict[str, Type[BaseStrategy]] = {}
S = TypeVar("S", bound=Type[BaseStrategy])


def register_strategy(key: str, cls: S | None = None) -> S | Callable[[S], S]:
    """
    Make a strategy available to scenarios under a short key.

    Works as `@register_strategy("chessboard")` on the class, or as
    `register_strategy("chessboard", ChessboardStrategy)`.
    """
    def add(strategy_cls: S) -> S:
        STRATEGY_REGISTRY[key] = strategy_cls
        return strategy_cls

    return add if cls is None else add(cls)


def _import_strategy(path: str) -> type:
    module_name, _, attr = path.rpartition(".")
    try:
        return getattr(importlib.import_module(module_name), attr)
    except (ImportError, AttributeError) as exc:
        raise ValueError(f"Cannot import strategy '{path}': {exc}") from exc


def resolve_strategy_class(type_ref: str) -> Type[BaseStrategy]:
    """
    Turn a scenario's strategy `type` into a class.

    Registered keys win; anything else must be a dotted "pkg.module.Class"
    path to a BaseStrategy subclass.

    Raises:
        ValueError: Unknown key, or a path that does not import
        TypeError: The path names something other than a BaseStrategy subclass
    """
    registered = STRATEGY_REGISTRY.get(type_ref)
    if registered is not None:
        return registered

    if "." not in type_ref:
        known = ", ".join(sorted(STRATEGY_REGISTRY)) or "none"
        raise ValueError(f"Unknown strategy type '{type_ref}' (registered: {known})")

    cls = _import_strategy(type_ref)
    if not (isinstance(cls, type) and issubclass(cls, BaseStrategy)):
        raise TypeError(f"{type_ref} is not a BaseStrategy subclass")
    return cls

"""Named day attributes: each maps a DayInfo to a flat dict of cycle values."""

from __future__ import annotations
from typing import Any, Callable, Dict, List, Sequence

from ..core.types import DayInfo

AttrFunc = Callable[[DayInfo], Dict[str, Any]]
_ATTRIBUTES: Dict[str, AttrFunc] = {}


def register_attribute(name: str, fn: AttrFunc, *, overwrite: bool = False) -> None:
    if name in _ATTRIBUTES and not overwrite:
        raise KeyError(f"Attribute '{name}' already registered. Use overwrite=True to replace.")
    _ATTRIBUTES[name] = fn


def attribute(name: str) -> Callable[[AttrFunc], AttrFunc]:
    """Decorator form of register_attribute."""
    def deco(fn: AttrFunc) -> AttrFunc:
        register_attribute(name, fn)
        return fn
    return deco


def list_attributes() -> List[str]:
    return sorted(_ATTRIBUTES)


def compute_attributes(info: DayInfo, names: Sequence[str]) -> Dict[str, Any]:
    """Merge the outputs of ``names`` in order; later keys win."""
    out: Dict[str, Any] = {}
    for name in names:
        try:
            fn = _ATTRIBUTES[name]
        except KeyError:
            raise KeyError(f"Unknown attribute '{name}'. Available: {list_attributes()}") from None
        out.update(fn(info))
    return out

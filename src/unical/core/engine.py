from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Protocol

from .errors import ConverterNotFoundError
from .types import CalendarDate, CalendarInfo, CalendarKind, KindLike, as_kind


class CalendarConverter(Protocol):
    kind: CalendarKind

    def to_jdn(self, year: int, month: int, day: int) -> int: ...
    def from_jdn(self, jdn: int) -> CalendarDate: ...
    def info(self) -> CalendarInfo: ...
    def format(self, d: CalendarDate, pattern: str = "YYYY-MM-DD") -> str: ...
    def parse(self, text: str) -> Optional[CalendarDate]: ...


@dataclass(frozen=True)
class CalendarRegistry:
    """Immutable kind -> converter map. Extension returns a new registry."""
    _converters: Mapping[CalendarKind, CalendarConverter] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_converters", MappingProxyType(dict(self._converters)))

    def get(self, kind: KindLike) -> CalendarConverter:
        k = as_kind(kind)
        if k not in self._converters:
            raise ConverterNotFoundError(k)
        return self._converters[k]

    def list(self) -> List[str]:
        return sorted(k.value for k in self._converters)

    def __contains__(self, kind: object) -> bool:
        return kind in self._converters

    def __iter__(self) -> Iterator[CalendarKind]:
        return iter(self._converters)

    def __len__(self) -> int:
        return len(self._converters)

    def with_converter(
        self, kind: KindLike, converter: CalendarConverter, *, overwrite: bool = False
    ) -> "CalendarRegistry":
        k = as_kind(kind)
        if (not overwrite) and (k in self._converters):
            raise KeyError(f"Calendar '{k}' already registered. Use overwrite=True to replace.")
        merged: Dict[CalendarKind, CalendarConverter] = dict(self._converters)
        merged[k] = converter
        return CalendarRegistry(merged)

    def convert(self, d: CalendarDate, target: KindLike) -> CalendarDate:
        """target.from_jdn(source.to_jdn(d)); missing kinds name both ends."""
        names = (str(d.calendar), str(target))
        try:
            src = as_kind(d.calendar)
            tgt = as_kind(target)
        except ConverterNotFoundError as e:
            raise ConverterNotFoundError(e.kind, source=names[0], target=names[1]) from None
        for k in (src, tgt):
            if k not in self._converters:
                raise ConverterNotFoundError(k, source=src.value, target=tgt.value)
        jdn = self._converters[src].to_jdn(d.year, d.month, d.day)
        return self._converters[tgt].from_jdn(jdn)

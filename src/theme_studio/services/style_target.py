"""The shared style target that receives synchronized property values.

TokenSyncEngine only talks to the StyleTarget interface, so tests and
alternative renderers can swap in their own target.
"""

from abc import ABC, abstractmethod
from functools import lru_cache

DARK_FLAG = "dark"


class StyleTarget(ABC):
    @abstractmethod
    def set_property(self, name: str, value: str) -> None:
        pass

    @abstractmethod
    def remove_property(self, name: str) -> None:
        pass

    @abstractmethod
    def get_property(self, name: str) -> str | None:
        pass

    @abstractmethod
    def snapshot(self) -> dict[str, str]:
        """Copy of every property currently set."""
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def set_flag(self, flag: str, enabled: bool) -> None:
        pass

    @abstractmethod
    def has_flag(self, flag: str) -> bool:
        pass


class InMemoryStyleTarget(StyleTarget):
    """Property map plus a set of flags, the equivalent of a root element's
    inline style and class list."""

    def __init__(self) -> None:
        self._properties: dict[str, str] = {}
        self._flags: set[str] = set()

    def set_property(self, name: str, value: str) -> None:
        self._properties[name] = value

    def remove_property(self, name: str) -> None:
        self._properties.pop(name, None)

    def get_property(self, name: str) -> str | None:
        return self._properties.get(name)

    def snapshot(self) -> dict[str, str]:
        return dict(self._properties)

    def clear(self) -> None:
        self._properties.clear()
        self._flags.clear()

    def set_flag(self, flag: str, enabled: bool) -> None:
        if enabled:
            self._flags.add(flag)
        else:
            self._flags.discard(flag)

    def has_flag(self, flag: str) -> bool:
        return flag in self._flags

    @property
    def flags(self) -> frozenset[str]:
        return frozenset(self._flags)

    def __len__(self) -> int:
        return len(self._properties)

    def __contains__(self, name: object) -> bool:
        return name in self._properties

    def to_css(self, selector: str = ":root") -> str:
        lines = [f"  {name}: {value};" for name, value in self._properties.items()]
        return "\n".join([f"{selector} {{", *lines, "}"]) + "\n"


@lru_cache
def get_style_target() -> InMemoryStyleTarget:
    """Process-wide style target shared by every engine that is not given one.

    Call get_style_target.cache_clear() to start from an empty target.
    """
    return InMemoryStyleTarget()

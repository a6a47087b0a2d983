from collections import deque
from dataclasses import dataclass, field, fields, replace
from typing import Final, Iterator

from theme_studio.domain.color_space import (
    normalize_oklch,
    oklch_to_hsv,
    oklch_to_rgb,
    rgb_to_hex,
    stringify_oklch,
)
from theme_studio.domain.value_objects import Hsv, Oklch, Rgb


@dataclass(frozen=True, slots=True)
class ColorToken:
    """A named color whose OKLCH triple is the single source of truth.

    hex, rgb, hsv and oklch_string are computed at construction and cannot be
    passed in, so they always agree with oklch. Changing a color means
    building a new token.
    """

    name: str
    oklch: Oklch
    value: str | None = None
    linked_to: str | None = None
    linked_colors: tuple[str, ...] = ()
    hex: str = field(init=False)
    rgb: Rgb = field(init=False)
    hsv: Hsv = field(init=False)
    oklch_string: str = field(init=False)

    def __post_init__(self) -> None:
        oklch = normalize_oklch(self.oklch)
        rgb = oklch_to_rgb(oklch)
        object.__setattr__(self, "oklch", oklch)
        object.__setattr__(self, "rgb", rgb)
        object.__setattr__(self, "hex", rgb_to_hex(rgb))
        object.__setattr__(self, "hsv", oklch_to_hsv(oklch))
        object.__setattr__(self, "oklch_string", stringify_oklch(oklch))
        object.__setattr__(self, "linked_colors", tuple(self.linked_colors))

    @classmethod
    def from_lch(cls, name: str, l: float, c: float, h: float) -> "ColorToken":
        return cls(name, Oklch(l, c, h))

    def with_oklch(self, oklch: Oklch) -> "ColorToken":
        """Return a copy with a new color; links and name are preserved."""
        return ColorToken(
            self.name,
            oklch,
            linked_to=self.linked_to,
            linked_colors=self.linked_colors,
        )

    @property
    def is_linked(self) -> bool:
        return self.linked_to is not None


@dataclass(frozen=True)
class ThemeColors:
    """The semantic color roles of one mode (light or dark).

    Roles left as None are unbound: they are not written to the style target.
    """

    background: ColorToken | None = None
    foreground: ColorToken | None = None
    card: ColorToken | None = None
    card_foreground: ColorToken | None = None
    popover: ColorToken | None = None
    popover_foreground: ColorToken | None = None
    primary: ColorToken | None = None
    primary_foreground: ColorToken | None = None
    secondary: ColorToken | None = None
    secondary_foreground: ColorToken | None = None
    accent: ColorToken | None = None
    accent_foreground: ColorToken | None = None
    muted: ColorToken | None = None
    muted_foreground: ColorToken | None = None
    destructive: ColorToken | None = None
    destructive_foreground: ColorToken | None = None
    warning: ColorToken | None = None
    warning_foreground: ColorToken | None = None
    success: ColorToken | None = None
    success_foreground: ColorToken | None = None
    border: ColorToken | None = None
    input: ColorToken | None = None
    ring: ColorToken | None = None
    chart_1: ColorToken | None = None
    chart_2: ColorToken | None = None
    chart_3: ColorToken | None = None
    chart_4: ColorToken | None = None
    chart_5: ColorToken | None = None
    sidebar: ColorToken | None = None
    sidebar_foreground: ColorToken | None = None
    sidebar_primary: ColorToken | None = None
    sidebar_primary_foreground: ColorToken | None = None
    sidebar_accent: ColorToken | None = None
    sidebar_accent_foreground: ColorToken | None = None
    sidebar_border: ColorToken | None = None
    sidebar_ring: ColorToken | None = None
    scrollbar_track: ColorToken | None = None
    scrollbar_thumb: ColorToken | None = None

    def get(self, role: str) -> ColorToken | None:
        if role not in COLOR_ROLES:
            raise KeyError(role)
        return getattr(self, role)

    def items(self) -> Iterator[tuple[str, ColorToken]]:
        """Yield (role, token) for every bound role in declaration order."""
        for role in COLOR_ROLES:
            token = getattr(self, role)
            if token is not None:
                yield role, token

    def missing(self, roles: tuple[str, ...]) -> list[str]:
        return [role for role in roles if getattr(self, role) is None]

    def with_color(self, role: str, oklch: Oklch) -> "ThemeColors":
        """Set a role's color and propagate it down every link chain below it.

        Setting a color on a linked role breaks its link first.
        """
        base = self.unlink(role) if self.get(role) is not None else self
        current = base.get(role)
        token = (
            current.with_oklch(oklch)
            if current is not None
            else ColorToken(role, oklch)
        )
        updates = {role: token}
        updates.update(base._mirrored(role, token.linked_colors, oklch))
        return replace(base, **updates)

    def link(self, child: str, parent: str) -> "ThemeColors":
        """Make child mirror parent's color until unlinked.

        Links that would close a cycle are refused.
        """
        parent_token = self.get(parent)
        child_token = self.get(child)
        if parent_token is None or child == parent or self._follows(parent, child):
            return self

        updates: dict[str, ColorToken] = {}
        if child_token is not None and child_token.linked_to not in (None, parent):
            updates.update(self._detach(child, child_token.linked_to))

        parent_token = updates.get(parent, parent_token)
        children = tuple(dict.fromkeys((*parent_token.linked_colors, child)))
        updates[parent] = replace(parent_token, linked_colors=children)
        updates[child] = ColorToken(
            child,
            parent_token.oklch,
            linked_to=parent,
            linked_colors=child_token.linked_colors if child_token else (),
        )
        updates.update(self._mirrored(child, updates[child].linked_colors, parent_token.oklch))
        return replace(self, **updates)

    def unlink(self, child: str) -> "ThemeColors":
        """Drop child's link; it keeps the color it currently shows."""
        child_token = self.get(child)
        if child_token is None or child_token.linked_to is None:
            return self
        updates = self._detach(child, child_token.linked_to)
        updates[child] = replace(child_token, linked_to=None)
        return replace(self, **updates)

    def _follows(self, role: str, ancestor: str) -> bool:
        """True if role mirrors ancestor directly or through a chain of links."""
        seen = {role}
        parent = self.get(role).linked_to
        while parent is not None and parent not in seen:
            if parent == ancestor:
                return True
            seen.add(parent)
            token = self.get(parent)
            parent = token.linked_to if token is not None else None
        return False

    def _mirrored(
        self, role: str, children: tuple[str, ...], oklch: Oklch
    ) -> dict[str, ColorToken]:
        """Recolor every descendant of role, walking the link graph breadth-first."""
        updates: dict[str, ColorToken] = {}
        pending = deque((role, child) for child in children)
        while pending:
            parent, child = pending.popleft()
            token = self.get(child)
            if token is None or token.linked_to != parent or child in updates:
                continue
            updates[child] = token.with_oklch(oklch)
            pending.extend((child, grandchild) for grandchild in token.linked_colors)
        return updates

    def _detach(self, child: str, parent: str) -> dict[str, ColorToken]:
        parent_token = self.get(parent)
        if parent_token is None:
            return {}
        remaining = tuple(name for name in parent_token.linked_colors if name != child)
        return {parent: replace(parent_token, linked_colors=remaining)}


COLOR_ROLES: Final[tuple[str, ...]] = tuple(f.name for f in fields(ThemeColors))

# Semantic role -> CSS custom property written to the style target
CSS_VARIABLE_MAP: Final[dict[str, str]] = {
    role: "--" + role.replace("_", "-") for role in COLOR_ROLES
}

SCROLLBAR_ROLES: Final[tuple[str, ...]] = ("scrollbar_track", "scrollbar_thumb")

REQUIRED_COLOR_ROLES: Final[tuple[str, ...]] = (
    "background",
    "foreground",
    "primary",
    "primary_foreground",
)

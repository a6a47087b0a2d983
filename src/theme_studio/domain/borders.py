"""Border-radius linkage between the global radius and component radii.

A dependent controller is either LinkedRadius (mirrors the global radius and
stores nothing) or UnlinkedRadius (holds its own value). Effective values and
derived pixel strings are computed on every read and never stored.
"""

import math
from dataclasses import dataclass, replace
from typing import Final

from theme_studio.domain.value_objects import RadiusComponent

DEFAULT_GLOBAL_RADIUS: Final[float] = 8.0

# Inner radius = max(0, outer - inset); padding differs per component family
INNER_INSETS: Final[dict[RadiusComponent, float]] = {
    RadiusComponent.CARDS: 4.0,
    RadiusComponent.BUTTONS: 2.0,
    RadiusComponent.CHECKBOX: 1.0,
}

# Global scale steps relative to the global radius
RADIUS_SCALE: Final[dict[str, float]] = {
    "sm": -4.0,
    "md": -2.0,
    "lg": 0.0,
    "xl": 4.0,
}


def _clean_px(value: float) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"Radius must be a finite number, got {value!r}")
    return max(0.0, value)


def format_px(value: float) -> str:
    """Format a pixel length without trailing zeros: 8.0 -> '8px', 2.5 -> '2.5px'."""
    return f"{round(value, 4):g}px"


@dataclass(frozen=True, slots=True)
class LinkedRadius:
    kind = "linked"

    @property
    def is_linked(self) -> bool:
        return True

    @property
    def formula(self) -> str:
        return "var(--radius)"


@dataclass(frozen=True, slots=True)
class UnlinkedRadius:
    value: float
    kind = "unlinked"

    @property
    def is_linked(self) -> bool:
        return False

    @property
    def formula(self) -> str:
        return format_px(self.value)


RadiusController = LinkedRadius | UnlinkedRadius


@dataclass(frozen=True)
class ThemeBorders:
    """Global radius plus the cards, buttons and checkbox controllers.

    Every transition returns a new ThemeBorders.
    """

    global_radius: float = DEFAULT_GLOBAL_RADIUS
    cards: RadiusController = LinkedRadius()
    buttons: RadiusController = LinkedRadius()
    checkbox: RadiusController = LinkedRadius()

    def controller(self, component: RadiusComponent) -> RadiusController:
        return getattr(self, RadiusComponent(component).value)

    def effective(self, component: RadiusComponent) -> float:
        controller = self.controller(component)
        if isinstance(controller, UnlinkedRadius):
            return controller.value
        return self.global_radius

    def inner(self, component: RadiusComponent) -> float:
        component = RadiusComponent(component)
        return max(0.0, self.effective(component) - INNER_INSETS[component])

    def is_linked(self, component: RadiusComponent) -> bool:
        return self.controller(component).is_linked

    # ----- transitions -----

    def set_global(self, value: float) -> "ThemeBorders":
        return replace(self, global_radius=_clean_px(value))

    def set_dependent(
        self,
        component: RadiusComponent,
        value: float,
        force_unlink: bool = True,
    ) -> "ThemeBorders":
        """Set a component radius.

        Any direct value set leaves the controller unlinked. force_unlink is
        accepted so callers can state that intent explicitly; it cannot keep a
        controller linked while giving it a value of its own.
        """
        component = RadiusComponent(component)
        return self._with(component, UnlinkedRadius(_clean_px(value)))

    def toggle_link(self, component: RadiusComponent, should_link: bool) -> "ThemeBorders":
        component = RadiusComponent(component)
        if should_link:
            return self._with(component, LinkedRadius())
        return self._with(component, UnlinkedRadius(self.effective(component)))

    def reset(self, component: RadiusComponent | None = None) -> "ThemeBorders":
        """Reset the global radius to 8px, or relink a component."""
        if component is None:
            return replace(self, global_radius=DEFAULT_GLOBAL_RADIUS)
        return self.toggle_link(component, True)

    def _with(self, component: RadiusComponent, controller: RadiusController) -> "ThemeBorders":
        return replace(self, **{component.value: controller})

    # ----- derived pixel strings -----

    @property
    def radius(self) -> str:
        return format_px(self.global_radius)

    def scale(self) -> dict[str, str]:
        return {
            step: format_px(max(0.0, self.global_radius + offset))
            for step, offset in RADIUS_SCALE.items()
        }

    @property
    def radius_card(self) -> str:
        return format_px(self.effective(RadiusComponent.CARDS))

    @property
    def radius_card_inner(self) -> str:
        return format_px(self.inner(RadiusComponent.CARDS))

    @property
    def radius_button(self) -> str:
        return format_px(self.effective(RadiusComponent.BUTTONS))

    @property
    def radius_button_inner(self) -> str:
        return format_px(self.inner(RadiusComponent.BUTTONS))

    @property
    def radius_checkbox(self) -> str:
        return format_px(self.effective(RadiusComponent.CHECKBOX))

    @property
    def radius_checkbox_inner(self) -> str:
        return format_px(self.inner(RadiusComponent.CHECKBOX))

"""Editing session for a single theme.

The session holds the theme being edited and the active mode, routes every
edit through the domain model (color links, radius linkage) and pushes the
result to the style target through the narrowest apply path that covers it.
Each edit stores a new ThemeData and is undoable.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Any

from theme_studio.config import get_settings
from theme_studio.domain.borders import ThemeBorders
from theme_studio.domain.colors import COLOR_ROLES, SCROLLBAR_ROLES, ColorToken, ThemeColors
from theme_studio.domain.theme import TYPOGRAPHY_ELEMENTS, ThemeData
from theme_studio.domain.value_objects import Oklch, RadiusComponent, ThemeMode
from theme_studio.exceptions import UnknownColorRoleError, UnknownTypographyElementError
from theme_studio.logging_config import LogContext, get_logger
from theme_studio.services.color_input import token_from_input
from theme_studio.services.contrast import ContrastResult, check_contrast
from theme_studio.services.token_sync import TokenSyncEngine
from theme_studio.services.validation import validate_theme

logger = get_logger(__name__)


@dataclass(frozen=True)
class HistoryEntry:
    theme: ThemeData
    mode: ThemeMode
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass(frozen=True)
class EditHistory:
    """Undo/redo stacks around the present entry.

    Recording a new entry clears the redo stack and drops the oldest undo
    entry once the limit is exceeded.
    """

    present: HistoryEntry
    past: tuple[HistoryEntry, ...] = ()
    future: tuple[HistoryEntry, ...] = ()
    limit: int = 30

    @property
    def can_undo(self) -> bool:
        return len(self.past) > 0

    @property
    def can_redo(self) -> bool:
        return len(self.future) > 0

    def record(self, entry: HistoryEntry) -> EditHistory:
        past = (*self.past, self.present)[-self.limit :]
        return replace(self, past=past, present=entry, future=())

    def undo(self) -> EditHistory | None:
        if not self.can_undo:
            return None
        return replace(
            self,
            past=self.past[:-1],
            present=self.past[-1],
            future=(self.present, *self.future),
        )

    def redo(self) -> EditHistory | None:
        if not self.can_redo:
            return None
        return replace(
            self,
            past=(*self.past, self.present),
            present=self.future[0],
            future=self.future[1:],
        )


def _to_oklch(role: str, color: Oklch | ColorToken | str) -> Oklch:
    if isinstance(color, Oklch):
        return color
    if isinstance(color, ColorToken):
        return color.oklch
    return token_from_input(role, color).oklch


class ThemeEditorSession:
    def __init__(
        self,
        theme: ThemeData,
        mode: ThemeMode | str | None = None,
        engine: TokenSyncEngine | None = None,
        history_limit: int | None = None,
    ) -> None:
        settings = get_settings()
        self._engine = engine if engine is not None else TokenSyncEngine()
        self._history_limit = history_limit or settings.history_limit
        mode = ThemeMode(mode) if mode is not None else settings.default_mode

        validate_theme(theme)
        self._history = EditHistory(HistoryEntry(theme, mode), limit=self._history_limit)
        self._render()

    # ----- state -----

    @property
    def engine(self) -> TokenSyncEngine:
        return self._engine

    @property
    def theme(self) -> ThemeData:
        return self._history.present.theme

    @property
    def mode(self) -> ThemeMode:
        return self._history.present.mode

    @property
    def colors(self) -> ThemeColors:
        return self.theme.colors_for(self.mode)

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    def _render(self) -> None:
        # Roles unbound in the restored theme must not keep values from a later edit
        self._engine.reset_all()
        self._engine.set_mode(self.mode)
        self._engine.apply_theme(self.theme, self.mode)

    def _commit(self, theme: ThemeData, mode: ThemeMode | None = None) -> None:
        theme = replace(theme, updated_at=datetime.now(UTC))
        self._history = self._history.record(HistoryEntry(theme, mode or self.mode))

    # ----- whole theme -----

    def load_theme(self, theme: ThemeData, mode: ThemeMode | str | None = None) -> None:
        """Replace the edited theme wholesale; history starts over."""
        mode = ThemeMode(mode) if mode is not None else self.mode
        with LogContext(theme_id=theme.id):
            validate_theme(theme)
            self._history = EditHistory(HistoryEntry(theme, mode), limit=self._history_limit)
            self._render()
            logger.info("theme_loaded", theme=theme.name, mode=mode.value)

    def set_mode(self, mode: ThemeMode | str) -> None:
        mode = ThemeMode(mode)
        if mode == self.mode:
            return
        self._commit(self.theme, mode)
        self._engine.set_mode(mode)
        self._engine.apply_colors(self.colors)

    # ----- colors -----

    def _colors_in(self, mode: ThemeMode | str | None) -> tuple[ThemeMode, ThemeColors]:
        mode = ThemeMode(mode) if mode is not None else self.mode
        return mode, self.theme.colors_for(mode)

    def _check_role(self, role: str) -> None:
        if role not in COLOR_ROLES:
            raise UnknownColorRoleError(role)

    def _store_colors(self, mode: ThemeMode, colors: ThemeColors) -> None:
        if mode == ThemeMode.DARK:
            theme = replace(self.theme, dark_colors=colors)
        else:
            theme = replace(self.theme, light_colors=colors)
        self._commit(theme)

    def update_color(
        self,
        role: str,
        color: Oklch | ColorToken | str,
        mode: ThemeMode | str | None = None,
    ) -> ColorToken:
        """Set a role's color in one mode; linked roles follow."""
        self._check_role(role)
        mode, colors = self._colors_in(mode)
        updated = colors.with_color(role, _to_oklch(role, color))
        self._store_colors(mode, updated)

        if mode == self.mode:
            if role in SCROLLBAR_ROLES:
                self._engine.apply_scrollbar_colors(updated)
            else:
                self._engine.apply_colors(updated)
        return updated.get(role)

    def link_color(self, child: str, parent: str, mode: ThemeMode | str | None = None) -> None:
        self._check_role(child)
        self._check_role(parent)
        mode, colors = self._colors_in(mode)
        self._store_colors(mode, colors.link(child, parent))
        if mode == self.mode:
            self._engine.apply_colors(self.colors)

    def unlink_color(self, child: str, mode: ThemeMode | str | None = None) -> None:
        self._check_role(child)
        mode, colors = self._colors_in(mode)
        self._store_colors(mode, colors.unlink(child))

    # ----- border radius -----

    def _update_borders(self, borders: ThemeBorders) -> None:
        self._commit(replace(self.theme, borders=borders))
        self._engine.apply_borders(borders)

    def set_global_radius(self, value: float) -> None:
        self._update_borders(self.theme.borders.set_global(value))

    def set_component_radius(
        self,
        component: RadiusComponent | str,
        value: float,
        force_unlink: bool = True,
    ) -> None:
        borders = self.theme.borders
        if borders.is_linked(component):
            logger.debug("radius_unlinked", component=RadiusComponent(component).value)
        self._update_borders(borders.set_dependent(component, value, force_unlink=force_unlink))

    def toggle_radius_link(self, component: RadiusComponent | str, should_link: bool) -> None:
        self._update_borders(self.theme.borders.toggle_link(component, should_link))

    def reset_radius(self, component: RadiusComponent | str | None = None) -> None:
        self._update_borders(self.theme.borders.reset(component))

    # ----- typography, spacing, shadows, scroll -----

    def update_typography(self, **changes: Any) -> None:
        """Change family-level typography fields (font_sans, tracking_normal, ...)."""
        typography = replace(self.theme.typography, **changes)
        self._commit(replace(self.theme, typography=typography))
        self._engine.apply_typography(typography)

    def update_typography_element(self, element: str, **changes: Any) -> None:
        if element not in TYPOGRAPHY_ELEMENTS:
            raise UnknownTypographyElementError(element)
        typography = self.theme.typography
        elements = dict(typography.elements)
        elements[element] = replace(typography.element(element), **changes)
        typography = replace(typography, elements=elements)
        self._commit(replace(self.theme, typography=typography))
        self._engine.apply_typography(typography)

    def update_spacing(self, **changes: Any) -> None:
        spacing = replace(self.theme.spacing, **changes)
        self._commit(replace(self.theme, spacing=spacing))
        self._engine.apply_spacing(spacing)

    def update_shadows(self, **changes: Any) -> None:
        shadows = replace(self.theme.shadows, **changes)
        self._commit(replace(self.theme, shadows=shadows))
        self._engine.apply_shadows(shadows)

    def update_scroll(self, **changes: Any) -> None:
        scroll = replace(self.theme.scroll, **changes)
        self._commit(replace(self.theme, scroll=scroll))
        self._engine.apply_scroll(scroll)

    # ----- history -----

    def undo(self) -> bool:
        history = self._history.undo()
        if history is None:
            return False
        self._history = history
        self._render()
        logger.debug("history_undo", remaining=len(history.past))
        return True

    def redo(self) -> bool:
        history = self._history.redo()
        if history is None:
            return False
        self._history = history
        self._render()
        logger.debug("history_redo", remaining=len(history.future))
        return True

    # ----- read-only queries -----

    def contrast_report(self) -> list[ContrastResult]:
        return check_contrast(self.colors)

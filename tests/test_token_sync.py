import logging
import math
from dataclasses import replace

import pytest

from theme_studio.domain.borders import ThemeBorders
from theme_studio.domain.colors import ColorToken, ThemeColors
from theme_studio.domain.theme import ThemeScroll, ThemeTypography, TypographyElement
from theme_studio.domain.value_objects import Oklch, ThemeMode
from theme_studio.services.color_input import token_from_input
from theme_studio.services.style_target import DARK_FLAG, get_style_target
from theme_studio.services.token_sync import (
    COLOR_PROPERTIES,
    OWNED_PROPERTIES,
    PROPERTY_DEFAULTS,
    TokenSyncEngine,
    border_properties,
    color_value,
    scroll_properties,
    theme_properties,
    typography_properties,
)


class TestOwnedProperties:
    def test_no_duplicates(self):
        assert len(OWNED_PROPERTIES) == len(set(OWNED_PROPERTIES))

    def test_every_non_color_property_has_a_default(self):
        for name in OWNED_PROPERTIES:
            if name not in COLOR_PROPERTIES:
                assert name in PROPERTY_DEFAULTS, name

    def test_full_theme_writes_exactly_the_owned_set(self, default_theme):
        properties = theme_properties(default_theme, ThemeMode.LIGHT)

        assert set(properties) == set(OWNED_PROPERTIES)


class TestApplyTheme:
    def test_primary_color_scenario(self, default_theme, engine, target):
        light = default_theme.light_colors.with_color("primary", Oklch(0.62, 0.19, 259.81))
        theme = replace(default_theme, light_colors=light)

        engine.apply_theme(theme, ThemeMode.LIGHT)

        assert target.get_property("--primary") == "oklch(0.6200 0.1900 259.8100)"

    def test_idempotent(self, default_theme, engine, target):
        first = engine.apply_theme(default_theme, ThemeMode.LIGHT)
        snapshot = target.snapshot()

        second = engine.apply_theme(default_theme, ThemeMode.LIGHT)

        assert first == second
        assert target.snapshot() == snapshot

    def test_returns_what_was_written(self, default_theme, engine, target):
        properties = engine.apply_theme(default_theme, ThemeMode.DARK)

        assert target.snapshot() == properties
        assert properties["--background"] == "oklch(0.1450 0.0000 0.0000)"

    def test_last_apply_wins(self, default_theme, engine, target):
        engine.apply_theme(default_theme, ThemeMode.DARK)
        engine.apply_theme(default_theme, ThemeMode.LIGHT)

        assert target.get_property("--background") == "oklch(1.0000 0.0000 0.0000)"

    def test_logs_theme_applied(self, default_theme, engine, capsys, caplog):
        with caplog.at_level(logging.INFO):
            engine.apply_theme(default_theme)

        captured = capsys.readouterr()
        assert "theme_applied" in captured.out + captured.err + caplog.text


class TestResetAll:
    def test_removes_every_owned_property(self, default_theme, engine, target):
        engine.apply_theme(default_theme, ThemeMode.LIGHT)

        engine.reset_all()

        assert not any(name in target for name in OWNED_PROPERTIES)
        assert len(target) == 0

    def test_leaves_foreign_properties(self, default_theme, engine, target):
        target.set_property("--app-header-height", "64px")
        engine.apply_theme(default_theme)

        engine.reset_all()

        assert target.snapshot() == {"--app-header-height": "64px"}

    def test_reset_on_empty_target(self, engine, target):
        engine.reset_all()

        assert len(target) == 0


class TestColorSync:
    def test_unbound_roles_are_not_written(self, engine, target, minimal_colors):
        engine.apply_colors(minimal_colors)

        assert set(target.snapshot()) == {
            "--background",
            "--foreground",
            "--primary",
            "--primary-foreground",
        }

    def test_canonical_string_wins_over_legacy_value(self):
        token = token_from_input("primary", "#ff0000")

        assert color_value(token) == token.oklch_string
        assert color_value(token) != "#ff0000"

    def test_scrollbar_path_writes_only_scrollbar_roles(self, engine, target, default_theme):
        engine.apply_scrollbar_colors(default_theme.light_colors)

        assert set(target.snapshot()) == {"--scrollbar-track", "--scrollbar-thumb"}

    def test_scrollbar_path_skips_unbound_roles(self, engine, target):
        colors = ThemeColors(scrollbar_thumb=ColorToken("scrollbar_thumb", Oklch(0.7, 0.0, 0.0)))

        engine.apply_scrollbar_colors(colors)

        assert target.snapshot() == {"--scrollbar-thumb": "oklch(0.7000 0.0000 0.0000)"}


class TestBorderSync:
    def test_default_radius_properties(self):
        properties = border_properties(ThemeBorders())

        assert properties == {
            "--radius": "8px",
            "--radius-sm": "4px",
            "--radius-md": "6px",
            "--radius-lg": "8px",
            "--radius-xl": "12px",
            "--radius-card": "8px",
            "--radius-card-inner": "4px",
            "--radius-button": "8px",
            "--radius-button-inner": "6px",
            "--radius-checkbox": "8px",
            "--radius-checkbox-inner": "7px",
        }

    def test_unlinked_component(self, engine, target):
        borders = ThemeBorders().set_dependent("cards", 20).set_global(30)

        engine.apply_borders(borders)

        assert target.get_property("--radius") == "30px"
        assert target.get_property("--radius-card") == "20px"
        assert target.get_property("--radius-card-inner") == "16px"
        assert target.get_property("--radius-button") == "30px"

    def test_non_finite_radius_falls_back(self):
        properties = border_properties(ThemeBorders(global_radius=math.nan))

        assert properties["--radius"] == PROPERTY_DEFAULTS["--radius"]
        assert properties["--radius-card"] == PROPERTY_DEFAULTS["--radius-card"]
        assert properties["--radius-sm"] == PROPERTY_DEFAULTS["--radius-sm"]


class TestTypographySync:
    def test_element_properties(self):
        typography = ThemeTypography(elements={"h1": TypographyElement(font_size="3rem")})

        properties = typography_properties(typography)

        assert properties["--typography-h1-font-size"] == "3rem"
        assert properties["--typography-h2-font-size"] == "1rem"
        assert properties["--font-sans"] == typography.font_sans

    def test_empty_values_fall_back(self):
        typography = ThemeTypography(
            font_sans="",
            elements={"quote": TypographyElement(font_style="  ")},
        )

        properties = typography_properties(typography)

        assert properties["--font-sans"] == PROPERTY_DEFAULTS["--font-sans"]
        assert properties["--typography-quote-font-style"] == "normal"

    def test_unknown_elements_are_ignored(self):
        typography = ThemeTypography(elements={"h9": TypographyElement(font_size="9rem")})

        properties = typography_properties(typography)

        assert not any("h9" in name for name in properties)


class TestScrollSync:
    def test_defaults(self):
        properties = scroll_properties(ThemeScroll())

        assert properties["scroll-behavior"] == "smooth"
        assert properties["--scrollbar-width"] == "12px"
        assert properties["--scrollbar-visibility"] == "visible"

    def test_hidden_scrollbar(self):
        assert scroll_properties(ThemeScroll(hide=True))["--scrollbar-visibility"] == "hidden"

    def test_invalid_values_fall_back(self):
        properties = scroll_properties(
            ThemeScroll(behavior="sideways", track_radius=None, thumb_radius="")
        )

        assert properties["scroll-behavior"] == "auto"
        assert properties["--scrollbar-track-radius"] == "0px"
        assert properties["--scrollbar-thumb-radius"] == "4px"


class TestModeAndTarget:
    def test_set_mode_toggles_dark_flag(self, engine, target):
        engine.set_mode(ThemeMode.DARK)
        assert target.has_flag(DARK_FLAG)

        engine.set_mode("light")
        assert not target.has_flag(DARK_FLAG)

    def test_default_target_is_process_wide(self):
        assert TokenSyncEngine().target is get_style_target()
        assert TokenSyncEngine().target is TokenSyncEngine().target

    @pytest.mark.parametrize("selector", [":root", ".dark"])
    def test_to_css(self, engine, target, minimal_colors, selector):
        engine.apply_colors(minimal_colors)

        css = target.to_css(selector)

        assert css.startswith(f"{selector} {{\n")
        assert "  --primary: oklch(0.4500 0.2000 262.0000);" in css
        assert css.endswith("}\n")

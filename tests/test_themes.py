from theme_studio.design_system import (
    DEFAULT_THEME,
    build_default_theme,
    generate_theme_css,
    get_default_theme,
)
from theme_studio.domain.colors import COLOR_ROLES
from theme_studio.domain.value_objects import ThemeMode
from theme_studio.services.validation import validate_theme


class TestDefaultTheme:
    def test_is_valid(self, default_theme):
        assert validate_theme(default_theme) is default_theme

    def test_binds_every_role_in_both_modes(self, default_theme):
        for mode in ThemeMode:
            assert default_theme.colors_for(mode).missing(COLOR_ROLES) == []

    def test_ring_follows_primary(self, default_theme):
        light = default_theme.light_colors

        assert light.ring.linked_to == "primary"
        assert light.ring.oklch == light.primary.oklch
        assert light.primary.linked_colors == ("ring", "sidebar_ring")

    def test_typography_scale(self, default_theme):
        assert default_theme.typography.element("h1").font_size == "2.25rem"
        assert default_theme.typography.element("quote").font_style == "italic"

    def test_shared_instance(self):
        assert get_default_theme() is DEFAULT_THEME
        assert build_default_theme() is not DEFAULT_THEME

    def test_theme_is_hashable_and_typography_is_frozen(self, default_theme):
        assert isinstance(hash(default_theme), int)
        assert isinstance(default_theme.typography.elements, tuple)
        assert dict(default_theme.typography.elements)["h1"].font_weight == "700"


class TestGenerateThemeCss:
    def test_both_blocks(self, default_theme):
        css = generate_theme_css(default_theme)

        assert css.startswith(":root {\n")
        assert "\n.dark {\n" in css
        assert css.endswith("}\n\n")

    def test_color_lines_carry_hex(self, default_theme):
        primary = default_theme.light_colors.primary

        css = generate_theme_css(default_theme, include_dark=False)

        assert f"  --primary: {primary.oklch_string}; /* {primary.hex} */" in css

    def test_root_block_has_non_color_properties(self, default_theme):
        css = generate_theme_css(default_theme, include_dark=False)

        assert "  --radius: 8px;" in css
        assert "  --theme-spacing-base: 0.25rem;" in css
        assert "  scroll-behavior: smooth;" in css
        assert "  --typography-h1-font-size: 2.25rem;" in css

    def test_dark_block_has_colors_only(self, default_theme):
        css = generate_theme_css(default_theme, include_light=False)
        background = default_theme.dark_colors.background

        assert css.startswith(".dark {\n")
        assert f"  --background: {background.oklch_string}; /* {background.hex} */" in css
        assert "--radius" not in css
        assert ":root" not in css

    def test_nothing_included(self, default_theme):
        assert generate_theme_css(default_theme, include_light=False, include_dark=False) == ""

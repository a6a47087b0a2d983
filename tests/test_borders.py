import math

import pytest

from theme_studio.domain.borders import (
    DEFAULT_GLOBAL_RADIUS,
    LinkedRadius,
    ThemeBorders,
    UnlinkedRadius,
    format_px,
)
from theme_studio.domain.value_objects import RadiusComponent

CARDS = RadiusComponent.CARDS
BUTTONS = RadiusComponent.BUTTONS
CHECKBOX = RadiusComponent.CHECKBOX


class TestFormatPx:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(8.0, "8px"), (2.5, "2.5px"), (0.0, "0px"), (12.123456, "12.1235px")],
    )
    def test_format(self, value, expected):
        assert format_px(value) == expected


class TestRadiusControllers:
    def test_linked_formula(self):
        assert LinkedRadius().is_linked
        assert LinkedRadius().formula == "var(--radius)"

    def test_unlinked_formula(self):
        controller = UnlinkedRadius(20.0)

        assert not controller.is_linked
        assert controller.formula == "20px"


class TestThemeBordersDefaults:
    def test_everything_linked_at_8px(self):
        borders = ThemeBorders()

        assert borders.global_radius == DEFAULT_GLOBAL_RADIUS == 8.0
        for component in RadiusComponent:
            assert borders.is_linked(component)
            assert borders.effective(component) == 8.0

    def test_derived_strings(self):
        borders = ThemeBorders()

        assert borders.radius == "8px"
        assert borders.radius_card == "8px"
        assert borders.radius_card_inner == "4px"
        assert borders.radius_button_inner == "6px"
        assert borders.radius_checkbox_inner == "7px"
        assert borders.scale() == {"sm": "4px", "md": "6px", "lg": "8px", "xl": "12px"}


class TestLinkage:
    def test_linked_components_follow_global(self):
        borders = ThemeBorders().set_global(12)

        assert borders.effective(CARDS) == 12.0
        assert borders.radius_button == "12px"

    def test_unlink_freezes_value(self):
        borders = ThemeBorders().set_dependent(CARDS, 20).set_global(30)

        assert not borders.is_linked(CARDS)
        assert borders.effective(CARDS) == 20.0
        assert borders.effective(BUTTONS) == 30.0

    def test_relink_snaps_to_global(self):
        borders = ThemeBorders().set_dependent(CARDS, 20).set_global(30)

        borders = borders.toggle_link(CARDS, True)

        assert borders.is_linked(CARDS)
        assert borders.effective(CARDS) == 30.0

    def test_toggle_unlink_keeps_current_effective(self):
        borders = ThemeBorders().set_global(14).toggle_link(BUTTONS, False)

        assert borders.buttons == UnlinkedRadius(14.0)

        borders = borders.set_global(2)
        assert borders.effective(BUTTONS) == 14.0

    def test_set_dependent_always_unlinks(self):
        borders = ThemeBorders().set_dependent(CHECKBOX, 3, force_unlink=False)

        assert not borders.is_linked(CHECKBOX)
        assert borders.effective(CHECKBOX) == 3.0

    def test_accepts_component_names(self):
        borders = ThemeBorders().set_dependent("buttons", 6)

        assert borders.effective("buttons") == 6.0

    def test_transitions_return_new_instances(self):
        original = ThemeBorders()

        original.set_global(20)

        assert original.global_radius == 8.0


class TestResetAndClamping:
    def test_reset_global(self):
        borders = ThemeBorders().set_global(20).set_dependent(CARDS, 4)

        borders = borders.reset()

        assert borders.global_radius == 8.0
        assert not borders.is_linked(CARDS)

    def test_reset_component_relinks(self):
        borders = ThemeBorders().set_dependent(CARDS, 4).reset(CARDS)

        assert borders.is_linked(CARDS)

    def test_negative_values_floor_at_zero(self):
        borders = ThemeBorders().set_global(-5)

        assert borders.global_radius == 0.0
        assert borders.radius_card_inner == "0px"
        assert borders.scale()["sm"] == "0px"

    def test_inner_radius_never_negative(self):
        borders = ThemeBorders().set_dependent(CARDS, 2)

        assert borders.inner(CARDS) == 0.0

    @pytest.mark.parametrize("value", [math.nan, math.inf])
    def test_non_finite_values_rejected(self, value):
        with pytest.raises(ValueError, match="finite"):
            ThemeBorders().set_global(value)

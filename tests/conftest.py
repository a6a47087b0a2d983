import pytest

from theme_studio.config import get_settings
from theme_studio.design_system import build_default_theme
from theme_studio.domain.colors import ColorToken, ThemeColors
from theme_studio.domain.theme import ThemeData
from theme_studio.domain.value_objects import Oklch, ThemeMode
from theme_studio.services.editor import ThemeEditorSession
from theme_studio.services.style_target import InMemoryStyleTarget, get_style_target
from theme_studio.services.token_sync import TokenSyncEngine


@pytest.fixture(autouse=True)
def reset_process_state():
    get_settings.cache_clear()
    get_style_target.cache_clear()
    yield
    get_settings.cache_clear()
    get_style_target.cache_clear()


@pytest.fixture
def default_theme() -> ThemeData:
    return build_default_theme()


@pytest.fixture
def minimal_colors() -> ThemeColors:
    return ThemeColors(
        background=ColorToken("background", Oklch(1.0, 0.0, 0.0)),
        foreground=ColorToken("foreground", Oklch(0.145, 0.0, 0.0)),
        primary=ColorToken("primary", Oklch(0.45, 0.2, 262.0)),
        primary_foreground=ColorToken("primary_foreground", Oklch(0.985, 0.0, 0.0)),
    )


@pytest.fixture
def minimal_theme(minimal_colors: ThemeColors) -> ThemeData:
    return ThemeData(
        name="Minimal",
        light_colors=minimal_colors,
        dark_colors=minimal_colors,
    )


@pytest.fixture
def target() -> InMemoryStyleTarget:
    return InMemoryStyleTarget()


@pytest.fixture
def engine(target: InMemoryStyleTarget) -> TokenSyncEngine:
    return TokenSyncEngine(target)


@pytest.fixture
def session(default_theme: ThemeData, engine: TokenSyncEngine) -> ThemeEditorSession:
    return ThemeEditorSession(default_theme, mode=ThemeMode.LIGHT, engine=engine)

import pytest

from skydome.settings import Settings, SettingsError


def test_defaults_from_empty_environment():
    assert Settings.from_env({}) == Settings()


def test_overrides():
    settings = Settings.from_env(
        {
            "SKYDOME_BODY_COUNT": "50",
            "SKYDOME_NIGHT_START": "20",
            "SKYDOME_NIGHT_END": "4",
            "SKYDOME_SURFACE_WIDTH": "1024",
            "SKYDOME_SURFACE_HEIGHT": "768.5",
            "SKYDOME_PADDING": "12",
            "SKYDOME_THEME": " Dark ",
            "SKYDOME_LANG": "ko",
        }
    )
    assert settings == Settings(
        body_count=50,
        night_start=20,
        night_end=4,
        surface_width=1024.0,
        surface_height=768.5,
        padding=12.0,
        theme="dark",
        lang="ko",
    )


def test_blank_values_fall_back():
    assert Settings.from_env({"SKYDOME_BODY_COUNT": "  "}).body_count == 200


@pytest.mark.parametrize(
    "env",
    [
        {"SKYDOME_BODY_COUNT": "many"},
        {"SKYDOME_BODY_COUNT": "-3"},
        {"SKYDOME_NIGHT_START": "24"},
        {"SKYDOME_PADDING": "wide"},
        {"SKYDOME_SURFACE_WIDTH": "nan"},
        {"SKYDOME_SURFACE_HEIGHT": "inf"},
        {"SKYDOME_PADDING": "-Infinity"},
        {"SKYDOME_THEME": "sepia"},
        {"SKYDOME_LANG": "fr"},
    ],
)
def test_malformed_values(env):
    with pytest.raises(SettingsError):
        Settings.from_env(env)


def test_reads_os_environ(monkeypatch):
    monkeypatch.setenv("SKYDOME_BODY_COUNT", "7")
    assert Settings.from_env().body_count == 7

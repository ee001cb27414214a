import pytest
from pydantic import ValidationError

from config.settings import PROJECT_ROOT, Settings, get_settings, reload_settings


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.default_field_type == "scalar"
    assert settings.random_seed is None
    assert settings.output_dir == PROJECT_ROOT / "output"


def test_field_type_normalized():
    assert Settings(_env_file=None, default_field_type="Vector").default_field_type == "vector"


def test_unknown_field_type_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, default_field_type="pressure")


def test_relative_output_dir_resolves_to_project_root():
    settings = Settings(_env_file=None, output_dir="renders")
    assert settings.output_dir == PROJECT_ROOT / "renders"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("FIELDSIM_IMAGE_DPI", "200")
    monkeypatch.setenv("FIELDSIM_RANDOM_SEED", "7")
    try:
        settings = reload_settings()
        assert settings.image_dpi == 200
        assert settings.random_seed == 7
        assert get_settings() is settings
    finally:
        monkeypatch.undo()
        reload_settings()


def test_dpi_bounds():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, image_dpi=10)

import pytest

from maproster.config.settings import get_settings


@pytest.fixture
def fresh_settings():
    # get_settings is lru_cached; clear around each test so env changes are seen and not leaked.
    get_settings.cache_clear()
    yield get_settings
    get_settings.cache_clear()


def test_packaged_defaults(fresh_settings, monkeypatch):
    for var in ["MAPROSTER_CONFIG_PATH", "MAPROSTER_SOURCE_KIND", "MAPROSTER_LISTING_URL", "MAPROSTER_LOG_LEVEL"]:
        monkeypatch.delenv(var, raising=False)
    settings = fresh_settings()

    assert settings.roster.proximity_radius_m == 500
    assert settings.roster.default_name_template.format(n=3) == "Novo Local 3"
    assert settings.camera.recenter_span_deg == 0.02
    assert settings.camera.zoom_span_deg == 0.01
    assert settings.source.kind == "synthetic"


def test_env_overrides_are_applied(fresh_settings, monkeypatch):
    monkeypatch.delenv("MAPROSTER_CONFIG_PATH", raising=False)
    monkeypatch.setenv("MAPROSTER_SOURCE_KIND", "Remote")
    monkeypatch.setenv("MAPROSTER_LISTING_URL", "http://10.0.2.2:3001")
    monkeypatch.setenv("MAPROSTER_LOG_LEVEL", "DEBUG")

    settings = fresh_settings()

    assert settings.source.kind == "remote"
    assert settings.source.base_url == "http://10.0.2.2:3001"
    assert settings.app.log_level == "DEBUG"


def test_external_config_file(fresh_settings, monkeypatch, tmp_path):
    cfg = tmp_path / "maproster.yaml"
    cfg.write_text("roster:\n  proximity_radius_m: 250\ncamera:\n  new_point_span_deg: 0.02\n", encoding="utf-8")
    monkeypatch.setenv("MAPROSTER_CONFIG_PATH", str(cfg))
    monkeypatch.delenv("MAPROSTER_SOURCE_KIND", raising=False)

    settings = fresh_settings()

    assert settings.roster.proximity_radius_m == 250
    assert settings.camera.new_point_span_deg == 0.02
    assert settings.camera.zoom_span_deg == 0.01


def test_non_mapping_config_is_rejected(fresh_settings, monkeypatch, tmp_path):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("- just\n- a list\n", encoding="utf-8")
    monkeypatch.setenv("MAPROSTER_CONFIG_PATH", str(cfg))

    with pytest.raises(ValueError, match="expected a mapping"):
        fresh_settings()

import os

import pytest

from maproster.core import env


@pytest.fixture(autouse=True)
def _fresh_env_cache(monkeypatch):
    for var in ["MAPROSTER_PROJECT_ROOT", "MAPROSTER_ENV_FILE"]:
        monkeypatch.delenv(var, raising=False)
    env.get_project_root.cache_clear()
    env.load_dotenv_if_present.cache_clear()
    yield
    env.get_project_root.cache_clear()
    env.load_dotenv_if_present.cache_clear()


def test_relative_paths_resolve_against_explicit_root(monkeypatch, tmp_path):
    monkeypatch.setenv("MAPROSTER_PROJECT_ROOT", str(tmp_path))
    assert env.resolve_project_path("data/locations.json") == (tmp_path / "data" / "locations.json").resolve()
    assert env.resolve_project_path(tmp_path / "abs.json") == tmp_path / "abs.json"


def test_root_is_found_from_a_nested_working_directory(monkeypatch, tmp_path):
    (tmp_path / "src").mkdir()
    (tmp_path / "data").mkdir()
    nested = tmp_path / "src" / "deep"
    nested.mkdir()
    monkeypatch.chdir(nested)
    assert env.get_project_root() == tmp_path.resolve()


def test_explicit_env_file_is_loaded_without_overriding(monkeypatch, tmp_path):
    env_file = tmp_path / "custom.env"
    env_file.write_text("MAPROSTER_TEST_A=from-file\nMAPROSTER_TEST_B=from-file\n", encoding="utf-8")
    monkeypatch.setenv("MAPROSTER_ENV_FILE", str(env_file))
    monkeypatch.setenv("MAPROSTER_TEST_B", "already-set")
    monkeypatch.delenv("MAPROSTER_TEST_A", raising=False)

    assert env.load_dotenv_if_present() == env_file.resolve()
    assert env.get_project_root() == tmp_path.resolve()

    assert os.environ["MAPROSTER_TEST_A"] == "from-file"
    assert os.environ["MAPROSTER_TEST_B"] == "already-set"
    os.environ.pop("MAPROSTER_TEST_A", None)


def test_missing_explicit_env_file_loads_nothing(monkeypatch, tmp_path):
    monkeypatch.setenv("MAPROSTER_ENV_FILE", str(tmp_path / "nope.env"))
    assert env.load_dotenv_if_present() is None

import pytest

from benchpress.config.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def results_dir(tmp_path):
    return tmp_path / "results"


@pytest.fixture
def settings(results_dir):
    return Settings(
        paths={"results_dir": str(results_dir)},
        runner={"sample_count": 3, "microiterations": 1},
    )

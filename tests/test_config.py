import pytest
from loguru import logger

from secret_santa.core.config import Settings, load_settings
from secret_santa.core.logging import configure_logging, setup_logging

ENV_VARS = ["SANTA_LOG_LEVEL", "SANTA_LOG_PATH", "SANTA_MAX_ATTEMPTS", "SANTA_SEED"]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    assert load_settings() == Settings(log_level="INFO", log_path=None, max_attempts=None, seed=None)


def test_values_from_environment(clean_env):
    clean_env.setenv("SANTA_LOG_LEVEL", "DEBUG")
    clean_env.setenv("SANTA_LOG_PATH", "logs/santa.log")
    clean_env.setenv("SANTA_MAX_ATTEMPTS", "5")
    clean_env.setenv("SANTA_SEED", "2024")

    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.log_path == "logs/santa.log"
    assert settings.max_attempts == 5
    assert settings.seed == 2024


def test_blank_values_are_unset(clean_env):
    clean_env.setenv("SANTA_SEED", " ")
    clean_env.setenv("SANTA_LOG_PATH", "")
    settings = load_settings()
    assert settings.seed is None
    assert settings.log_path is None


def test_non_integer_seed(clean_env):
    clean_env.setenv("SANTA_SEED", "christmas")
    with pytest.raises(ValueError, match="SANTA_SEED"):
        load_settings()


def test_non_positive_attempts(clean_env):
    clean_env.setenv("SANTA_MAX_ATTEMPTS", "0")
    with pytest.raises(ValueError, match="SANTA_MAX_ATTEMPTS"):
        load_settings()


def test_setup_logging_writes_file(tmp_path):
    log_path = tmp_path / "santa.log"
    setup_logging("WARNING", str(log_path))
    logger.debug("drawing names")
    logger.remove()

    content = log_path.read_text()
    assert "DEBUG" in content
    assert "drawing names" in content


def test_configure_logging_reads_environment(clean_env, tmp_path):
    log_path = tmp_path / "draw.log"
    clean_env.setenv("SANTA_LOG_LEVEL", "ERROR")
    clean_env.setenv("SANTA_LOG_PATH", str(log_path))

    settings = configure_logging()
    logger.info("names in the hat")
    logger.remove()

    assert settings.log_level == "ERROR"
    assert "names in the hat" in log_path.read_text()


def test_configure_logging_with_explicit_settings(tmp_path):
    log_path = tmp_path / "explicit.log"
    settings = Settings(log_level="CRITICAL", log_path=str(log_path))

    assert configure_logging(settings) is settings
    logger.debug("explicit settings")
    logger.remove()

    assert "explicit settings" in log_path.read_text()

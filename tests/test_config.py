import logging

import pytest
from pydantic import ValidationError

from stripekit.config import StripeConfig
from stripekit.engine.exceptions import ConfigurationError
from stripekit.schemas.versions import ApiVersion, DEFAULT_API_VERSION
from stripekit.utils import logger, setup_logger

ENV_NAMES = ("STRIPE_API_KEY", "STRIPE_API_VERSION", "STRIPE_API_BASE", "STRIPE_TIMEOUT")


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so values loaded from dotenv files are undone afterwards
    for name in ENV_NAMES:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    return monkeypatch


def test_defaults():
    config = StripeConfig(api_key="sk_test_1")
    assert config.api_version == "2022-11-15"
    assert config.api_base == "https://api.stripe.com/"
    assert config.timeout == 60
    assert config.url_for("customers/cus_1") == "https://api.stripe.com/v1/customers/cus_1"


def test_rejects_invalid_values():
    with pytest.raises(ValidationError):
        StripeConfig(api_key="")
    with pytest.raises(ValidationError):
        StripeConfig(api_key="sk_test_1", api_version="1999-01-01")
    with pytest.raises(ValidationError):
        StripeConfig(api_key="sk_test_1", timeout=0)


def test_supported_versions():
    assert DEFAULT_API_VERSION in list(ApiVersion)
    assert ApiVersion.from_string("2020-08-27") is ApiVersion.V2020_08_27
    with pytest.raises(ValueError):
        ApiVersion.from_string("2031-01-01")


def test_from_env(clean_env):
    clean_env.setenv("STRIPE_API_KEY", "sk_test_env")
    clean_env.setenv("STRIPE_API_VERSION", "2020-08-27")
    clean_env.setenv("STRIPE_API_BASE", "http://localhost:12111")
    clean_env.setenv("STRIPE_TIMEOUT", "5")

    config = StripeConfig.from_env()
    assert config.api_key == "sk_test_env"
    assert config.api_version == "2020-08-27"
    assert config.api_base == "http://localhost:12111/"
    assert config.timeout == 5.0


def test_from_env_requires_key(clean_env):
    with pytest.raises(ConfigurationError):
        StripeConfig.from_env()


def test_from_env_wraps_invalid_values(clean_env):
    clean_env.setenv("STRIPE_API_KEY", "sk_test_env")
    clean_env.setenv("STRIPE_TIMEOUT", "soon")
    with pytest.raises(ConfigurationError):
        StripeConfig.from_env()


def test_from_env_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("STRIPE_API_KEY=sk_test_file\nSTRIPE_TIMEOUT=30\n")

    config = StripeConfig.from_env(str(env_file))
    assert config.api_key == "sk_test_file"
    assert config.timeout == 30.0


def test_process_env_wins_over_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("STRIPE_API_KEY=sk_test_file\n")
    clean_env.setenv("STRIPE_API_KEY", "sk_test_process")

    assert StripeConfig.from_env(str(env_file)).api_key == "sk_test_process"


def test_missing_env_file(tmp_path):
    with pytest.raises(ConfigurationError):
        StripeConfig.from_env(str(tmp_path / "missing.env"))


def test_setup_logger_adds_one_handler():
    before = list(logger.handlers)
    try:
        setup_logger("debug")
        setup_logger(logging.WARNING)
        added = [h for h in logger.handlers if h not in before]
        assert len(added) == 1
        assert logger.level == logging.WARNING
    finally:
        for handler in logger.handlers[:]:
            if handler not in before:
                logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)

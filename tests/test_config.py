import pytest

from tsurch.config.loader import config_env_keys, load_config
from tsurch.config.schema import Config


def test_config_defaults() -> None:
    config = Config()

    assert config.columns == 80
    assert config.default_source == "ddg"
    assert config.quote_get_terms is False
    assert config.log_level == "WARNING"


def test_load_config_reads_environment() -> None:
    config = load_config(
        {
            "COLUMNS": "132",
            "TSURCH_SOURCE": "wiki",
            "TSURCH_QUOTE_TERMS": "true",
            "TSURCH_LOG_LEVEL": "debug",
            "UNRELATED": "ignored",
        }
    )

    assert config.columns == 132
    assert config.default_source == "wiki"
    assert config.quote_get_terms is True
    assert config.log_level == "DEBUG"


def test_load_config_width_falls_back_without_discarding_other_fields() -> None:
    config = load_config({"COLUMNS": "lots", "TSURCH_SOURCE": "sp"})

    assert config.columns == 80
    assert config.default_source == "sp"


def test_load_config_invalid_values_use_defaults() -> None:
    config = load_config({"TSURCH_LOG_LEVEL": "chatty", "TSURCH_SOURCE": "sp"})

    assert config == Config()


def test_blank_source_means_default() -> None:
    assert load_config({"TSURCH_SOURCE": "  "}).default_source == "ddg"


def test_config_env_keys() -> None:
    assert set(config_env_keys()) == {"COLUMNS", "TSURCH_SOURCE", "TSURCH_QUOTE_TERMS", "TSURCH_LOG_LEVEL"}


def test_load_config_uses_numeric_width_hint() -> None:
    assert load_config({"COLUMNS": "120"}).columns == 120


@pytest.mark.parametrize("environ", [{}, {"COLUMNS": "wide"}, {"COLUMNS": ""}, {"COLUMNS": "-3"}, {"COLUMNS": "0"}])
def test_load_config_width_falls_back_to_80(environ: dict) -> None:
    assert load_config(environ).columns == 80

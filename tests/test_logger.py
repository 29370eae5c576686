from __future__ import annotations

import logging

import pytest

from case_sampling.scripts.logger import LOG_CFG_ENV, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("case_sampling")
    handlers, level = logger.handlers[:], logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_missing_config_installs_null_handler(monkeypatch, tmp_path, package_logger) -> None:
    monkeypatch.setenv(LOG_CFG_ENV, str(tmp_path / "absent.toml"))
    setup_logging()

    assert [type(h) for h in package_logger.handlers] == [logging.NullHandler]


def test_config_path_must_be_a_file(monkeypatch, tmp_path, package_logger) -> None:
    monkeypatch.setenv(LOG_CFG_ENV, str(tmp_path))

    with pytest.raises(FileNotFoundError):
        setup_logging()


def test_toml_config_is_applied(monkeypatch, tmp_path, package_logger) -> None:
    cfg = tmp_path / "logging.toml"
    cfg.write_text(
        "\n".join(
            [
                "version = 1",
                "disable_existing_loggers = false",
                "[loggers.case_sampling]",
                'level = "WARNING"',
            ]
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv(LOG_CFG_ENV, str(cfg))
    setup_logging()

    assert package_logger.level == logging.WARNING


def test_setup_logging_is_exported_from_package() -> None:
    import case_sampling

    assert case_sampling.setup_logging is setup_logging

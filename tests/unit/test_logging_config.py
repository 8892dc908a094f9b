"""Tests for structlog configuration."""

import pytest
import structlog

from amm_pricing.logging_config import configure_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_info_level_hides_debug(self, capsys):
        configure_logging(debug=False)
        logger = structlog.get_logger()
        logger.debug("hidden_event")
        logger.info("shown_event", pool="0x1")

        out = capsys.readouterr().out
        assert "hidden_event" not in out
        assert "shown_event" in out
        assert "pool" in out

    def test_debug_level_shows_debug(self, capsys):
        configure_logging(debug=True)
        structlog.get_logger().debug("visible_debug_event")
        assert "visible_debug_event" in capsys.readouterr().out

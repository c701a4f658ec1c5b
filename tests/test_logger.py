"""Tests for loguru configuration."""

from wordpick.logger import get_logger, setup_logger


class TestLogger:
    """Tests for setup_logger() and get_logger()."""

    def test_bound_name_reaches_log_line(self, tmp_path):
        log_file = tmp_path / "wordpick.log"
        setup_logger(log_file, "INFO")
        try:
            get_logger("wordpick.custom").info("hello")
        finally:
            setup_logger()
        line = log_file.read_text(encoding="utf-8").strip()
        assert "| wordpick.custom:test_bound_name_reaches_log_line:" in line
        assert line.endswith("- hello")

    def test_unbound_logger_uses_package_name(self, tmp_path):
        log_file = tmp_path / "wordpick.log"
        setup_logger(log_file, "INFO")
        try:
            get_logger().warning("plain")
        finally:
            setup_logger()
        assert "| wordpick:test_unbound_logger_uses_package_name:" in log_file.read_text(encoding="utf-8")

    def test_level_filters(self, tmp_path):
        log_file = tmp_path / "wordpick.log"
        setup_logger(log_file, "WARNING")
        try:
            get_logger("wordpick.custom").info("quiet")
            get_logger("wordpick.custom").warning("loud")
        finally:
            setup_logger()
        text = log_file.read_text(encoding="utf-8")
        assert "quiet" not in text
        assert "loud" in text

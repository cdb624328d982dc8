"""Tests for bemcn utility modules."""

import logging

from bemcn import block


class TestGetLogger:
    """Tests for get_logger function."""

    def test_prefix_added(self) -> None:
        from bemcn.utils.logger import get_logger

        assert get_logger("mymodule").name == "bemcn.mymodule"

    def test_prefix_not_duplicated(self) -> None:
        from bemcn.utils.logger import get_logger

        assert get_logger("bemcn.builder").name == "bemcn.builder"
        assert get_logger("bemcn").name == "bemcn"

    def test_ignored_argument_logged(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="bemcn"):
            block("menu")(42)
        assert "Ignoring block argument of type int" in caplog.text

"""日志配置测试"""

from __future__ import annotations

import logging

import pytest

from scltool.utils.logger import DEBUG_FORMAT, SHORT_FORMAT, reset_logging, setup_logging


class TestLogging:
    def teardown_method(self) -> None:
        reset_logging()

    def test_level_applied_to_package_logger(self) -> None:
        setup_logging("DEBUG")
        assert logging.getLogger("scltool").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING
        assert len(logging.getLogger().handlers) == 1

    def test_unknown_level_falls_back(self) -> None:
        setup_logging("chatty")
        assert logging.getLogger("scltool").level == logging.WARNING

    def test_no_duplicate_handlers(self) -> None:
        setup_logging("INFO")
        setup_logging("INFO")
        assert len(logging.getLogger().handlers) == 1

    @pytest.mark.parametrize("level, fmt", [
        ("WARNING", SHORT_FORMAT),
        ("info", SHORT_FORMAT),
        ("DEBUG", DEBUG_FORMAT),
    ])
    def test_format_follows_level(self, level: str, fmt: str) -> None:
        setup_logging(level)
        handler = logging.getLogger().handlers[0]
        assert handler.formatter._fmt == fmt

    def test_short_format_prefix(self) -> None:
        setup_logging("WARNING")
        record = logging.LogRecord(
            "scltool.utils.yaml_io", logging.WARNING, __file__, 10,
            "%s 内容不是字典类型", ("scl.yml",), None,
        )
        line = logging.getLogger().handlers[0].format(record)
        assert line == "scl: WARNING: scl.yml 内容不是字典类型"

    def test_info_hidden_at_default_level(self) -> None:
        setup_logging()
        assert not logging.getLogger("scltool.core.dep.syncer").isEnabledFor(logging.INFO)

    def test_reset_restores_package_level(self) -> None:
        setup_logging("DEBUG")
        reset_logging()
        assert logging.getLogger("scltool").level == logging.NOTSET
        assert logging.getLogger().handlers == []

import logging
from unittest.mock import MagicMock, patch

import pytest
import structlog

from relayer_core.logs.structlog import ModuleFilter, configure
from relayer_core.logs.timing import timed


@pytest.fixture
def reset_logging():
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "message", None, None)


def test_module_filter_levels():
    module_filter = ModuleFilter({"relayer_core": "DEBUG", "*": "WARNING"})

    assert module_filter.filter(_record("relayer_core.zeroex", logging.DEBUG))
    assert not module_filter.filter(_record("web3.providers", logging.INFO))
    assert module_filter.filter(_record("web3.providers", logging.ERROR))


def test_module_filter_without_modules_accepts_everything():
    assert ModuleFilter({}).filter(_record("anything", logging.DEBUG))


def test_configure_writes_log_file(tmp_path, reset_logging):
    configure(service_name="relayer-test", log_level="debug", log_dir=str(tmp_path))

    assert (tmp_path / "relayer-test.log").exists()
    assert logging.getLogger().level == logging.DEBUG


def test_configure_console_only(reset_logging):
    configure(service_name="relayer-test", log_level="INFO", log_dir=None)

    handler_types = {type(handler) for handler in logging.getLogger().handlers}
    assert handler_types == {logging.StreamHandler}


@pytest.mark.asyncio
async def test_timed_logs_latency_and_returns_result():
    @timed
    async def fetch(value: int) -> int:
        return value * 2

    with patch("relayer_core.logs.timing.logger", MagicMock()) as mock_logger:
        assert await fetch(21) == 42

    event, = mock_logger.debug.call_args.args
    assert event.endswith("fetch completed")
    assert mock_logger.debug.call_args.kwargs["elapsed_ms"] >= 0
    assert fetch.__name__ == "fetch"


@pytest.mark.asyncio
async def test_timed_logs_and_reraises_failures():
    @timed
    async def explode() -> None:
        raise RuntimeError("boom")

    with patch("relayer_core.logs.timing.logger", MagicMock()) as mock_logger:
        with pytest.raises(RuntimeError, match="boom"):
            await explode()

    assert mock_logger.warning.call_args.kwargs["error"] == "boom"
    mock_logger.debug.assert_not_called()

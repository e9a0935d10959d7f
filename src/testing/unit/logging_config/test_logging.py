import io
import logging

from rich.console import Console

from tsdbquery import GroupByConfig, Metric
from tsdbquery.logging_config import PACKAGE_LOGGER_NAME, get_logger, setup_sdk_logging


def test_package_logger_is_silent_by_default(capsys):
    assert any(isinstance(h, logging.NullHandler) for h in get_logger().handlers)

    get_logger("tsdbquery.models.query.metric").warning("nobody listens")
    captured = capsys.readouterr()
    assert captured.err == ""
    assert captured.out == ""


def test_get_logger_names():
    assert get_logger().name == PACKAGE_LOGGER_NAME
    assert get_logger("tsdbquery.models.query.metric").parent is get_logger()


def test_rejected_configurations_are_logged(caplog):
    metric = Metric.new_builder().set_metric("sys.cpu.user").set_id("sys.cpu.user").build()

    with caplog.at_level(logging.DEBUG):
        try:
            metric.validate()
        except ValueError:
            pass
        try:
            GroupByConfig.new_builder().set_id("GBy").build()
        except ValueError:
            pass

    assert "Metric 'sys.cpu.user' failed validation" in caplog.text
    assert "GroupByConfig 'GBy' rejected: Missing or empty aggregator" in caplog.text


# --- These replace the NullHandler: must run after the tests above


def test_setup_replaces_handler():
    setup_sdk_logging(level="INFO")
    setup_sdk_logging(level="DEBUG")

    logger = get_logger()
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_pretty_output_goes_to_console():
    output = io.StringIO()
    setup_sdk_logging(
        level="DEBUG", pretty=True, console=Console(file=output, width=200)
    )

    try:
        Metric.new_builder().set_id("m1").build().validate()
    except ValueError:
        pass

    text = output.getvalue()
    assert "tsdbquery.models.query.metric" in text
    assert "Missing or empty metric" in text

# test/test_logging_config.py
import logging

from tempfit.logging_config import ContextualFormatter


def _record(**extra):
    record = logging.LogRecord(
        name="tempfit.core.series",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="Incomplete temperature data on line %d",
        args=(3,),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_appends_known_extra_keys():
    fmt = ContextualFormatter(fmt="%(levelname)s | %(message)s")
    out = fmt.format(_record(line_number=3, reading_count=2))
    assert out == "WARNING | Incomplete temperature data on line 3 | line_number=3 reading_count=2"


def test_formatter_without_extras_is_plain():
    fmt = ContextualFormatter(fmt="%(message)s")
    assert fmt.format(_record()) == "Incomplete temperature data on line 3"


def test_formatter_custom_keys_only():
    fmt = ContextualFormatter(fmt="%(message)s", extra_keys=["channel"])
    out = fmt.format(_record(channel=1, line_number=3))
    assert out == "Incomplete temperature data on line 3 | channel=1"

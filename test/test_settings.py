# test/test_settings.py
from pathlib import Path

import pytest

from tempfit.settings import DegeneratePolicy, Settings, load_settings


def test_defaults():
    s = load_settings()
    assert s == Settings()
    assert s.output_dir is None
    assert s.on_degenerate is DegeneratePolicy.error
    assert s.channel_count == 4
    assert s.log_level == "INFO"


def test_overrides_are_normalized(tmp_path):
    s = load_settings(output_dir=str(tmp_path), on_degenerate="propagate", log_level=" debug ")
    assert s.output_dir == Path(tmp_path)
    assert s.on_degenerate is DegeneratePolicy.propagate
    assert s.log_level == "DEBUG"


def test_blank_log_level_falls_back_to_default():
    assert load_settings(log_level="  ").log_level == "INFO"


def test_rejects_unknown_policy():
    with pytest.raises(ValueError, match="on_degenerate"):
        load_settings(on_degenerate="ignore")


def test_rejects_unknown_log_level():
    with pytest.raises(ValueError):
        load_settings(log_level="chatty")


def test_rejects_bad_channel_count():
    with pytest.raises(ValueError):
        load_settings(channel_count=0)

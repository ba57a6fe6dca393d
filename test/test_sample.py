# test/test_sample.py
import pytest

from tempfit.core import Sample, InvalidSample


def test_sample_normalizes_readings_to_float_tuple():
    s = Sample(time_step=30, readings=[10, 20.5])
    assert s.readings == (10.0, 20.5)
    assert all(isinstance(r, float) for r in s.readings)
    assert s.n == 2


def test_sample_defaults_to_no_readings():
    s = Sample(time_step=0)
    assert s.readings == ()
    assert s.line_index is None
    assert not s.is_complete(4)


def test_sample_is_complete_ignores_extra_readings():
    s = Sample(time_step=0, readings=[1, 2, 3, 4, 5])
    assert s.is_complete(4)
    assert not Sample(time_step=0, readings=[1, 2, 3]).is_complete(4)


def test_sample_rejects_negative_time_step():
    with pytest.raises(InvalidSample):
        Sample(time_step=-30)


def test_sample_rejects_non_integer_time_step():
    with pytest.raises(InvalidSample):
        Sample(time_step=1.5)  # type: ignore[arg-type]
    with pytest.raises(InvalidSample):
        Sample(time_step=True)  # type: ignore[arg-type]


def test_sample_rejects_non_numeric_readings():
    with pytest.raises(InvalidSample):
        Sample(time_step=0, readings=["abc"])  # type: ignore[list-item]

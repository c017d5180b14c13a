"""
Tests for measurement records.
"""
import dataclasses

import pytest

from perfutils.services.measurement import Scalar, Series


def test_scalar_promotes_to_series_on_add():
    """Test that a second value turns a Scalar into a Series."""
    record = Scalar(5.0).add(7.0)
    
    assert isinstance(record, Series)
    assert record.values == (5.0, 7.0)
    assert record.raw == [5.0, 7.0]
    assert record.runs == 2


def test_series_appends_in_order():
    """Test that a Series keeps runs oldest first."""
    record = Series((1.0, 2.0)).add(3.0)
    
    assert record.values == (1.0, 2.0, 3.0)
    assert record.last == 3.0


def test_overwrite_last_keeps_shape():
    """Test that overwriting the latest run never changes the record kind."""
    scalar = Scalar(1.0).overwrite_last(9.0)
    series = Series((1.0, 2.0)).overwrite_last(9.0)
    
    assert scalar == Scalar(9.0)
    assert scalar.raw == 9.0
    assert isinstance(series, Series)
    assert series.values == (1.0, 9.0)


def test_zero_duration_is_recorded():
    """Test that a zero duration is a real value."""
    record = Scalar(0.0)
    
    assert record.values == (0.0,)
    assert record.last == 0.0


def test_series_is_immutable():
    """Test that add and overwrite_last return new records."""
    original = Series((1.0, 2.0))
    
    grown = original.add(3.0)
    replaced = original.overwrite_last(9.0)
    
    assert original.values == (1.0, 2.0)
    assert grown.values == (1.0, 2.0, 3.0)
    assert replaced.values == (1.0, 9.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        original.durations = (5.0,)
    with pytest.raises(AttributeError):
        original.durations.append(4.0)

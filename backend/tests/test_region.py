"""Unit tests for region primitives."""

import pytest

from imagevideo.domain.region import ImageRegion, TemporalRegion


def test_drop_axis_keeps_order():
    """Dropping an axis keeps the remaining axes in their relative order."""
    r = ImageRegion(index=(1, 2, 3), size=(4, 5, 6))
    assert r.drop_axis(0) == ImageRegion(index=(2, 3), size=(5, 6))
    assert r.drop_axis(1) == ImageRegion(index=(1, 3), size=(4, 6))
    assert r.drop_axis(2) == ImageRegion(index=(1, 2), size=(4, 5))


def test_drop_axis_out_of_range():
    r = ImageRegion(index=(0, 0), size=(2, 2))
    with pytest.raises(IndexError):
        r.drop_axis(2)


def test_with_axis():
    r = ImageRegion(index=(0, 0, 0), size=(4, 5, 6))
    assert r.with_axis(0, 2, 0) == ImageRegion(index=(2, 0, 0), size=(0, 5, 6))
    # original untouched
    assert r.size == (4, 5, 6)


def test_degenerate_means_all_zero():
    """Only an all-zero size is degenerate."""
    assert ImageRegion.zeros(2).is_degenerate()
    assert not ImageRegion(index=(0, 0), size=(0, 5)).is_degenerate()
    assert not ImageRegion(index=(0, 0), size=(3, 5)).is_degenerate()


def test_is_inside():
    outer = ImageRegion(index=(0, 0, 0), size=(4, 5, 6))
    assert ImageRegion(index=(1, 1, 1), size=(2, 2, 2)).is_inside(outer)
    assert ImageRegion(index=(3, 0, 0), size=(0, 5, 6)).is_inside(outer)
    assert not ImageRegion(index=(4, 0, 0), size=(0, 5, 6)).is_inside(outer)
    assert not ImageRegion(index=(0, 0, 0), size=(4, 5, 7)).is_inside(outer)
    assert not ImageRegion(index=(0, 0), size=(4, 5)).is_inside(outer)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        ImageRegion(index=(0,), size=(-1,))
    with pytest.raises(ValueError):
        ImageRegion(index=(0, 0), size=(1,))
    with pytest.raises(ValueError):
        TemporalRegion(0, -1)


def test_number_of_pixels():
    assert ImageRegion(index=(0, 0), size=(5, 6)).number_of_pixels == 30
    assert ImageRegion.zeros(3).number_of_pixels == 0


def test_temporal_region_indices_and_containment():
    t = TemporalRegion(frame_start=2, frame_duration=3)
    assert list(t.frame_indices()) == [2, 3, 4]
    assert t.frame_end == 5
    assert t.is_inside(TemporalRegion(0, 5))
    assert not t.is_inside(TemporalRegion(0, 4))
    assert not TemporalRegion(-1, 2).is_inside(TemporalRegion(0, 5))


def test_temporal_region_crop():
    available = TemporalRegion(0, 4)
    assert TemporalRegion(2, 5).crop(available) == TemporalRegion(2, 2)
    assert TemporalRegion(1, 2).crop(available) == TemporalRegion(1, 2)
    assert TemporalRegion(-3, 5).crop(available) == TemporalRegion(0, 2)
    assert TemporalRegion(10, 3).crop(available).frame_duration == 0

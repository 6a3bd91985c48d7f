import pytest

from src.geocoding.rate_limit import FixedDelayPacer


def test_wait_uses_injected_sleep():
    sleeps = []
    pacer = FixedDelayPacer(delay=1.5, sleep=sleeps.append)

    pacer.wait()
    pacer.wait()

    assert sleeps == [1.5, 1.5]


def test_zero_delay_does_not_sleep():
    sleeps = []
    FixedDelayPacer(delay=0, sleep=sleeps.append).wait()
    assert sleeps == []


def test_negative_delay_rejected():
    with pytest.raises(ValueError):
        FixedDelayPacer(delay=-1)

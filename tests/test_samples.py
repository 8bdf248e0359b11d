import numpy as np
import pytest

from codarts.exceptions import SampleFormatException, TimeSeriesException
from codarts.samples import (
    SampleType,
    descale,
    fullscale,
    quantize,
    round_half_away,
)


def test_fullscale():
    assert fullscale(b'flt4') == 1
    assert fullscale(b'fix2') == 32767
    assert fullscale(SampleType.FIX3) == 0x7FFFFF
    assert fullscale(b'fix4') == 0x7FFFFFFF


def test_fullscale_unknown():
    with pytest.raises(SampleFormatException) as e:
        fullscale(b'xxxx', index=12)

    assert e.value.index == 12
    assert e.value.chain == ['alvl']


def test_round_half_away():
    values = np.array([0.5, 1.5, 2.5, -0.5, -2.5, 2.4999, -2.5001, 0.0])

    assert round_half_away(values).tolist() == [1.0, 2.0, 3.0, -1.0, -3.0, 2.0, -3.0, 0.0]


def test_fix2_scenario():
    stored = np.array([(16383, -16384), (0, 0), (32767, 16000)], dtype=np.int16)

    physical = descale(stored, b'fix2', (3.0, 5.0))

    assert physical.shape == (3, 2)
    assert physical[0, 0] == pytest.approx(16383 / 32767 * 3.0)
    assert physical[0, 1] == pytest.approx(-16384 / 32767 * 5.0)
    assert physical[1].tolist() == [0.0, 0.0]
    assert physical[2, 0] == pytest.approx(3.0)

    assert quantize(physical, b'fix2', (3.0, 5.0)).tolist() == stored.tolist()


def test_quantize_idempotent():
    """Decoding and encoding again gives back the stored values."""
    stored = np.arange(-32768, 32768, 97).astype(np.int16)
    stored = stored[:stored.size // 2 * 2].reshape(-1, 2)

    for sample_type in (b'fix2', b'fix3', b'fix4', b'flt4'):
        for scales in ((1.0, 1.0), (0.25, 7.5), (-2.0, 1e-3)):
            physical = descale(stored, sample_type, scales)
            again = quantize(physical, sample_type, scales)

            assert np.abs(again.astype(int) - stored.astype(int)).max() <= 1


def test_quantize_saturates():
    assert quantize([10.0, -10.0], b'fix2', (1.0, 1.0)).tolist() == [[32767, -32768]]


def test_quantize_zero_scale():
    with pytest.raises(TimeSeriesException):
        quantize([1.0, 1.0], b'fix2', (0.0, 1.0))


def test_quantize_not_finite():
    with pytest.raises(TimeSeriesException):
        quantize([np.nan, 1.0], b'fix2', (1.0, 1.0))

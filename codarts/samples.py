'''
# I/Q samples

The samples are stored as pairs of integers (I, Q) and they become physical
values via a scale factor for each channel and a fullscale depending on the
sample type declared in the header:

    physical = stored / fullscale * scale
    stored   = round(physical / scale * fullscale)

The rounding is half away from zero (like C's round()), numpy.round() would
round half to even instead.
'''
import logging
from enum import Enum

import numpy as np

from .exceptions import SampleFormatException, TimeSeriesException


logger = logging.getLogger(__name__)

# storage type of each value on the wire
SAMPLE_DTYPE = np.int16
SAMPLE_MIN = np.iinfo(SAMPLE_DTYPE).min
SAMPLE_MAX = np.iinfo(SAMPLE_DTYPE).max


class SampleType(Enum):
    FLT4 = b'flt4'
    FIX2 = b'fix2'
    FIX3 = b'fix3'
    FIX4 = b'fix4'

    @property
    def fullscale(self) -> int:
        return FULLSCALE[self]


FULLSCALE = {
    SampleType.FLT4: 1,
    SampleType.FIX2: 0x7FFF,
    SampleType.FIX3: 0x7FFFFF,
    SampleType.FIX4: 0x7FFFFFFF,
}


def fullscale(sample_type, index=None) -> int:
    '''Returns the denominator to use for the given type tag (bytes or SampleType)'''
    try:
        return SampleType(sample_type).fullscale
    except ValueError:
        raise SampleFormatException(sample_type, index) from None


def round_half_away(values: np.ndarray) -> np.ndarray:
    values = np.asarray(values, dtype=np.float64)
    truncated = np.trunc(values)
    # the difference with the truncated value is exact
    away = np.abs(values - truncated) >= 0.5

    return np.where(away, truncated + np.sign(values), truncated)


def _check_scales(scales):
    scales = np.asarray(scales, dtype=np.float64)
    if scales.shape != (2,):
        raise ValueError(f'expected a scale for I and one for Q, not {scales!r}')

    return scales


def descale(stored, sample_type, scales, index=None) -> np.ndarray:
    '''From the stored (N, 2) integers to the physical (N, 2) values.'''
    factor = fullscale(sample_type, index)
    stored = np.asarray(stored).reshape(-1, 2)

    return stored.astype(np.float64) / factor * _check_scales(scales)


def quantize(physical, sample_type, scales, index=None) -> np.ndarray:
    '''From the physical (N, 2) values to the stored (N, 2) integers.

    Values not representable with the storage type are saturated.'''
    factor = fullscale(sample_type, index)
    scales = _check_scales(scales)
    if not np.all(scales):
        raise TimeSeriesException(['alvl'], f'cannot quantize samples with a zero scale factor {scales.tolist()}')

    physical = np.asarray(physical, dtype=np.float64).reshape(-1, 2)
    stored = round_half_away(physical / scales * factor)

    if not np.all(np.isfinite(stored)):
        raise TimeSeriesException(['alvl'], f'not finite sample at index {index}')

    overflow = (stored < SAMPLE_MIN) | (stored > SAMPLE_MAX)
    if np.any(overflow):
        logger.warning('%d values saturated at index %s', np.count_nonzero(overflow), index)
        stored = np.clip(stored, SAMPLE_MIN, SAMPLE_MAX)

    return stored.astype(SAMPLE_DTYPE)

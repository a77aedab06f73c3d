import pytest

from itertools import islice

from wsq_subband.exceptions import EmptySignalError

from wsq_subband.signal_extension import (
    ExtensionTypes,
    WholeSampleExtension,
    HalfSampleExtension,
    SignalExtension,
    extension_period,
)


def reference_index(k, length, extension_type):
    """
    Index of the underlying signal sample at position k of an extension,
    computed directly from the period.
    """
    if length == 1:
        return 0
    if extension_type.whole_sample:
        p = k % ((2 * length) - 2)
        return p if p < length else (2 * length) - 2 - p
    else:
        p = k % (2 * length)
        return p if p < length else (2 * length) - 1 - p


class TestExtensionTypes(object):
    @pytest.mark.parametrize("extension_type,exp_whole,exp_anti", [
        (ExtensionTypes.whole_sample_symmetric, True, False),
        (ExtensionTypes.half_sample_symmetric, False, False),
        (ExtensionTypes.whole_sample_antisymmetric, True, True),
        (ExtensionTypes.half_sample_antisymmetric, False, True),
    ])
    def test_properties(self, extension_type, exp_whole, exp_anti):
        assert extension_type.whole_sample is exp_whole
        assert extension_type.antisymmetric is exp_anti


@pytest.mark.parametrize("length,extension_type,exp", [
    (4, ExtensionTypes.whole_sample_symmetric, 6),
    (4, ExtensionTypes.half_sample_symmetric, 8),
    (4, ExtensionTypes.whole_sample_antisymmetric, 6),
    (4, ExtensionTypes.half_sample_antisymmetric, 8),
    (2, ExtensionTypes.whole_sample_symmetric, 2),
    (2, ExtensionTypes.half_sample_symmetric, 4),
    # Lone samples
    (1, ExtensionTypes.whole_sample_symmetric, 1),
    (1, ExtensionTypes.half_sample_symmetric, 2),
    (1, ExtensionTypes.whole_sample_antisymmetric, 2),
    (1, ExtensionTypes.half_sample_antisymmetric, 2),
])
def test_extension_period(length, extension_type, exp):
    assert extension_period(length, extension_type) == exp


def test_extension_period_empty():
    with pytest.raises(EmptySignalError):
        extension_period(0, ExtensionTypes.whole_sample_symmetric)


class TestWholeSampleExtension(object):
    def test_mirrors_without_repeating_end_samples(self):
        it = WholeSampleExtension([1, 2, 3, 4])
        assert list(islice(it, 13)) == [1, 2, 3, 4, 3, 2, 1, 2, 3, 4, 3, 2, 1]

    def test_two_samples(self):
        it = WholeSampleExtension([1, 2])
        assert list(islice(it, 6)) == [1, 2, 1, 2, 1, 2]

    def test_one_sample(self):
        it = WholeSampleExtension([5])
        assert list(islice(it, 4)) == [5, 5, 5, 5]

    def test_antisymmetric(self):
        it = WholeSampleExtension([0, 2, 3, 0], antisymmetric=True)
        assert list(islice(it, 13)) == [0, 2, 3, 0, -3, -2, 0, 2, 3, 0, -3, -2, 0]

    def test_antisymmetric_one_sample(self):
        it = WholeSampleExtension([5], antisymmetric=True)
        assert list(islice(it, 4)) == [5, -5, 5, -5]

    def test_finite_periods(self):
        it = WholeSampleExtension([1, 2, 3], periods=2)
        assert list(it) == [1, 2, 3, 2, 1, 2, 3, 2]

    def test_zero_periods(self):
        assert list(WholeSampleExtension([1, 2, 3], periods=0)) == []

    def test_empty(self):
        with pytest.raises(EmptySignalError):
            WholeSampleExtension([])


class TestHalfSampleExtension(object):
    def test_repeats_end_samples(self):
        it = HalfSampleExtension([1, 2, 3, 4])
        assert list(islice(it, 16)) == [
            1, 2, 3, 4, 4, 3, 2, 1, 1, 2, 3, 4, 4, 3, 2, 1,
        ]

    def test_two_samples(self):
        it = HalfSampleExtension([1, 2])
        assert list(islice(it, 6)) == [1, 2, 2, 1, 1, 2]

    def test_one_sample(self):
        it = HalfSampleExtension([5])
        assert list(islice(it, 4)) == [5, 5, 5, 5]

    def test_antisymmetric(self):
        it = HalfSampleExtension([1, 2], antisymmetric=True)
        assert list(islice(it, 8)) == [1, 2, -2, -1, 1, 2, -2, -1]

    def test_antisymmetric_one_sample(self):
        it = HalfSampleExtension([5], antisymmetric=True)
        assert list(islice(it, 4)) == [5, -5, 5, -5]

    def test_finite_periods(self):
        it = HalfSampleExtension([1, 2], periods=3)
        assert list(it) == [1, 2, 2, 1] * 3

    def test_empty(self):
        with pytest.raises(EmptySignalError):
            HalfSampleExtension([])


class TestSignalExtension(object):
    @pytest.mark.parametrize("length", [1, 2, 3, 8, 17, 64])
    @pytest.mark.parametrize("extension_type", [
        ExtensionTypes.whole_sample_symmetric,
        ExtensionTypes.half_sample_symmetric,
    ])
    def test_matches_reference(self, length, extension_type):
        signal = [(i * 7) + 1 for i in range(length)]
        ext = SignalExtension(signal, extension_type)
        num = 5 * ext.period
        assert list(islice(ext, num)) == [
            signal[reference_index(k, length, extension_type)]
            for k in range(num)
        ]

    def test_restartable(self):
        ext = SignalExtension([1, 2, 3, 4], ExtensionTypes.whole_sample_symmetric)
        assert list(islice(ext, 10)) == [1, 2, 3, 4, 3, 2, 1, 2, 3, 4]
        assert list(islice(ext, 10)) == [1, 2, 3, 4, 3, 2, 1, 2, 3, 4]

    def test_reads_underlying_signal(self):
        signal = [1, 2, 3]
        ext = SignalExtension(signal, ExtensionTypes.half_sample_symmetric)
        signal[0] = 100
        assert list(islice(ext, 6)) == [100, 2, 3, 3, 2, 100]

    def test_periods(self):
        ext = SignalExtension([1, 2, 3], ExtensionTypes.half_sample_antisymmetric)
        assert ext.period == 6
        assert list(ext.periods(1)) == [1, 2, 3, -3, -2, -1]

    def test_properties(self):
        signal = [1, 2]
        ext = SignalExtension(signal, ExtensionTypes.whole_sample_symmetric)
        assert ext.signal is signal
        assert ext.extension_type is ExtensionTypes.whole_sample_symmetric

    def test_empty(self):
        with pytest.raises(EmptySignalError):
            SignalExtension([], ExtensionTypes.half_sample_symmetric)

    def test_repr(self):
        ext = SignalExtension([1, 2], ExtensionTypes.half_sample_symmetric)
        assert repr(ext) == (
            "SignalExtension([1, 2], ExtensionTypes.half_sample_symmetric)"
        )

import pytest

import numpy as np

from wsq_subband.exceptions import ShapeMismatchError

from wsq_subband.tables import FilterBanks

from wsq_subband.subband_coder import TwoChannelSubbandCoder

from wsq_subband.float_image import FloatImage

from wsq_subband.wavelet_filtering import (
    row_analysis,
    column_analysis,
    row_synthesis,
    column_synthesis,
    analysis,
    synthesis,
    idwt,
    dwt,
)


def make_picture(width, height):
    """A picture of numbers for test purposes."""
    return FloatImage.from_array(
        [[(y * 100) + x for x in range(width)] for y in range(height)]
    )


@pytest.fixture
def two_d_picture():
    return make_picture(13, 7)


@pytest.fixture
def haar():
    return TwoChannelSubbandCoder.from_table(FilterBanks.haar)


def assert_pictures_close(a, b):
    assert (a.width, a.height) == (b.width, b.height)
    assert np.allclose(a.data, b.data, rtol=0, atol=1e-9)


def test_row_analysis_dimensions(haar, two_d_picture):
    L_data, H_data = row_analysis(haar, two_d_picture)
    assert (L_data.width, L_data.height) == (7, 7)
    assert (H_data.width, H_data.height) == (6, 7)


def test_column_analysis_dimensions(haar, two_d_picture):
    L_data, H_data = column_analysis(haar, two_d_picture)
    assert (L_data.width, L_data.height) == (13, 4)
    assert (H_data.width, H_data.height) == (13, 3)


def test_column_analysis_matches_transposed_row_analysis(haar, two_d_picture):
    L_cols, H_cols = column_analysis(haar, two_d_picture)

    transposed = two_d_picture.copy()
    transposed.rotate()
    L_rows, H_rows = row_analysis(haar, transposed)

    assert np.allclose(L_cols.to_array(), L_rows.to_array().T)
    assert np.allclose(H_cols.to_array(), H_rows.to_array().T)


@pytest.mark.parametrize("width,height", [
    (1, 1),
    (1, 5),
    (5, 1),
    (2, 2),
    (8, 4),
    (13, 7),
])
def test_analysis_dimensions(haar, width, height):
    LL_data, LH_data, HL_data, HH_data = analysis(haar, make_picture(width, height))
    lw, hw = (width + 1) // 2, width // 2
    lh, hh = (height + 1) // 2, height // 2
    assert (LL_data.width, LL_data.height) == (lw, lh)
    assert (LH_data.width, LH_data.height) == (lw, hh)
    assert (HL_data.width, HL_data.height) == (hw, lh)
    assert (HH_data.width, HH_data.height) == (hw, hh)


def test_analysis_of_constant_picture(haar):
    picture = FloatImage.from_array(np.full((6, 8), 10.0))
    LL_data, LH_data, HL_data, HH_data = analysis(haar, picture)
    # Each Haar lowpass pass scales a constant by sqrt(2)
    assert np.allclose(LL_data.data, 20.0)
    assert np.allclose(LH_data.data, 0.0)
    assert np.allclose(HL_data.data, 0.0)
    assert np.allclose(HH_data.data, 0.0)


def test_orientation_naming(haar):
    # Horizontal stripes: only vertical (column) filtering sees detail
    picture = FloatImage.from_array([[y % 2] * 8 for y in range(6)])
    LL_data, LH_data, HL_data, HH_data = analysis(haar, picture)
    assert not np.allclose(LH_data.data, 0.0)
    assert np.allclose(HL_data.data, 0.0)
    assert np.allclose(HH_data.data, 0.0)


def test_min_max_refreshed(haar, two_d_picture):
    for band in analysis(haar, two_d_picture):
        assert band.min_value == np.min(band.data)
        assert band.max_value == np.max(band.data)

    picture = synthesis(haar, *analysis(haar, two_d_picture))
    assert picture.min_value == np.min(picture.data)
    assert picture.max_value == np.max(picture.data)


def test_analysis_does_not_modify_input(haar, two_d_picture):
    original = two_d_picture.copy()
    analysis(haar, two_d_picture)
    assert np.array_equal(two_d_picture.data, original.data)
    assert (two_d_picture.width, two_d_picture.height) == (13, 7)


@pytest.mark.parametrize("filter_bank", FilterBanks)
def test_row_analysis_and_row_synthesis_are_inverses(filter_bank, two_d_picture):
    coder = TwoChannelSubbandCoder.from_table(filter_bank)
    L_data, H_data = row_analysis(coder, two_d_picture)
    assert_pictures_close(row_synthesis(coder, L_data, H_data), two_d_picture)


@pytest.mark.parametrize("filter_bank", FilterBanks)
def test_column_analysis_and_column_synthesis_are_inverses(filter_bank, two_d_picture):
    coder = TwoChannelSubbandCoder.from_table(filter_bank)
    L_data, H_data = column_analysis(coder, two_d_picture)
    assert_pictures_close(column_synthesis(coder, L_data, H_data), two_d_picture)


@pytest.mark.parametrize("filter_bank", FilterBanks)
@pytest.mark.parametrize("width,height", [
    (1, 1),
    (1, 6),
    (6, 1),
    (2, 3),
    (16, 8),
    (13, 7),
])
def test_analysis_and_synthesis_are_inverses(filter_bank, width, height):
    coder = TwoChannelSubbandCoder.from_table(filter_bank)
    picture = make_picture(width, height)
    LL_data, LH_data, HL_data, HH_data = analysis(coder, picture)
    data = synthesis(coder, LL_data, LH_data, HL_data, HH_data)
    assert_pictures_close(data, picture)


class TestSynthesisShapeMismatch(object):
    def test_row_heights(self, haar):
        with pytest.raises(ShapeMismatchError):
            row_synthesis(haar, make_picture(2, 3), make_picture(2, 2))

    @pytest.mark.parametrize("L_width,H_width", [(2, 3), (4, 2)])
    def test_row_widths(self, haar, L_width, H_width):
        with pytest.raises(ShapeMismatchError):
            row_synthesis(haar, make_picture(L_width, 2), make_picture(H_width, 2))

    def test_column_widths(self, haar):
        with pytest.raises(ShapeMismatchError):
            column_synthesis(haar, make_picture(2, 2), make_picture(3, 2))

    def test_column_heights(self, haar):
        with pytest.raises(ShapeMismatchError):
            column_synthesis(haar, make_picture(2, 2), make_picture(2, 3))

    def test_synthesis(self, haar):
        with pytest.raises(ShapeMismatchError):
            synthesis(
                haar,
                make_picture(2, 2),
                make_picture(3, 2),
                make_picture(2, 2),
                make_picture(2, 2),
            )


class TestDWT(object):
    def test_depth_zero(self, haar, two_d_picture):
        coeff_data = dwt(haar, two_d_picture, 0)
        assert list(coeff_data) == [0]
        assert coeff_data[0]["LL"] is two_d_picture
        assert idwt(haar, coeff_data) is two_d_picture

    def test_structure(self, haar):
        coeff_data = dwt(haar, make_picture(16, 12), 2)
        assert sorted(coeff_data) == [0, 1, 2]
        assert set(coeff_data[0]) == set(["LL"])
        for level in [1, 2]:
            assert set(coeff_data[level]) == set(["LH", "HL", "HH"])

        # Level 2 is the first (finest) decomposition
        assert (coeff_data[2]["HH"].width, coeff_data[2]["HH"].height) == (8, 6)
        assert (coeff_data[1]["HH"].width, coeff_data[1]["HH"].height) == (4, 3)
        assert (coeff_data[0]["LL"].width, coeff_data[0]["LL"].height) == (4, 3)

    @pytest.mark.parametrize("filter_bank", FilterBanks)
    @pytest.mark.parametrize("depth", [1, 2, 3, 5])
    def test_dwt_and_idwt_are_inverses(self, filter_bank, depth, two_d_picture):
        coder = TwoChannelSubbandCoder.from_table(filter_bank)
        coeff_data = dwt(coder, two_d_picture, depth)
        data = idwt(coder, coeff_data)
        assert_pictures_close(data, two_d_picture)

    def test_total_samples_preserved(self, haar, two_d_picture):
        coeff_data = dwt(haar, two_d_picture, 3)
        total = sum(
            band.width * band.height
            for orientations in coeff_data.values()
            for band in orientations.values()
        )
        assert total == 13 * 7

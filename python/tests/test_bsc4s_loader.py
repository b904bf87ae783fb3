import pytest

from BrightStars.catalog_imports import bsc4s_loader
from BrightStars.catalog_imports.bsc4s_loader import read_bsc4s_stars
from BrightStars.errors import FormatError
from BrightStars.star import BLANK_NAME
from catalog_test_utils import BSC4S_LINES, SUPPLEMENT_1, write_catalog

PRIMARY_COUNT = 9110


@pytest.mark.unit
def test_numbering_continues_after_primary(bsc4s_file):
    stars = read_bsc4s_stars(bsc4s_file, PRIMARY_COUNT)
    assert len(stars) == len(BSC4S_LINES)
    for k, star in enumerate(stars, 1):
        assert star.number == PRIMARY_COUNT + k


@pytest.mark.unit
def test_decode(bsc4s_file):
    first, second = read_bsc4s_stars(bsc4s_file, PRIMARY_COUNT)
    assert first.name == BLANK_NAME
    assert first.hd_number == "1234"
    assert first.sao_number == 100000
    assert first.fk5_number is None
    assert first.variable_name is None
    assert first.ra == pytest.approx((5 / 60 + 12.3 / 3600) * 15)
    assert first.dec == pytest.approx(-5.5)
    assert first.magnitude == pytest.approx(6.5)
    assert first.color == "B"
    assert first.pm_ra == pytest.approx(0.01)
    assert first.pm_dec == pytest.approx(-0.02)

    assert second.sao_number is None
    assert second.ra == pytest.approx(180.0)
    assert second.dec == pytest.approx(45.0)
    assert second.pm_ra is None
    assert second.color == "K"


@pytest.mark.unit
def test_proper_names(bsc4s_file, name_dictionary):
    first, second = read_bsc4s_stars(bsc4s_file, PRIMARY_COUNT, name_dictionary)
    assert first.proper_name == "Supplement One"
    assert second.proper_name is None


@pytest.mark.unit
def test_short_line(tmp_path):
    path = write_catalog(tmp_path / "bsc4s.dat", [SUPPLEMENT_1[:158]])
    with pytest.raises(FormatError) as excinfo:
        read_bsc4s_stars(path, PRIMARY_COUNT)
    assert excinfo.value.line_number == 1


@pytest.mark.unit
def test_decode_details():
    details = bsc4s_loader.decode_details("bsc4s.dat", 1, SUPPLEMENT_1)
    assert details.spectral_class == "B9V"
    assert details.radial_velocity is None
    assert details.is_infrared_source is False
    assert details.peculiarity == ""

import math

import pytest

from sexagesimal.errors import (
    DegreeOverflowError,
    FormatSpecError,
    HourOverflowError,
    LossOfPrecisionError,
    NaNError,
    NegativeInfinityError,
    PositiveInfinityError,
)
from sexagesimal.formatter import format_sexagesimal
from sexagesimal.spec import FormatSpec, Kind
from sexagesimal.types import RA, Angle, HourAngle, Time, format_value
from sexagesimal.units import ASCII_SYMBOLS, COMBINING_DOT_BELOW, set_default_symbols

COMBINE = COMBINING_DOT_BELOW


@pytest.fixture
def obliquity():
    # Example p. 6
    return Angle.from_dms(False, 23, 26, 44)


def test_negative_angles():
    # Examples p. 9
    assert str(Angle.from_dms(True, 13, 47, 22)) == "-13°47′22″"
    assert str(Angle.from_dms(True, 0, 32, 41)) == "-32′41″"
    assert f"{Angle.from_dms(True, 0, 32, 41):#}" == "-0°32′41″"


def test_default_verb(obliquity):
    assert str(obliquity) == "23°26′44″"
    assert f"{obliquity:s}" == "23°26′44″"
    assert f"{obliquity:v}" == "23°26′44″"


def test_time_zero_padded():
    t = Time.from_hms(False, 15, 22, 7)
    assert f"{t:0}" == "15ʰ22ᵐ07ˢ"
    assert f"{t}" == "15ʰ22ᵐ7ˢ"
    assert f"{HourAngle.from_hms(False, 15, 22, 7):0s}" == "15ʰ22ᵐ07ˢ"


def test_negative_time():
    assert str(Time(-90)) == "-1ᵐ30ˢ"


def test_seconds_decimal_conventions():
    a = Angle.from_dms(False, 23, 26, 44.25)
    assert f"{a:.2s}" == "23°26′44.25″"
    assert f"{a:.2d}" == "23°26′44″.25"
    assert f"{a:.2c}" == "23°26′44″" + COMBINE + "25"


def test_minutes_decimal_conventions():
    a = Angle.from_dms(False, 23, 26, 44.25)
    assert f"{a:.1m}" == "23°26.7′"
    assert f"{a:.1o}" == "23°26′.7"
    assert f"{a:.1n}" == "23°26′" + COMBINE + "7"
    assert f"{Angle(0.0):m}" == "0′"


def test_first_segment_decimal_conventions():
    a = Angle.from_dms(False, 23, 26, 44.25)
    assert f"{a:.3h}" == "23.446°"
    assert f"{a:.3j}" == "23°.446"
    assert f"{a:.3i}" == "23°" + COMBINE + "446"
    assert f"{-a:.3h}" == "-23.446°"
    assert f"{a:h}" == "23°"


def test_first_segment_decimal_with_width():
    a = Angle.from_dms(False, 23, 26, 44.25)
    assert f"{a:3.1h}" == "  23.4°"
    assert f"{a:03.1h}" == " 023.4°"
    assert f"{a:+03.1h}" == "+023.4°"
    assert f"{-a:03.1h}" == "-023.4°"


def test_minutes_with_hours():
    text, err = format_sexagesimal(1.5, "0.1m", Kind.HOUR_ANGLE)
    assert text == "1ʰ30.0ᵐ"
    assert err is None


def test_sign_flags(obliquity):
    assert f"{obliquity:+}" == "+23°26′44″"
    assert f"{obliquity: }" == " 23°26′44″"
    assert f"{-obliquity:+}" == "-23°26′44″"


def test_leading_zero_segments_elided():
    a = Angle.from_dms(False, 0, 0, 5)
    assert str(a) == "5″"
    assert f"{a:#}" == "0°0′5″"
    assert f"{a:#0}" == "0°00′05″"
    assert str(Angle(0.0)) == "0″"


def test_width(obliquity):
    assert f"{obliquity:03s}" == "023°26′44″"
    assert f"{Angle.from_dms(False, 5, 3, 2):3}" == "  5° 3′ 2″"
    assert f"{Angle.from_dms(False, 5, 3, 2):-3}" == "5  ° 3′ 2″"
    assert f"{Angle.from_dms(True, 5, 3, 2):03}" == "-005°03′02″"


def test_plain_verb():
    t = Time.from_hms(False, 15, 22, 7)
    assert f"{t:0x}" == "15 22 07"
    assert f"{t:x}" == "15 22 7"


def test_width_overflow(obliquity):
    big = Angle.from_dms(False, 4423, 26, 44)
    text, err = format_value(big, "03s")
    assert isinstance(err, DegreeOverflowError)
    assert text == "*" * len(f"{Angle(0.0):03s}")
    assert text == "*" * 10
    # the same specifier still works for values that fit
    assert format_value(obliquity, "03s") == ("023°26′44″", None)


def test_hour_overflow():
    text, err = format_value(Time.from_hms(False, 100, 0, 0), "02")
    assert isinstance(err, HourOverflowError)
    assert text == "*" * len(f"{Time(0):02}")


def test_first_segment_width_overflow():
    text, err = format_value(Angle.from_deg(1234.5), "2.1h")
    assert isinstance(err, DegreeOverflowError)
    assert text == "*" * len(f"{Angle(0.0):2.1h}")


def test_loss_of_precision():
    text, err = format_value(Angle.from_deg(10), ".15s")
    assert isinstance(err, LossOfPrecisionError)
    assert text == "*" * len(f"{Angle(0.0):.15s}")


@pytest.mark.parametrize(
    "value, error",
    [
        (math.nan, NaNError),
        (math.inf, PositiveInfinityError),
        (-math.inf, NegativeInfinityError),
    ],
)
@pytest.mark.parametrize("spec", ["", ".3c", "+03.2m", "#j", "0x"])
@pytest.mark.parametrize("cls", [Angle, HourAngle, RA, Time])
def test_special_values(cls, value, error, spec):
    text, err = format_value(cls(value), spec)
    assert isinstance(err, error)
    assert text == "*" * (len(f"{cls(0.0):{spec}}") - ("c" in spec))


def test_combining_mark_not_counted_in_overflow():
    text, err = format_value(Angle(math.nan), ".2c")
    assert isinstance(err, NaNError)
    assert text == "****"


def test_bad_verb():
    assert format_value(Angle(1.0), "q") == ("%!q(BADVERB)", None)
    # verb is checked before precision
    assert format_value(Angle(1.0), ".16q") == ("%!q(BADVERB)", None)


def test_bad_precision():
    assert format_value(Angle(1.0), ".16s") == ("%!(BADPREC 16)", None)
    assert format_value(Angle(1.0), FormatSpec(precision=-1)) == ("%!(BADPREC -1)", None)


def test_bad_precision_ignores_value():
    assert format_value(Angle(math.nan), ".20") == ("%!(BADPREC 20)", None)


def test_malformed_spec_raises():
    with pytest.raises(FormatSpecError):
        format(Angle(1.0), "abc")
    with pytest.raises(ValueError):
        f"{Time(1.0):1.2.3}"


def test_ra_never_signed():
    ra = RA.from_hms(9, 14, 55.8)
    assert f"{ra:+}" == "9ʰ14ᵐ56ˢ"
    assert f"{ra: .1}" == "9ʰ14ᵐ55.8ˢ"
    assert f"{ra:+.1h}" == "9.2ʰ"


def test_ra_wrapped_before_formatting():
    text = str(RA(-math.pi / 2))
    assert text == "18ʰ0ᵐ0ˢ"
    assert "-" not in text


def test_ra_rounding_up_wraps_to_zero():
    ra = RA.from_hours(23.9999999)
    assert str(ra) == str(RA(0.0))
    assert f"{ra:#}" == "0ʰ0ᵐ0ˢ"
    assert f"{ra:#02}" == "00ʰ00ᵐ00ˢ"
    assert f"{ra:.3m}" == "0.000ᵐ"
    assert f"{ra:.1h}" == "0.0ʰ"


def test_hours_rounding_up_is_not_wrapped():
    assert str(HourAngle.from_hours(23.9999999)) == "24ʰ0ᵐ0ˢ"


def test_left_justify_pads_before_unit():
    assert f"{Angle.from_deg(5.3):-2.1h}" == " 5.3 °"


def test_formatting_is_repeatable():
    big = Angle.from_dms(False, 4423, 26, 44)
    first = format_value(big, "03s")
    second = format_value(big, "03s")
    assert first[0] == second[0]
    assert type(first[1]) is type(second[1])
    assert format_value(Angle(1.0), ".3c") == format_value(Angle(1.0), ".3c")


def test_explicit_symbols(obliquity):
    assert format_value(obliquity, "", ASCII_SYMBOLS) == ("23d26m44s", None)


def test_default_symbols_swappable():
    set_default_symbols(ASCII_SYMBOLS)
    assert str(Time.from_hms(False, 15, 22, 7)) == "15h22m7s"

import pytest
from pydantic import ValidationError

from vowels.models.vowel import Vowel, Height, Backness, Rounding

CLOSE_FRONT = {
    'symbol': 'i',
    'height': 'close',
    'backness': 'front',
    'rounding': 'unrounded',
}


def test_vowel_from_strings():
    vowel = Vowel(**CLOSE_FRONT)
    assert vowel.symbol == 'i'
    assert vowel.height == Height.CLOSE
    assert vowel.backness == Backness.FRONT
    assert vowel.rounding == Rounding.UNROUNDED


def test_vowel_from_enum_members():
    vowel = Vowel(symbol='ɒ', height=Height.OPEN, backness=Backness.BACK, rounding=Rounding.ROUNDED)
    assert vowel == Vowel(symbol='ɒ', height='open', backness='back', rounding='rounded')


@pytest.mark.parametrize('field', ['height', 'backness', 'rounding'])
def test_invalid_classification_raises(field):
    with pytest.raises(ValidationError):
        Vowel(**{**CLOSE_FRONT, field: 'invalid_value'})


@pytest.mark.parametrize('symbol', ['', '   '])
def test_empty_symbol_raises(symbol):
    with pytest.raises(ValidationError):
        Vowel(**{**CLOSE_FRONT, 'symbol': symbol})


def test_missing_field_raises():
    with pytest.raises(ValidationError):
        Vowel(symbol='i', height='close', backness='front')


def test_vowel_is_immutable():
    vowel = Vowel(**CLOSE_FRONT)
    with pytest.raises(ValidationError):
        vowel.height = Height.OPEN
    assert vowel.height == Height.CLOSE
    assert vowel.height == vowel.height
    assert vowel.symbol == 'i'


def test_equality_needs_all_fields():
    vowel = Vowel(**CLOSE_FRONT)
    assert vowel == Vowel(**CLOSE_FRONT)
    assert vowel != Vowel(**{**CLOSE_FRONT, 'rounding': 'rounded'})
    assert vowel != Vowel(**{**CLOSE_FRONT, 'symbol': 'y'})


def test_equal_vowels_share_a_hash():
    assert len({Vowel(**CLOSE_FRONT), Vowel(**CLOSE_FRONT)}) == 1


def test_symbol_is_nfc_normalized():
    # e + combining diaeresis
    vowel = Vowel(symbol='e\u0308', height='close_mid', backness='central', rounding='unrounded')
    assert vowel.symbol == '\u00eb'


def test_str_contains_symbol_and_classification():
    assert str(Vowel(**CLOSE_FRONT)) == 'Vowel(i, close, front, unrounded)'


def test_chart_position():
    assert Vowel(**CLOSE_FRONT).chart_position == (0, 0, 0)
    schwa = Vowel(symbol='ə', height='mid', backness='central', rounding='any')
    assert schwa.chart_position == (3, 1, 2)


def test_is_rounded():
    assert not Vowel(**CLOSE_FRONT).is_rounded
    assert Vowel(**{**CLOSE_FRONT, 'symbol': 'y', 'rounding': 'rounded'}).is_rounded
    assert not Vowel(symbol='ə', height='mid', backness='central', rounding='any').is_rounded

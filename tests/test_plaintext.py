import dataclasses

import pytest

from ore_encoding.domain import Uint8Domain, Uint16Domain, Uint64Domain
from ore_encoding.exception import UnsupportedTypeError, ValueOutOfRangeError
from ore_encoding.plaintext import OrePlaintext


def test_default_domain():
    plaintext = OrePlaintext(7)
    assert plaintext.value == 7
    assert plaintext.domain is Uint64Domain


def test_order_follows_value():
    values = [OrePlaintext(v) for v in (5, 0, 2**64 - 1, 3)]
    assert sorted(values) == [OrePlaintext(0), OrePlaintext(3), OrePlaintext(5), OrePlaintext(2**64 - 1)]
    assert OrePlaintext(1) < OrePlaintext(2) <= OrePlaintext(2)
    assert max(values) == OrePlaintext(2**64 - 1)


def test_domain_is_not_compared():
    narrow = OrePlaintext(5, Uint8Domain)
    wide = OrePlaintext(5)
    assert narrow == wide
    assert hash(narrow) == hash(wide)
    assert len({narrow, wide, OrePlaintext(5, Uint16Domain)}) == 1


def test_int_conversion():
    plaintext = OrePlaintext(255)
    assert int(plaintext) == 255
    assert hex(plaintext) == '0xff'
    assert ['a', 'b', 'c'][OrePlaintext(1)] == 'b'


def test_repr():
    assert repr(OrePlaintext(5)) == 'OrePlaintext(5)'
    assert repr(OrePlaintext(5, Uint8Domain)) == 'OrePlaintext(5, Uint8Domain)'


def test_immutable():
    plaintext = OrePlaintext(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        plaintext.value = 2


def test_value_checked_against_domain():
    with pytest.raises(ValueOutOfRangeError):
        OrePlaintext(256, Uint8Domain)
    with pytest.raises(ValueOutOfRangeError):
        OrePlaintext(-1)
    with pytest.raises(ValueOutOfRangeError):
        OrePlaintext(2**64)
    with pytest.raises(UnsupportedTypeError):
        OrePlaintext(1.0)
    with pytest.raises(UnsupportedTypeError):
        OrePlaintext(True)

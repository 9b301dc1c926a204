"""End-to-end scenarios with known answers."""
from __future__ import annotations

import pytest

from bigint import BigInt

POW_12345_100 = (
    "14096439339183491166601553169309047526517979573772621675186880097101514"
    "88377127908867587021435306068941523673989778174486754385008184130850836"
    "95456288650094833211199786012798784818736558656033456189175146029787653"
    "31940575318348748763822033479067105224096895463900041801357287309352642"
    "20553987748944439437465148449244051070222714420101898063730665159061669"
    "3974026882156015683111860425924533046782016754150390625"
)


def test_parse_failure():
    num = BigInt.new("abc")
    assert num.length == 0
    assert num.digits == ()


def test_parse_layout():
    num = BigInt.new("123")
    assert num.length == 3
    assert num.digits == (3, 2, 1)


@pytest.mark.slow
def test_million_additions():
    a = BigInt.new("0")
    b = BigInt.new("123456789123456789")
    for _ in range(1_000_000):
        a.add(b)
    assert a == BigInt.new("123456789123456789000000")


def test_subtraction_with_borrow():
    a = BigInt.new("100")
    a.sub(BigInt.new("99"))
    assert a == BigInt.new("1")


def test_multiplication_by_hundred():
    a = BigInt.new("123456789987654321")
    a.mul(BigInt.new("100"))
    assert a == BigInt.new("12345678998765432100")


def test_large_power(capsys):
    assert len(POW_12345_100) == 410
    a = BigInt.new("12345")
    a.pow(BigInt.new("100"))
    assert a == BigInt.new(POW_12345_100)
    a.print()
    assert capsys.readouterr().out == POW_12345_100 + "\n"

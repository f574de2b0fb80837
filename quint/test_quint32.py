import pickle, copy

import pytest

from .codec import FormatError
from .quint32 import Quint32

def test_construct ():
	assert Quint32 (0).value == 0
	assert Quint32 ('babab-babad').value == 1
	assert Quint32 (Quint32 (5)) == Quint32 (5)
	assert str (Quint32 (0xffffffff)) == 'zuzuz-zuzuz'
	assert repr (Quint32 (0)) == "Quint32('babab-babab')"

@pytest.mark.parametrize("v,exc", [
	pytest.param (-1, ValueError, id='negative'),
	pytest.param (2**32, ValueError, id='too-large'),
	pytest.param ('babab_babab', FormatError, id='bad-separator'),
	pytest.param ('xabab-babab', FormatError, id='bad-char'),
	pytest.param (1.5, TypeError, id='float'),
	])
def test_construct_invalid (v, exc):
	with pytest.raises (exc):
		Quint32 (v)

def test_conversions ():
	q = Quint32 (0xdeadbeef)
	assert int (q) == 0xdeadbeef
	assert hex (q) == '0xdeadbeef'
	assert [0, 1, 2][Quint32 (1)] == 1
	assert Quint32 (str (q)) == q
	assert q.toDict () == dict (value=0xdeadbeef, quint=str (q))

@pytest.mark.parametrize("signed,unsigned", [
	pytest.param (0, 0, id='zero'),
	pytest.param (-1, 0xffffffff, id='minus-one'),
	pytest.param (-2**31, 2**31, id='min'),
	pytest.param (2**31-1, 2**31-1, id='max'),
	])
def test_signed (signed, unsigned):
	q = Quint32.fromSigned (signed)
	assert q.value == unsigned
	assert q.toSigned () == signed

def test_signed_invalid ():
	with pytest.raises (ValueError):
		Quint32.fromSigned (2**31)
	with pytest.raises (ValueError):
		Quint32.fromSigned (-2**31-1)

def test_equality ():
	assert Quint32 (1) == Quint32 ('babab-babad')
	assert Quint32 (1) == 1
	assert 1 == Quint32 (1)
	assert Quint32 (1) != Quint32 (2)
	assert Quint32 (1) != 2
	assert Quint32 (0) != 'babab-babab'
	assert len ({Quint32 (1), Quint32 (1), Quint32 (2)}) == 2
	assert hash (Quint32 (7)) == hash (7)

def test_ordering ():
	a, b = Quint32 (1), Quint32 (0xffffffff)
	assert a < b
	assert a <= b
	assert b > a
	assert b >= a
	assert a <= Quint32 (1)
	assert sorted ([b, a]) == [a, b]
	with pytest.raises (TypeError):
		a < 'babab-babab'

def test_immutable ():
	q = Quint32 (1)
	with pytest.raises (AttributeError):
		q._value = 2
	with pytest.raises (AttributeError):
		q.foo = 2
	with pytest.raises (AttributeError):
		del q._value
	assert q.value == 1

def test_copy_pickle ():
	q = Quint32 (0xcafe)
	assert pickle.loads (pickle.dumps (q)) == q
	assert copy.copy (q) == q
	assert copy.deepcopy (q) == q

def test_random ():
	values = [Quint32.random () for _ in range (100)]
	assert all (isinstance (q, Quint32) for q in values)
	assert len (set (values)) > 90
	for q in values:
		assert Quint32 (str (q)) == q

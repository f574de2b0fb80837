# Copyright 2019–2020 Leibniz Institute for Psychology
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

from functools import total_ordering

from .codec import encode, decode, random

@total_ordering
class Quint32:
	"""
	Immutable 32 bit identifier, written as a proquint pair (CVCVC-CVCVC).

	Compares, orders and hashes like the unsigned integer it wraps.
	"""

	__slots__ = ('_value', )

	def __init__ (self, value):
		if isinstance (value, str):
			value = decode (value)
		elif isinstance (value, Quint32):
			value = value.value
		else:
			# encode checks type and range
			encode (value)
		object.__setattr__ (self, '_value', value)

	def __setattr__ (self, name, value):
		raise AttributeError (f'{type (self).__name__} is immutable')

	def __delattr__ (self, name):
		raise AttributeError (f'{type (self).__name__} is immutable')

	@classmethod
	def random (cls):
		return cls (random ())

	@classmethod
	def fromSigned (cls, i):
		""" Reinterpret a signed 32 bit integer (two’s complement) """
		if not -2**31 <= i < 2**31:
			raise ValueError (f'{i} is not a 32 bit signed integer')
		return cls (i & 0xffffffff)

	@property
	def value (self):
		return self._value

	def toSigned (self):
		v = self._value
		return v - 2**32 if v >= 2**31 else v

	def toDict (self):
		return dict (value=self._value, quint=str (self))

	def __int__ (self):
		return self._value

	def __index__ (self):
		return self._value

	def __str__ (self):
		return encode (self._value)

	def __repr__ (self):
		return f'{type (self).__name__}({str (self)!r})'

	def __hash__ (self):
		return hash (self._value)

	def __eq__ (self, other):
		if isinstance (other, Quint32):
			return self._value == other._value
		elif isinstance (other, int):
			return self._value == other
		return NotImplemented

	def __lt__ (self, other):
		if isinstance (other, Quint32):
			return self._value < other._value
		return NotImplemented

	def __reduce__ (self):
		return (type (self), (self._value, ))


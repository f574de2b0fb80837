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

# see https://arxiv.org/html/0901.4016 on how to build proquints (human
# pronouncable unique ids)

import secrets

from .alphabet import consonantChar, vowelChar, consonantIndex, vowelIndex, \
		CONSONANT_BITS, VOWEL_BITS

SEPARATOR = '-'
GROUP_PATTERN = 'cvcvc'
GROUP_LENGTH = len (GROUP_PATTERN)
# two groups and the separator
LENGTH = 2*GROUP_LENGTH + 1
FIELD_BITS = dict (c=CONSONANT_BITS, v=VOWEL_BITS)
# field widths, most significant first
LAYOUT = tuple (FIELD_BITS[k] for k in GROUP_PATTERN) * 2

assert sum (LAYOUT) == 32

class FormatError (ValueError):
	""" String is not a well-formed 32 bit proquint """

	LENGTH = 'length'
	SEPARATOR = 'separator'
	CHARACTER = 'character'

	def __init__ (self, reason, value, position=None, expected=None):
		super ().__init__ (reason, value, position, expected)
		self.reason = reason
		self.value = value
		self.position = position
		self.expected = expected

	def __str__ (self):
		if self.reason == self.LENGTH:
			return f'{self.value!r} must be {LENGTH} characters long, not {len (self.value)}'
		elif self.reason == self.SEPARATOR:
			return f'expected separator {SEPARATOR!r} at position {self.position} of {self.value!r}'
		else:
			return f'invalid character {self.value[self.position]!r} at position {self.position} of {self.value!r}, expected {self.expected}'

def u16ToQuint (v):
	""" Transform a 16 bit unsigned integer into a single quint """
	# quints are “big-endian”
	return ''.join ([
			consonantChar ((v>>(4+2+4+2))&0xf),
			vowelChar ((v>>(4+2+4))&0x3),
			consonantChar ((v>>(4+2))&0xf),
			vowelChar ((v>>4)&0x3),
			consonantChar ((v>>0)&0xf),
			])

def encode (v):
	""" Turn a 32 bit unsigned integer into a proquint like babab-babab """
	if not isinstance (v, int):
		raise TypeError (f'Expected an integer, got {type (v).__name__}')
	if not 0 <= v < 2**32:
		raise ValueError (f'{v} is not a 32 bit unsigned integer')

	return SEPARATOR.join ([u16ToQuint (v>>16), u16ToQuint (v&0xffff)])

def decode (s):
	"""
	Turn a proquint back into the 32 bit unsigned integer it encodes.

	Raises FormatError on the first structural problem or invalid character
	found, scanning from the left.
	"""
	if not isinstance (s, str):
		raise TypeError (f'Expected a string, got {type (s).__name__}')
	if len (s) != LENGTH:
		raise FormatError (FormatError.LENGTH, s)
	if s[GROUP_LENGTH] != SEPARATOR:
		raise FormatError (FormatError.SEPARATOR, s, GROUP_LENGTH, SEPARATOR)

	v = 0
	for pos, c in enumerate (s):
		if pos == GROUP_LENGTH:
			continue
		kind = GROUP_PATTERN[pos % (GROUP_LENGTH+1)]
		try:
			if kind == 'c':
				v = (v<<CONSONANT_BITS) | consonantIndex (c)
			else:
				v = (v<<VOWEL_BITS) | vowelIndex (c)
		except KeyError:
			expected = 'consonant' if kind == 'c' else 'vowel'
			raise FormatError (FormatError.CHARACTER, s, pos, expected) from None
	return v

def random ():
	""" Uniformly distributed 32 bit unsigned integer """
	return secrets.randbits (32)

def randomQuint ():
	return encode (random ())


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

"""
Symbol tables for proquints, see https://arxiv.org/html/0901.4016

Consonants carry four bits, vowels two. Both tables are fixed forever, since
they are also the decode tables for every identifier ever handed out.
"""

CONSONANTS = 'bdfghjklmnprstvz'
VOWELS = 'aiou'

CONSONANT_BITS = 4
VOWEL_BITS = 2

assert len (CONSONANTS) == 2**CONSONANT_BITS
assert len (VOWELS) == 2**VOWEL_BITS

_consonantToIndex = dict ((c, i) for i, c in enumerate (CONSONANTS))
_vowelToIndex = dict ((c, i) for i, c in enumerate (VOWELS))

def consonantChar (i):
	return CONSONANTS[i]

def vowelChar (i):
	return VOWELS[i]

def consonantIndex (c):
	""" Reverse lookup, raises KeyError if c is not a consonant """
	return _consonantToIndex[c]

def vowelIndex (c):
	""" Reverse lookup, raises KeyError if c is not a vowel """
	return _vowelToIndex[c]

def isConsonant (c):
	return c in _consonantToIndex

def isVowel (c):
	return c in _vowelToIndex


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

import argparse, os, logging, sys, json
from enum import Enum, auto
from functools import partial

import yaml

from .codec import FormatError
from .quint32 import Quint32

logger = logging.getLogger ('cli')

class Formatter (Enum):
	HUMAN = auto ()
	YAML = auto ()
	JSON = auto ()

def formatResult (args, r, human=None):
	if args.format == Formatter.HUMAN:
		if human is not None:
			print (human)
	elif args.format == Formatter.YAML:
		yaml.dump (r, sys.stdout)
		sys.stdout.write ('---\n')
	elif args.format == Formatter.JSON:
		json.dump (r, sys.stdout)
		sys.stdout.write ('\n')
	else:
		assert False

def parseNumber (s):
	""" Integer with optional base prefix (0x, 0o, 0b) """
	return int (s, 0)

def doHelp (parser, args):
	parser.print_help ()
	return 0

def doEncode (args):
	for n in args.number:
		q = Quint32 (n)
		logger.debug (f'encoded {n} as {q}')
		formatResult (args, q.toDict (), str (q))
	return 0

def doDecode (args):
	for s in args.quint:
		q = Quint32 (s)
		logger.debug (f'decoded {s} to {q.value}')
		formatResult (args, q.toDict (), q.value)
	return 0

def doRandom (args):
	for _ in range (args.count):
		q = Quint32.random ()
		formatResult (args, q.toDict (), str (q))
	return 0

def loadConfig (paths):
	""" Merge YAML config files, later ones override earlier ones """
	config = dict ()
	for f in paths:
		try:
			with open (f) as fd:
				config.update (yaml.safe_load (fd) or {})
		except FileNotFoundError:
			pass
	return config

def main (argv=None):
	parser = argparse.ArgumentParser(description='Encode and decode proquint identifiers.')
	parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')
	parser.add_argument('-c', '--config', action='append',
			default=['/etc/quint/config.yaml', # system default
					os.path.expanduser ('~/.config/quint/config.yaml'), # user default
					],
			help='Configuration file')
	parser.add_argument('-f', '--format', default=None,
			type=lambda x: Formatter[x.upper ()], help='Output format (human, yaml, json)')
	parser.set_defaults (func=partial (doHelp, parser))
	subparsers = parser.add_subparsers ()

	parserEncode = subparsers.add_parser('encode', help='Turn integers into proquints')
	parserEncode.add_argument('number', nargs='+', type=parseNumber, help='32 bit unsigned integer')
	parserEncode.set_defaults(func=doEncode)

	parserDecode = subparsers.add_parser('decode', help='Turn proquints into integers')
	parserDecode.add_argument('quint', nargs='+', help='Proquint, i.e. babab-babab')
	parserDecode.set_defaults(func=doDecode)

	parserRandom = subparsers.add_parser('random', help='Generate random proquints')
	parserRandom.add_argument('-n', '--count', type=int, default=None, help='Number of proquints')
	parserRandom.set_defaults(func=doRandom)

	args = parser.parse_args(argv)
	logformat = '{message}'
	if args.verbose:
		logging.basicConfig (level=logging.DEBUG, format=logformat, style='{')
	else:
		logging.basicConfig (level=logging.INFO, format=logformat, style='{')

	# read config and merge with args
	config = loadConfig (args.config)
	logger.debug (f'using config {config}')
	if args.format is None:
		args.format = Formatter[config.get ('format', 'human').upper ()]
	if 'count' in args and args.count is None:
		args.count = config.get ('count', 1)

	try:
		return args.func (args)
	except FormatError as e:
		logger.error (f'Invalid identifier format: {e}')
		formatResult (args, dict (status='format_error',
				reason=e.reason,
				value=e.value,
				position=e.position,
				expected=e.expected), None)
		return 2
	except ValueError as e:
		logger.error (str (e))
		formatResult (args, dict (status='value_error', message=str (e)), None)
		return 2


#
# Copyright (c) 2018 Antti Kantee <pooka@iki.fi>
#
# Permission to use, copy, modify, and distribute this software for any
# purpose with or without fee is hereby granted, provided that the above
# copyright notice and this permission notice appear in all copies.
#
# THE SOFTWARE IS PROVIDED "AS IS" AND THE AUTHOR DISCLAIMS ALL WARRANTIES
# WITH REGARD TO THIS SOFTWARE INCLUDING ALL IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS. IN NO EVENT SHALL THE AUTHOR BE LIABLE FOR
# ANY SPECIAL, DIRECT, INDIRECT, OR CONSEQUENTIAL DAMAGES OR ANY DAMAGES
# WHATSOEVER RESULTING FROM LOSS OF USE, DATA OR PROFITS, WHETHER IN AN
# ACTION OF CONTRACT, NEGLIGENCE OR OTHER TORTIOUS ACTION, ARISING OUT OF
# OR IN CONNECTION WITH THE USE OR PERFORMANCE OF THIS SOFTWARE.
#

from BRC.utils import PilotError, notice

from BRC import constants
from BRC import parse

import os

def _getparam(what):
	if what not in brcparams:
		raise PilotError('invalid parameter: ' + what)
	return brcparams[what]

brcparams = {}

def setparam(what, value):
	if what in paramshorts:
		what = paramshorts[what]
	if what not in paramparsers:
		raise PilotError('invalid parameter: ' + what)
	param = paramparsers[what]
	rv = param['parser'](value)
	brcparams[what] = rv

def processparam(paramstr):
	ar = paramstr.split('=')
	if len(ar) != 2:
		raise PilotError('invalid sysparam: ' + paramstr)
	what = ar[0].strip()
	value = ar[1].strip()
	setparam(what, value)

def _process(f):
	for line in f:
		_processline(line, False)

def _processline(line, emptyerror):
	line = line.strip()
	if len(line) == 0 or line[0] == '#':
		if emptyerror:
			raise PilotError('empty parameter line')
		else:
			return
	processparam(line)

def processline(line):
	_processline(line, True)

def processdefaults():
	for pf in [os.path.expanduser('~/.brcsysparams'), './.brcsysparams']:
		try:
			f = open(pf, 'r')
		except IOError:
			continue
		with f:
			notice('Using "' + pf + '" for BRC system parameters\n')
			_process(f)

def processfile(filename):
	with open(filename, 'r') as f:
		notice('Using "' + filename + '" for BRC system parameters\n')
		_process(f)

def _addparam(name, shortname, handler, descr):
	def x(arg):
		try:
			# reject special characters.  they should not be
			# allowed by the handlers anyway, but it's more
			# certain to check for them collectively.
			if '|' in str(arg):
				raise PilotError('__unused')
			rv = handler(arg)
			paraminputs[name] = str(arg)
			return rv
		except (PilotError, ValueError):
			raise PilotError('invalid value "' + str(arg)
			    + '" for "' + str(name) + '"')
	param = {}
	param['parser'] = x
	param['name'] = name
	param['shortname'] = shortname
	param['descr'] = descr
	paramparsers[name] = param

	assert(shortname not in paramshorts)
	paramshorts[shortname] = name

def _currystring(strings):
	def x(input):
		return parse.choice(input, strings)
	return x

def _curryratio(p1, p2):
	def x(input):
		return parse.ratio(input, p1, p2)
	return x

def _parsepositive(input):
	v = parse.number(input)
	if v < 0:
		raise ValueError('must be non-negative')
	return v

paraminputs = {}		# longname  -> unparsed text input
paramparsers = {}		# longname  -> param "struct"
paramshorts = {}		# shortname -> longname

_addparam('units_output',	'uo',	_currystring(['metric', 'us']),
				'Sets output units. '
				'Acceptable values: [metric, us]')

_addparam('efficiency',		'ef',	parse.percent,
				'Brewhouse efficiency used for fermentables '
				'which do not specify their own.  If your '
				'original gravity comes out too low or '
				'high, adjust this parameter. '
				'Acceptable values: percentage. Typical '
				'values: 65-80%')

_addparam('hop_utilization',	'hu',	_parsepositive,
				'Multiplier applied to the utilization of '
				'every hop addition, for techniques which '
				'the Tinseth model underestimates or '
				'overestimates. '
				'Acceptable values: number. Typical '
				'values: 0.8-1.1')

_addparam('whirlpool_temp',	'Tw',	parse.temperature,
				'Whirlpool/hopstand temperature used for '
				'whirlpool hops which do not specify their '
				'own.  Utilization is zero at 60degC and '
				'full at 100degC. '
				'Acceptable values: temperature')

_addparam('whirlpool_retention', 'wr',	parse.percent,
				'Isomerization efficiency of whirlpool '
				'hops relative to boiling hops at the same '
				'temperature factor. '
				'Acceptable values: percentage')

_addparam('fermentation_temp',	'Tf',	parse.temperature,
				'Highest temperature the beer reached after '
				'fermentation.  Used to estimate the CO2 '
				'still dissolved in the beer at packaging. '
				'Acceptable values: temperature')

_addparam('co2_volumes',	'cv',	_parsepositive,
				'Default carbonation target in volumes '
				'of CO2. '
				'Acceptable values: number. Typical '
				'values: 1.5-3.5')

_addparam('priming_sugar',	'ps',	_currystring(['sucrose',
					    'dextrose']),
				'Sugar used for priming. '
				'Acceptable values: [sucrose, dextrose]')

_addparam('abv_method',		'am',	_currystring(['standard',
					    'advanced']),
				'ABV formula to report as "the" ABV. '
				'Acceptable values: [standard, advanced]')

_addparam('grain_absorption',	'ga',	_curryratio(parse.volume, parse.mass),
				'The amount of liquid that grains hold. '
				'Used to estimate the mash water amount. '
				'Acceptable values: volume/mass (e.g. '
				'"1.0L/kg")')

_defaults = {
	'units_output'		: 'metric',
	'efficiency'		: '75%',
	'hop_utilization'	: '1.0',
	'whirlpool_temp'	: str(constants.whirlpool_temp) + 'degC',
	'whirlpool_retention'	: str(100*constants.whirlpool_retention) + '%',
	'fermentation_temp'	: '20degC',
	'co2_volumes'		: str(constants.co2_volumes),
	'priming_sugar'		: 'sucrose',
	'abv_method'		: 'advanced',
	'grain_absorption'	: str(constants.grain_absorption) + 'L/kg',
}

def resetdefaults():
	for x in _defaults:
		setparam(x, _defaults[x])

resetdefaults()

def checkset():
	for p in paramparsers:
		if p not in brcparams:
			raise PilotError('missing system parameter for: ' + p)

# return a string instead of an array of tuples so that we can
# maintain policy with decodeparamshorts()
def getparamshorts():
	out=[]
	for sn in sorted(paramshorts):
		n = paramshorts[sn]
		out.append(sn + '=' + paraminputs[n])
	return '|'.join(out)

def decodeparamshorts(pstr):
	res = []
	for x in pstr.split('|'):
		v = x.split('=')
		if len(v) != 2 or v[0] not in paramshorts:
			raise PilotError('invalid sysparam spec: ' + x)
		res.append((paramshorts[v[0]], v[1]))
	return res

if __name__ == '__main__':
	for x in sorted(paramparsers):
		p = paramparsers[x]
		print(p['name'] + ' (' + p['shortname'] + '): ' + p['descr'])
		print()

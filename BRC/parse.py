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

from BRC import units
from BRC.utils import PilotError

import string

def _unit(cls, sfxmap, input, name = None):
	inputstr = str(input).strip()
	alphastr = inputstr.lstrip(string.digits + '.' + '-')
	numstr = inputstr[0:len(inputstr) - len(alphastr)]
	alphastr = alphastr.strip()

	# if unit is missing, default to 1
	if numstr == "":
		numstr = "1"

	if name is None:
		name = cls.__name__

	if alphastr not in sfxmap:
		raise ValueError('invalid suffix in: '
		    + inputstr + ' (for ' + name + ')')
	sfx = sfxmap[alphastr]
	if sfx is None:
		return cls(float(numstr))
	else:
		return cls(float(numstr), sfx)

masssfx = {
	'mg'	: units.Mass.MG,
	'g'	: units.Mass.G,
	'kg'	: units.Mass.KG,
	'oz'	: units.Mass.OZ,
	'lb'	: units.Mass.LB
}
def mass(input):
	return _unit(units.Mass, masssfx, input)

def volume(input):
	suffixes = {
		'gal'	: units.Volume.GALLON,
		'qt'	: units.Volume.QUART,
		'ml'	: units.Volume.MILLILITER,
		'mL'	: units.Volume.MILLILITER,
		'l'	: units.Volume.LITER,
		'L'	: units.Volume.LITER,
	}
	return _unit(units.Volume, suffixes, input)

def temperature(input):
	suffixes = {
		'degC'			: units.Temperature.degC,
		chr(0x00b0) + 'C'	: units.Temperature.degC,
		'degF'			: units.Temperature.degF,
		chr(0x00b0) + 'F'	: units.Temperature.degF,
		'K'			: units.Temperature.K,
	}
	return _unit(units.Temperature, suffixes, input)

def color(input):
	suffixes = {
		'EBC'	: units.Color.EBC,
		'SRM'	: units.Color.SRM,
		'L'	: units.Color.LOVIBOND,
		'degL'	: units.Color.LOVIBOND,
	}
	return _unit(units.Color, suffixes, input)

def potential(input):
	suffixes = {
		'PPG'	: units.Potential.PPG,
		'ppg'	: units.Potential.PPG,
		'PKL'	: units.Potential.PKL,
		'pkl'	: units.Potential.PKL,
		# datasheets in the US world mostly just say "37"
		''	: units.Potential.PPG,
	}
	return _unit(units.Potential, suffixes, input)

percentsfxs = {
	'%'	: None,
}
def percent(input):
	return _unit(float, percentsfxs, input, name = 'percentage')

def minutes(input):
	suffixes = {
		'min'	: None,
		''	: None,
	}
	return _unit(float, suffixes, input, name = 'minutes')

def uint(input):
	v = int(input)
	if v < 0:
		raise ValueError('unsigned integer must be >= 0')
	return v

# accepts plain numbers, and also numbers which yaml has
# already handed to us as numbers
def number(input):
	return float(input)

def split(input, splitter, i1, i2):
	istr = str(input)
	marr = istr.split(splitter)
	if len(marr) != 2:
		raise ValueError('input must contain exactly one "' + splitter
		    + '", you gave: ' + istr)
	res1 = i1(marr[0])
	res2 = i2(marr[1])
	return (res1, res2)

def ratio(input, r1, r2):
	return split(input, '/', r1, r2)

# "73%-77%" or just "75%"
def percentrange(input):
	istr = str(input)
	if '-' in istr.strip().lstrip('-'):
		lo, hi = split(istr, '-', percent, percent)
		if lo > hi:
			raise PilotError('invalid percentage range: ' + istr)
		return (lo, hi)
	v = percent(istr)
	return (v, v)

def choice(input, choices):
	v = str(input).strip().lower()
	if v not in choices:
		raise PilotError('invalid value "' + str(input) + '", '
		    + 'must be one of: ' + ', '.join(choices))
	return v

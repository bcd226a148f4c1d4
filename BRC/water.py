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

#
# Water: resulting ion concentrations from base water plus salt
# additions, and the couple of numbers brewers derive from them.
#

from collections import namedtuple

import math

from BRC import constants
from BRC.utils import PilotError, checktypes, warn, roundup

ions = [ 'ca', 'mg', 'na', 'cl', 'so4', 'hco3' ]

class IonProfile(namedtuple('IonProfile', ions)):
	__slots__ = ()

	def __new__(cls, ca = 0, mg = 0, na = 0, cl = 0, so4 = 0, hco3 = 0):
		return super(IonProfile, cls).__new__(cls, float(ca),
		    float(mg), float(na), float(cl), float(so4), float(hco3))

	def asdict(self):
		return dict(self._asdict())

	def __str__(self):
		return ' '.join('{:}={:.1f}'.format(x, getattr(self, x))
		    for x in ions)

distilled = IonProfile()

class SaltAddition(namedtuple('SaltAddition',
    ['name', 'amountg', 'iontype', 'volumel'])):
	__slots__ = ()

	def __new__(cls, name, amountg, iontype, volumel):
		if iontype not in ions:
			raise PilotError('invalid ion: ' + str(iontype))
		return super(SaltAddition, cls).__new__(cls, name,
		    float(amountg), iontype, float(volumel))

#
# ppm of each ion contributed by 1g of the salt in 1l of water.
#
# The figures are for the forms brewers actually buy, e.g. gypsum
# and calcium chloride as dihydrates and epsom salt as heptahydrate.
# People routinely label the bag by the anhydrous formula, so every
# name variant resolves to the same figures.  If you really have
# anhydrous CaCl2, use ~1.32 times less of it.
#
salts = {
	'Gypsum':		{ 'ca': 232.8,	'so4': 557.7 },
	'Calcium Chloride':	{ 'ca': 272.6,	'cl': 482.3 },
	'Epsom Salt':		{ 'mg': 98.6,	'so4': 389.6 },
	'Table Salt':		{ 'na': 393,	'cl': 608 },
	'Chalk':		{ 'ca': 400,	'hco3': 610 },
	'Baking Soda':		{ 'na': 274,	'hco3': 726 },
}

_aliases = {
	'Gypsum':		[ 'Gypsum (CaSO4' + chr(0x00b7) + '2H2O)',
				  'Gypsum (CaSO4)', 'CaSO4' ],
	'Calcium Chloride':	[ 'Calcium Chloride (CaCl2' + chr(0x00b7)
				  + '2H2O)', 'Calcium Chloride (CaCl2)',
				  'CaCl2' ],
	'Epsom Salt':		[ 'Epsom Salt (MgSO4' + chr(0x00b7) + '7H2O)',
				  'Epsom Salt (MgSO4)', 'MgSO4' ],
	'Table Salt':		[ 'Table Salt (NaCl)', 'NaCl' ],
	'Chalk':		[ 'Chalk (CaCO3)', 'CaCO3' ],
	'Baking Soda':		[ 'Baking Soda (NaHCO3)', 'NaHCO3' ],
}

_saltnames = {}
for _s in salts:
	for _n in [_s] + _aliases[_s]:
		_saltnames[_n.lower()] = _s

# return canonical salt name, or None
def findsalt(name):
	return _saltnames.get(str(name).strip().lower())

# one physical salt addition contributes to multiple ions.  split it
# into one addition per ion.
def expand_salt(name, amountg, volumel):
	s = findsalt(name)
	if s is None:
		warn('unknown salt "' + str(name) + '", ignoring\n')
		return []
	return [SaltAddition(name, amountg, ion, volumel)
	    for ion in ions if ion in salts[s]]

def calculate_waterprofile(baseprofile, additions):
	checktypes([(baseprofile, IonProfile)]
	    + [(a, SaltAddition) for a in additions])
	result = baseprofile.asdict()

	for a in additions:
		s = findsalt(a.name)
		if s is None:
			warn('unknown salt "' + str(a.name) + '", ignoring\n')
			continue
		factor = salts[s].get(a.iontype, 0)
		if factor == 0:
			continue

		vol = a.volumel if a.volumel > 0 else 1
		ppm = (a.amountg / vol) * factor
		result[a.iontype] = max(0, result[a.iontype] + ppm)

	return IonProfile(**{x: roundup(result[x], 1) for x in ions})

# chloride to sulfate ratio, the malty/hoppy knob
def cl_to_so4_ratio(profile):
	if profile.so4 == 0:
		return math.inf
	return roundup(profile.cl / profile.so4, 2)

def waterprofile_description(profile):
	r = cl_to_so4_ratio(profile)
	if r > 2:
		return 'Malty, full-bodied'
	if r > 1:
		return 'Balanced'
	if r > 0.5:
		return 'Crisp, dry'
	return 'Very crisp, hop-forward'

# Kolbach: calcium and magnesium counteract bicarbonate
def residual_alkalinity(profile):
	return profile.hco3 - (profile.ca / 3.5 + profile.mg / 7)

# This is a very coarse estimate.  Grain bill color, the actual malts
# and the mash thickness all move the pH more than this accounts for.
# Measure if you care.
def estimate_mashph(profile, grainacidity = constants.grain_acidity):
	ph = constants.mashph_base + grainacidity \
	    + residual_alkalinity(profile) / 50
	return roundup(ph, 2)

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

from BRC import constants
from BRC.utils import PilotError, roundup

# Volumes of CO2 left dissolved in fully fermented beer at atmospheric
# pressure, by the highest temperature the beer was at after
# fermentation.  Interpolated linearly in between, clamped outside.
_residualtab = [
	(0,	1.70),
	(3,	1.58),
	(6,	1.47),
	(9,	1.37),
	(12,	1.27),
	(15,	1.18),
	(18,	1.10),
	(21,	1.03),
	(24,	0.97),
	(27,	0.92),
	(30,	0.88),
]

def residual_co2(tempc):
	if tempc <= _residualtab[0][0]:
		return _residualtab[0][1]
	if tempc >= _residualtab[-1][0]:
		return _residualtab[-1][1]

	for (t1, v1), (t2, v2) in zip(_residualtab, _residualtab[1:]):
		if tempc <= t2:
			return v1 + (v2 - v1) * (tempc - t1) / (t2 - t1)
	assert(False)

SUCROSE=	'sucrose'
DEXTROSE=	'dextrose'

# grams of sugar per liter of beer per volume of CO2.  dextrose is
# sold as the monohydrate and has less fermentable per gram.
sugarfactors = {
	SUCROSE:	3.49,
	DEXTROSE:	4.04,
}

_sugaraliases = {
	'table sugar':	SUCROSE,
	'corn sugar':	DEXTROSE,
	'glucose':	DEXTROSE,
}

def findsugar(name):
	n = str(name).strip().lower()
	n = _sugaraliases.get(n, n)
	if n not in sugarfactors:
		raise PilotError('unsupported priming sugar: ' + str(name))
	return n

def calculate_primingsugar(batchsizel, targetco2 = constants.co2_volumes,
    fermentationtempc = 20, sugartype = SUCROSE):
	st = findsugar(sugartype)
	residual = residual_co2(fermentationtempc)
	needed = max(0, targetco2 - residual)

	grams = needed * max(0, batchsizel) * sugarfactors[st]
	return {
		'sugar_amount_g': roundup(grams, 1),
		'co2_volumes': targetco2,
		'residual_co2': residual,
		'sugar_type': st,
	}

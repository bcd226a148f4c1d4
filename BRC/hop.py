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

from collections import namedtuple

import math

from BRC import constants
from BRC import gravity
from BRC.utils import PilotError, roundup

class Hop(namedtuple('Hop',
    ['alphaacid', 'amountg', 'timemin', 'type', 'temperaturec', 'name'])):
	__slots__ = ()

	BOIL		= 'boil'
	WHIRLPOOL	= 'whirlpool'
	DRYHOP		= 'dry-hop'

	types = [ BOIL, WHIRLPOOL, DRYHOP ]

	def __new__(cls, alphaacid, amountg, timemin, type = BOIL,
	    temperaturec = None, name = None):
		if type not in cls.types:
			raise PilotError('invalid hop type: ' + str(type))
		return super(Hop, cls).__new__(cls, float(alphaacid),
		    float(amountg), float(timemin), type, temperaturec, name)

	def namestr(self, index):
		if self.name is not None:
			return self.name
		return 'Hop ' + str(index+1)

#
# Tinseth IBUs, from http://realbeer.com/hops/research.html
#
#   utilization = bigness factor * boil time factor
#
# where bigness is the wort gravity penalty and the boil time factor
# saturates at around 60-90min.
#
def tinseth_util(sg, mins):
	bignessfact = 1.65 * pow(0.000125, sg - 1)
	boilfact = (1 - math.exp(-0.04 * mins)) / 4.15
	return bignessfact * boilfact

# whirlpool hops isomerize less the cooler the wort gets.  Model it as
# linear from nothing at 60degC to full boil-equivalent at 100degC,
# and then take a fixed haircut on top for whatever else is different
# from a rolling boil.
def whirlpool_tempfact(tempc):
	return min(1.0, max(0.0, (tempc - 60) / 40.0))

def _util(hop, sg, multiplier, whirlpooltempc, whirlpoolretention):
	if hop.type == Hop.DRYHOP:
		return 0

	util = tinseth_util(sg, hop.timemin)
	if hop.type == Hop.WHIRLPOOL:
		temp = hop.temperaturec
		if temp is None:
			temp = whirlpooltempc
		util *= whirlpool_tempfact(temp) * whirlpoolretention

	return util * multiplier

def calculate_ibu(hops, finalvolumel, og, preboilvolumel = None,
    utilizationmultiplier = 1.0,
    whirlpooltempc = constants.whirlpool_temp,
    whirlpoolretention = constants.whirlpool_retention):
	if preboilvolumel is None:
		preboilvolumel = finalvolumel

	# hops see the kettle gravity, not the final diluted one
	boilgravity = gravity.calculate_preboilgravity(og,
	    finalvolumel, preboilvolumel)

	contributions = []
	for i, h in enumerate(hops):
		util = _util(h, boilgravity, utilizationmultiplier,
		    whirlpooltempc, whirlpoolretention)

		# mg of alpha acids isomerized per liter == IBU
		if finalvolumel > 0:
			ibu = (h.alphaacid / 100.0) * h.amountg * util \
			    * 1000.0 / finalvolumel
		else:
			ibu = 0
		contributions.append({
			'hop': h.namestr(i),
			'type': h.type,
			'contribution': max(0, ibu),
			'utilization': util,
		})

	return {
		'ibu': roundup(sum(c['contribution'] for c in contributions), 1),
		'contributions': contributions,
		'boilgravity': boilgravity,
	}

# bitterness units per gravity unit, the "how bitter does it taste"
# ratio
def bugu(ibu, og):
	gu = gravity.gravity_points(og)
	if gu <= 0:
		return 0
	return ibu / gu

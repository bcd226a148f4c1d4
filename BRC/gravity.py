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
# Gravity: original gravity from the grain bill, final gravity from
# yeast attenuation, and kettle gravity via conservation of points.
#
# The "points" bookkeeping is Palmer's: a fermentable with potential
# P (points per pound per gallon) gives P*lb*efficiency points, and
# the points divided by gallons are the thousandths above 1.000.
#

from collections import namedtuple

from BRC.units import Mass, Volume, Potential, _Mass, _Volume

class Fermentable(namedtuple('Fermentable',
    ['potential', 'amountkg', 'efficiency'])):
	__slots__ = ()

	# potential is either a Potential, or a plain number which is
	# then interpreted in the default yield unit of the calculation.
	# efficiency is a fraction, None means "use recipe default"
	def __new__(cls, potential, amountkg, efficiency = None):
		return super(Fermentable, cls).__new__(cls,
		    potential, float(amountkg), efficiency)

	def potential_ppg(self, defaultunit = Potential.PPG):
		p = self.potential
		if not isinstance(p, Potential):
			p = Potential(p, defaultunit)
		return p.valueas(Potential.PPG)

def gravity_points(sg):
	return (sg - 1) * 1000

def from_points(points):
	return 1 + points / 1000.0

def calculate_og(fermentables, batchsizel, defaultefficiency = 1.0,
    defaultyieldunit = Potential.PPG):
	gallons = _Volume(batchsizel).valueas(Volume.GALLON)
	if gallons <= 0:
		return 1.0

	points = 0
	for f in fermentables:
		eff = f.efficiency
		if eff is None:
			eff = defaultefficiency
		if eff <= 0 or f.amountkg <= 0:
			continue

		pounds = _Mass(f.amountkg).valueas(Mass.LB)
		points += f.potential_ppg(defaultyieldunit) * pounds * eff

	return from_points(points / gallons)

def calculate_fg(og, attenuationpercent):
	return 1 + (og - 1) * (1 - attenuationpercent / 100.0)

# yeast labs publish attenuation as a range.  we have no better idea
# than the middle of it
def average_attenuation(minpercent, maxpercent):
	return (minpercent + maxpercent) / 2.0

def calculate_gravity(fermentables, batchsizel, efficiency, attenuation,
    defaultyieldunit = Potential.PPG):
	og = calculate_og(fermentables, batchsizel, efficiency,
	    defaultyieldunit)
	return {
		'og': og,
		'fg': calculate_fg(og, attenuation),
	}

# the kettle has the same amount of extract in a larger volume before
# the boil, so:
#
#   preboil_points * preboil_volume = postboil_points * postboil_volume
#
def calculate_preboilgravity(postboilog, postboilvolumel, preboilvolumel):
	if preboilvolumel <= 0 or postboilvolumel <= 0:
		return postboilog

	postpoints = max(gravity_points(postboilog), 0)
	prepoints = postpoints * postboilvolumel / preboilvolumel
	return from_points(prepoints)

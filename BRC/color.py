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

from BRC import constants
from BRC.units import Color, Mass, Volume, _Mass, _Volume
from BRC.utils import roundup

class FermentableColor(namedtuple('FermentableColor', ['color', 'amountkg'])):
	__slots__ = ()

	# color is a Color, or a plain number which is then taken
	# to be in Lovibond, since that's what most datasheets use
	def __new__(cls, color, amountkg):
		if not isinstance(color, Color):
			color = Color(color, Color.LOVIBOND)
		return super(FermentableColor, cls).__new__(cls,
		    color, float(amountkg))

# malt color units, pounds times SRM per gallon
def mcu(fermentables, batchsizel):
	gallons = _Volume(batchsizel).valueas(Volume.GALLON)
	if gallons <= 0:
		return 0
	t = sum(_Mass(f.amountkg).valueas(Mass.LB) * f.color.valueas(Color.SRM)
	    for f in fermentables if f.amountkg > 0)
	return t / gallons

# Morey equation.  MCU is linear only for very pale beers, so it needs
# to be bent down to the measured SRM of actual beer.
def calculate_srm(fermentables, batchsizel):
	m = mcu(fermentables, batchsizel)
	if m <= 0:
		return 0
	srm = constants.morey_c * pow(m, constants.morey_exp)
	return roundup(srm, 1)

def srm_to_ebc(srm):
	return Color(srm, Color.SRM).valueas(Color.EBC)

_descriptions = [
	(2,	'Straw'),
	(4,	'Yellow'),
	(6,	'Gold'),
	(9,	'Amber'),
	(14,	'Deep amber/Light copper'),
	(18,	'Copper'),
	(24,	'Deep copper/Light brown'),
	(35,	'Brown'),
	(40,	'Dark brown'),
]

def color_description(srm):
	for limit, descr in _descriptions:
		if srm < limit:
			return descr
	return 'Very dark brown/Black'

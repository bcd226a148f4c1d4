#!/usr/bin/env python3

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

from BRC import parse
from BRC import priming
from BRC.units import Mass, Temperature, Volume, _Mass
from BRC.utils import PilotError
from BRC import constants

import getopt
import sys

def usage():
	sys.stderr.write('usage: ' + sys.argv[0] + ' [-s sugar]\n'
	    + '\tbeer_volume fermentation_temperature [co2_volumes]\n')
	sys.exit(1)

if __name__ == '__main__':
	opts, args = getopt.getopt(sys.argv[1:], 'hs:')

	sugar = priming.SUCROSE
	for o, a in opts:
		if o == '-s':
			sugar = a
		elif o == '-h':
			usage()

	if len(args) < 2 or len(args) > 3:
		usage()

	try:
		vol = parse.volume(args[0])
		temp = parse.temperature(args[1])
		vols = constants.co2_volumes
		if len(args) == 3:
			vols = parse.number(args[2])
		r = priming.calculate_primingsugar(vol.valueas(Volume.LITER),
		    vols, temp.valueas(Temperature.degC), sugar)
	except (PilotError, ValueError) as e:
		print('Pilot Error: ' + str(e))
		sys.exit(1)

	sugarmass = _Mass(r['sugar_amount_g'] / 1000.0)
	print(u'{:24}:{:>12}{:>12}'.format('Beer volume',
	    vol.stras(Volume.LITER), vol.stras(Volume.GALLON)))
	print(u'{:24}:{:>12}{:>12}'.format('Fermentation temperature',
	    temp.stras(Temperature.degC), temp.stras(Temperature.degF)))
	print(u'{:24}:{:>12.2f}'.format('Residual CO2 (vols)',
	    r['residual_co2']))
	print(u'{:24}:{:>12.2f}'.format('Target CO2 (vols)', r['co2_volumes']))
	print()
	print(u'{:24}:{:>12}{:>12}'.format(r['sugar_type'].capitalize(),
	    sugarmass.stras(Mass.G), sugarmass.stras(Mass.OZ)))

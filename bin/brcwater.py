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
from BRC import water
from BRC.units import Mass, Volume
from BRC.utils import PilotError

import getopt
import sys

def usage():
	sys.stderr.write('usage: ' + sys.argv[0] + ' [-b ion=ppm,...]'
	    + ' [-v volume]\n\tsalt=amount [salt=amount ...]\n')
	sys.stderr.write('salts:\n')
	for s in sorted(water.salts):
		sys.stderr.write('\t' + s + '\n')
	sys.exit(1)

def parsebase(input):
	base = {}
	for x in input.split(','):
		ion, ppm = parse.split(x, '=', str, parse.number)
		ion = ion.strip().lower()
		if ion not in water.ions:
			raise PilotError('invalid ion: ' + ion)
		base[ion] = ppm
	return water.IonProfile(**base)

if __name__ == '__main__':
	opts, args = getopt.getopt(sys.argv[1:], 'b:hv:')

	if len(args) < 1:
		usage()

	try:
		volume = Volume(1, Volume.LITER)
		base = water.distilled
		for o, a in opts:
			if o == '-v':
				volume = parse.volume(a)
			elif o == '-b':
				base = parsebase(a)
			elif o == '-h':
				usage()

		additions = []
		for a in args:
			name, amount = parse.split(a, '=', str, parse.mass)
			if water.findsalt(name) is None:
				raise PilotError('unknown water salt: ' + name)
			additions += water.expand_salt(name,
			    amount.valueas(Mass.G), volume.valueas(Volume.LITER))
		profile = water.calculate_waterprofile(base, additions)
	except (PilotError, ValueError) as e:
		print('Pilot Error: ' + str(e))
		sys.exit(1)

	for ion in water.ions:
		print(u'{:24}:{:>10.1f} ppm'.format(ion.capitalize(),
		    getattr(profile, ion)))
	print()
	print(u'{:24}:{:>10.2f}'.format('Cl:SO4',
	    water.cl_to_so4_ratio(profile)))
	print(u'{:24}:{:>10.1f}'.format('Residual alkalinity',
	    water.residual_alkalinity(profile)))
	print(u'{:24}:{:>10.2f}'.format('Mash pH (rough)',
	    water.estimate_mashph(profile)))
	print(u'{:24}: {:}'.format('Character',
	    water.waterprofile_description(profile)))

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

from BRC import abv
from BRC import gravity
from BRC import parse
from BRC.utils import PilotError

import getopt
import sys

def usage():
	sys.stderr.write('usage: ' + sys.argv[0] + ' [-m standard|advanced]\n'
	    + '\toriginal_gravity final_gravity|apparent_attenuation%\n')
	sys.exit(1)

if __name__ == '__main__':
	opts, args = getopt.getopt(sys.argv[1:], 'hm:')

	method = abv.ADVANCED
	for o, a in opts:
		if o == '-m':
			method = a
		elif o == '-h':
			usage()

	if len(args) != 2:
		usage()

	try:
		og = parse.number(args[0])
		if '%' in args[1]:
			fg = gravity.calculate_fg(og, parse.percent(args[1]))
		else:
			fg = parse.number(args[1])
		r = abv.calculate_abv(og, fg, method)
	except (PilotError, ValueError) as e:
		print('Pilot Error: ' + str(e))
		sys.exit(1)

	def printline(fname, value):
		print(u'{:28}:{:>12}'.format(fname, value))

	printline('Original Gravity', '{:.3f}'.format(og))
	printline('Final Gravity', '{:.3f}'.format(fg))
	print()
	printline('ABV (standard)', '{:.1f}%'.format(r['abv_standard']))
	printline('ABV (advanced)', '{:.1f}%'.format(r['abv_advanced']))
	printline('Alcohol', '{:.1f} g/l'.format(r['alcohol_content']))

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

from BRC.recipe import Recipe
from BRC.units import Color, Mass, Temperature
from BRC.utils import PilotError, notice
from BRC import sysparams
from BRC import parse
from BRC import water

import getopt
import io
import sys

def dofermentables(r, ferms):
	for f in ferms:
		if len(f) < 4 or len(f) > 5:
			raise PilotError('fermentable must be given as '
			    '[name, amount, potential, color, (efficiency)]: '
			    + str(f))
		name = f[0]
		amount = parse.mass(f[1])
		potential = parse.potential(f[2])
		if isinstance(f[3], (int, float)):
			col = Color(f[3], Color.LOVIBOND)
		else:
			col = parse.color(f[3])
		eff = None
		if len(f) == 5:
			eff = parse.percent(f[4]) / 100.0
		r.fermentable(name, amount, potential, col, eff)

def dohops(r, hops):
	for h in hops:
		if len(h) < 5 or len(h) > 6:
			raise PilotError('hop must be given as '
			    '[name, alpha acid, amount, type, time, (temp)]: '
			    + str(h))
		temp = None
		if len(h) == 6:
			temp = parse.temperature(h[5])
		r.hop(h[0], parse.percent(h[1]), parse.mass(h[2]),
		    h[3], parse.minutes(h[4]), temp)

def doyeast(r, y):
	if isinstance(y, str):
		raise PilotError('yeast needs an attenuation: '
		    '{name: ..., attenuation: 73%-77%}')
	lo, hi = parse.percentrange(y['attenuation'])
	r.yeast(y.get('name', 'unknown yeast'), lo, hi)

def dowater(r, w):
	for x in w:
		if x == 'base':
			base = w[x]
			for ion in base:
				if ion not in water.ions:
					raise PilotError('invalid ion: '
					    + str(ion))
			r.basewater(water.IonProfile(**base))
		elif x == 'salts':
			for s in w[x]:
				vol = None
				if len(s) > 2:
					vol = parse.volume(s[2])
				r.salt(s[0], parse.mass(s[1]).valueas(
				    Mass.G), vol)
		else:
			raise PilotError('invalid water field: ' + str(x))

def docarbonation(r, c):
	vols = c.get('volumes', None)
	if vols is not None:
		vols = parse.number(vols)
	r.carbonation(vols, c.get('sugar', None))

def processyaml(odict, data):
	# importing yaml is unfathomably slow, so do it only if we need it
	import yaml

	try:
		d = yaml.safe_load(data.read())
	except yaml.YAMLError as e:
		print('>> failed to parse yaml recipe:')
		print(e)
		sys.exit(1)
	if not isinstance(d, dict):
		raise PilotError('recipe must be a yaml mapping')

	def getdef(x):
		if x not in d:
			raise PilotError('mandatory element missing: ' + str(x))
		rv = d[x]
		del d[x]
		return rv

	def getopt_(x, parser):
		if x not in d:
			return None
		return parser(getdef(x))

	name = getdef('name')
	volume = parse.volume(getdef('volume'))
	boil = getopt_('boil', parse.volume)
	boiltime = getopt_('boiltime', parse.minutes)
	eff = getopt_('efficiency', parse.percent)
	hu = getopt_('hop_utilization', parse.number)
	temp = getopt_('fermentation_temp', parse.temperature)

	applyparams(odict)

	r = Recipe(name, volume, boil, eff,
	    boiltime if boiltime is not None else 60,
	    hu, temp.valueas(Temperature.degC) if temp is not None else None)

	# hops go after yeast & water so that warnings come out in
	# a sensible order
	handlers = [
		('yeast',		doyeast),
		('fermentables',	dofermentables),
		('water',		dowater),
		('hops',		dohops),
		('carbonation',		docarbonation),
	]
	for p, fun in handlers:
		if p in d:
			fun(r, getdef(p))

	for p in d:
		raise PilotError('invalid recipe field: ' + str(p))

	return r

def applyparams(odict):
	sysparams.processdefaults()
	for f in odict.get('brcparamfiles', []):
		sysparams.processfile(f)
	for pl in odict.get('brcparams', []):
		sysparams.processline(pl)

def usage():
	sys.stderr.write('usage: ' + sys.argv[0] + ' [-c]\n'
	    + '\t[-p paramsfile] [-P param=value] recipefile\n')
	sys.exit(1)

def processopts(opts):
	odict = {}
	for o, a in opts:
		if o == '-h':
			usage()

		elif o == '-p':
			odict.setdefault('brcparamfiles', []).append(a)

		elif o == '-P':
			odict.setdefault('brcparams', []).append(a)

	return odict

if __name__ == '__main__':
	opts, args = getopt.getopt(sys.argv[1:], 'chp:P:')
	if len(args) > 1:
		usage()

	try:
		odict = processopts(opts)
		flags = [x[0] for x in opts]
		with io.open(args[0], "r", encoding='utf-8') \
		    if (len(args) > 0 and args[0] != "-") \
		    else sys.stdin as data:
			if data is sys.stdin:
				notice('Reading recipe from stdin ...\n')
			r = processyaml(odict, data)
		results = r.calculate()
		if '-c' in flags:
			r.printcsv(results)
		else:
			from BRC import output_text
			output_text.printit(r, results)
	except PilotError as pe:
		print('Pilot Error: ' + str(pe))
		sys.exit(1)
	except ValueError as e:
		print('Pilot Error: ' + str(e))
		sys.exit(1)
	except IOError as e:
		print(e)
		sys.exit(1)
	sys.exit(0)

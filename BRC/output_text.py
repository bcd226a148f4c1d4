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

from BRC.units import Mass, Potential, _Mass, _Volume
from BRC.utils import prtsep as _prtsep
from BRC import water

def _printheader(recipe, results):
	_prtsep()
	print('{:22}{:}'.format('Name:', recipe.name))
	print('{:22}{:}'.format('Yeast:', '{:} ({:.1f}% attenuation)'
	    .format(recipe.yeastname, results['attenuation'])))
	print('{:22}{:}'.format('Batch / boil volume:', '{:} / {:}'
	    .format(str(_Volume(recipe.batchsizel)),
	      str(_Volume(recipe.boilsizel)))))
	print('{:22}{:}'.format('Boil time:',
	    '{:.0f}min'.format(recipe.boiltimemin)))
	print('{:22}{:}'.format('Efficiency:',
	    '{:.0f}%'.format(results['efficiency'])))
	_prtsep()

def _printstats(results):
	abvres = results['abv']
	fmtstr = '{:22}{:>12}'
	print(fmtstr.format('OG', '{:.3f}'.format(results['og'])))
	print(fmtstr.format('FG', '{:.3f}'.format(results['fg'])))
	print(fmtstr.format('ABV (' + abvres['method'] + ')',
	    '{:.1f}%'.format(abvres['abv'])))
	print(fmtstr.format('ABV (standard)',
	    '{:.1f}%'.format(abvres['abv_standard'])))
	print(fmtstr.format('Alcohol', '{:.1f} g/l'.format(
	    abvres['alcohol_content'])))
	print(fmtstr.format('IBU', '{:.1f}'.format(results['ibu']['ibu'])))
	print(fmtstr.format('BU:GU', '{:.2f}'.format(results['bugu'])))
	print(fmtstr.format('Color', '{:.1f} SRM / {:.0f} EBC'.format(
	    results['srm'], results['ebc'])) + '  ' + results['color'])

def _printfermentables(recipe):
	fmtstr = '{:34}{:>12}{:>16}{:>14}'
	print(fmtstr.format('Fermentables', 'amount', 'potential', 'color'))
	_prtsep()
	for name, f, c in recipe.ferms:
		p = f.potential
		if not isinstance(p, Potential):
			p = Potential(p, Potential.PPG)
		print(fmtstr.format(name, str(_Mass(f.amountkg)), str(p),
		    str(c.color)))
	_prtsep()

def _printhops(results):
	fmtstr = '{:34}{:>12}{:>16}{:>14}'
	ibures = results['ibu']
	print(fmtstr.format('Hops', 'type', 'utilization', 'IBU'))
	_prtsep()
	for c in ibures['contributions']:
		print(fmtstr.format(c['hop'], c['type'],
		    '{:.1f}%'.format(100*c['utilization']),
		    '{:.1f}'.format(c['contribution'])))
	_prtsep()
	print('Kettle gravity for hop utilization: {:.3f}'.format(
	    ibures['boilgravity']))

def _printwater(results):
	w = results['water']
	p = w['profile']
	fmtstr = '{:>12}' * len(water.ions)
	print(fmtstr.format(*[x.capitalize() for x in water.ions]))
	print(fmtstr.format(*['{:.1f}'.format(getattr(p, x))
	    for x in water.ions]))
	print()
	if w['cl_so4'] == float('inf'):
		ratio = 'n/a'
	else:
		ratio = '{:.2f}'.format(w['cl_so4'])
	print('{:22}{:}'.format('Cl:SO4', ratio + ' (' + w['description']
	    + ')'))
	print('{:22}{:.2f} (estimate)'.format('Mash pH', w['mash_ph']))
	wv = results['water_volumes']
	print('{:22}{:} / {:}'.format('Mash / sparge water',
	    str(_Volume(wv['mash'])), str(_Volume(wv['sparge']))))

def _printpriming(results):
	pr = results['priming']
	m = Mass(pr['sugar_amount_g'], Mass.G)
	print('{:22}{:} of {:} for {:.1f} volumes ({:.2f} residual)'.format(
	    'Priming', str(m), pr['sugar_type'], pr['co2_volumes'],
	    pr['residual_co2']))

def printit(recipe, results):
	_printheader(recipe, results)
	_printstats(results)
	print()
	_printfermentables(recipe)
	print()
	_printhops(results)
	print()
	_printwater(results)
	print()
	_printpriming(results)

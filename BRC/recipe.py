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
# Recipe: collects the ingredients and process parameters of one
# recipe, and runs them through all of the calculators.  Nothing is
# remembered between calculate() calls, so it's fine to poke the
# recipe and calculate again.
#

from BRC import abv, color, gravity, hop, priming, water
from BRC.getparam import getparam
from BRC.units import Color, Mass, Volume, Potential, Temperature
from BRC.utils import PilotError, checktype, roundup, warn

from BRC import sysparams

class Recipe:
	def __init__(self, name, batchsizel, boilsizel = None,
	    efficiency = None, boiltimemin = 60, hoputilization = None,
	    fermentationtempc = None):
		if batchsizel <= 0:
			raise PilotError('batch size must be positive')

		self.name = name
		self.batchsizel = float(batchsizel)
		if boilsizel is None:
			boilsizel = batchsizel
		self.boilsizel = float(boilsizel)
		self.boiltimemin = boiltimemin

		# None means "whatever the system parameter says at
		# calculation time"
		self.efficiency = efficiency
		self.hoputilization = hoputilization
		self.fermentationtempc = fermentationtempc

		self.ferms = []
		self.hops = []
		self.salts = []
		self.yeastname = None
		self.attenuation = None
		self.water = water.distilled
		self.co2volumes = None
		self.sugartype = None

	#
	# user interfaces
	#

	def fermentable(self, name, amountkg, potential, colorvalue = 0,
	    efficiency = None):
		if isinstance(amountkg, Volume):
			raise PilotError('fermentable amount must be a mass')
		if isinstance(amountkg, Mass):
			amountkg = amountkg.valueas(Mass.KG)
		if not isinstance(colorvalue, Color):
			colorvalue = Color(colorvalue, Color.LOVIBOND)
		if not isinstance(potential, Potential):
			potential = Potential(potential, Potential.PPG)

		f = gravity.Fermentable(potential, amountkg, efficiency)
		c = color.FermentableColor(colorvalue, amountkg)
		self.ferms.append((name, f, c))

	def hop(self, name, alphaacid, amountg, type, timemin,
	    temperaturec = None):
		if isinstance(amountg, Mass):
			amountg = amountg.valueas(Mass.G)
		if isinstance(temperaturec, Temperature):
			temperaturec = temperaturec.valueas(Temperature.degC)

		h = hop.Hop(alphaacid, amountg, timemin, type,
		    temperaturec, name)
		if h.type == hop.Hop.BOIL and h.timemin > self.boiltimemin:
			warn('hop ' + h.namestr(len(self.hops)) + ' boils for '
			    + str(h.timemin) + 'min, longer than the '
			    + str(self.boiltimemin) + 'min boil\n')
		self.hops.append(h)

	def yeast(self, name, attenuationmin, attenuationmax = None):
		if attenuationmax is None:
			attenuationmax = attenuationmin
		self.yeastname = name
		self.attenuation = gravity.average_attenuation(attenuationmin,
		    attenuationmax)

	# volume None means the salt goes into the whole batch
	def salt(self, name, amountg, volumel = None):
		if water.findsalt(name) is None:
			raise PilotError('unknown water salt: ' + str(name))
		self.salts.append((name, float(amountg), volumel))

	def basewater(self, profile):
		checktype(profile, water.IonProfile)
		self.water = profile

	def carbonation(self, volumes = None, sugartype = None):
		if sugartype is not None:
			sugartype = priming.findsugar(sugartype)
		self.co2volumes = volumes
		self.sugartype = sugartype

	#
	# calculations
	#

	def _param(self, value, param):
		if value is not None:
			return value
		return getparam(param)

	def _water_volumes(self):
		vol, mass = getparam('grain_absorption')
		absorp = vol.valueas(Volume.LITER) / mass.valueas(Mass.KG)

		grainkg = sum(f.amountkg for _, f, _ in self.ferms)
		mash = grainkg * absorp
		sparge = max(self.boilsizel - mash, 0)
		return {
			'mash': roundup(mash, 1),
			'sparge': roundup(sparge, 1),
		}

	def _dowater(self):
		additions = []
		for name, amount, volumel in self.salts:
			if volumel is None:
				volumel = self.batchsizel
			additions += water.expand_salt(name, amount, volumel)

		profile = water.calculate_waterprofile(self.water, additions)
		return {
			'profile': profile,
			'cl_so4': water.cl_to_so4_ratio(profile),
			'description': water.waterprofile_description(profile),
			'mash_ph': water.estimate_mashph(profile),
		}

	def _checkinputs(self):
		if self.attenuation is None:
			raise PilotError('recipe ' + str(self.name)
			    + ' needs a yeast (attenuation)')

	def calculate(self):
		sysparams.checkset()
		self._checkinputs()

		efficiency = self._param(self.efficiency, 'efficiency')
		hu = self._param(self.hoputilization, 'hop_utilization')
		fermtemp = self._param(self.fermentationtempc,
		    'fermentation_temp')
		if isinstance(fermtemp, Temperature):
			fermtemp = fermtemp.valueas(Temperature.degC)
		co2 = self._param(self.co2volumes, 'co2_volumes')
		sugar = self._param(self.sugartype, 'priming_sugar')

		ferms = [f for _, f, _ in self.ferms]
		colors = [c for _, _, c in self.ferms]

		grav = gravity.calculate_gravity(ferms, self.batchsizel,
		    efficiency / 100.0, self.attenuation)
		og, fg = grav['og'], grav['fg']

		abvres = abv.calculate_abv(og, fg, getparam('abv_method'))
		wptemp = getparam('whirlpool_temp').valueas(Temperature.degC)
		wpretention = getparam('whirlpool_retention') / 100.0
		ibures = hop.calculate_ibu(self.hops, self.batchsizel, og,
		    preboilvolumel = self.boilsizel,
		    utilizationmultiplier = hu,
		    whirlpooltempc = wptemp,
		    whirlpoolretention = wpretention)
		srm = color.calculate_srm(colors, self.batchsizel)

		results = {}
		results['og'] = roundup(og, 3)
		results['fg'] = roundup(fg, 3)
		results['attenuation'] = self.attenuation
		results['efficiency'] = efficiency
		results['abv'] = abvres
		results['total_alcohol'] = abv.total_alcohol(abvres,
		    self.batchsizel)
		results['ibu'] = ibures
		results['bugu'] = roundup(hop.bugu(ibures['ibu'], og), 2)
		results['srm'] = srm
		results['ebc'] = roundup(color.srm_to_ebc(srm), 1)
		results['color'] = color.color_description(srm)
		results['water'] = self._dowater()
		results['water_volumes'] = self._water_volumes()
		results['priming'] = priming.calculate_primingsugar(
		    self.batchsizel, co2, fermtemp, sugar)

		return results

	# dump the resolved recipe and the main numbers as pipe-separated
	# values.  not meant to be pretty, meant to be grepped and
	# diffed.
	def printcsv(self, results = None):
		if results is None:
			results = self.calculate()
		print('brcdata|1')
		print('# recipe|name|yeast|batch|boil|boiltime')
		print('recipe|{:}|{:}|{:}|{:}|{:}'.format(self.name,
		    self.yeastname, self.batchsizel, self.boilsizel,
		    self.boiltimemin))

		print('# sysparams')
		print('sysparams|' + sysparams.getparamshorts())

		print('# fermentable|name|kg|ppg|ebc|efficiency')
		for name, f, c in self.ferms:
			print('fermentable|{:}|{:}|{:.1f}|{:.1f}|{:}'.format(
			    name, f.amountkg, f.potential_ppg(),
			    c.color.valueas(Color.EBC), f.efficiency))

		print('# hop|name|aa%|g|type|min|temp')
		for h in self.hops:
			print('hop|{:}|{:.1f}|{:}|{:}|{:}|{:}'.format(h.name,
			    h.alphaacid, h.amountg, h.type, h.timemin,
			    h.temperaturec))

		print('# stats|og|fg|abv|ibu|srm')
		print('stats|{:.3f}|{:.3f}|{:.1f}|{:.1f}|{:.1f}'.format(
		    results['og'], results['fg'], results['abv']['abv'],
		    results['ibu']['ibu'], results['srm']))

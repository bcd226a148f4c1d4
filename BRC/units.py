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

from BRC.utils import PilotError

from BRC import constants

from BRC.getparam import getparam

def _checksystem(system):
	if system != 'metric' and system != 'us':
		raise PilotError('invalid unit system: ' + system)

class BRCUnit(float):
	def __new__(cls, value, unit):
		rv = super(BRCUnit, cls).__new__(cls, value)
		rv.inputunit = unit
		return rv

	def __init__(self, value, unit):
		super(BRCUnit, self).__init__()

class Volume(BRCUnit):
	MILLILITER	= object()
	LITER		= object()
	QUART		= object()
	GALLON		= object()

	def __new__(cls, value, unit):
		if unit is Volume.GALLON:
			value = constants.literspergallon * value
		elif unit is Volume.QUART:
			value = constants.litersperquart * value
		elif unit is Volume.MILLILITER:
			value = value / 1000.0
		elif unit is not Volume.LITER:
			raise PilotError('invalid Volume unit')

		return super(Volume, cls).__new__(cls, value, unit)

	def __str__(self):
		return self.stras_system(getparam('units_output'))

	def stras(self, which):
		if which is self.LITER:
			v = self
			sym = 'l'
		elif which is self.MILLILITER:
			return '{:.0f}ml'.format(self.valueas(self.MILLILITER))
		elif which is self.QUART:
			v = self.valueas(self.QUART)
			sym = 'qt'
		elif which is self.GALLON:
			v = self.valueas(self.GALLON)
			sym = 'gal'
		else:
			raise PilotError('unsupported Volume stras unit')
		return '{:.1f}{:s}'.format(v, sym)

	def stras_system(self, system):
		_checksystem(system)
		if system == 'metric':
			return self.stras(self.LITER)
		else:
			if self.valueas(self.GALLON) < 1:
				return self.stras(self.QUART)
			return self.stras(self.GALLON)

	def valueas(self, unit):
		if unit is Volume.LITER:
			return float(self)
		elif unit is Volume.MILLILITER:
			return self * 1000.0
		elif unit is Volume.QUART:
			return self / constants.litersperquart
		elif unit is Volume.GALLON:
			return self * constants.gallonsperliter
		else:
			raise PilotError('invalid Volume unit')

class Temperature(BRCUnit):
	degC	= object()
	degF	= object()
	K	= object()

	def __new__(cls, value, unit):
		if unit is Temperature.degF:
			value = Temperature.FtoC(value)
		elif unit is Temperature.K:
			value = value + constants.absolute_zero_c
		elif unit is not Temperature.degC:
			raise PilotError('invalid Temperature unit')

		return super(Temperature, cls).__new__(cls, value, unit)

	def stras_system(self, system):
		_checksystem(system)
		if system == 'metric':
			return self.stras(self.degC)
		else:
			return self.stras(self.degF)

	def __str__(self):
		return self.stras_system(getparam('units_output'))

	def valueas(self, unit):
		if unit is Temperature.degC:
			return float(self)
		if unit is Temperature.degF:
			return self.CtoF(self)
		elif unit is Temperature.K:
			return self - constants.absolute_zero_c
		else:
			raise PilotError('invalid Temperature unit')

	def stras(self, which):
		if which is self.K:
			return '{:.2f}'.format(self - constants.absolute_zero_c)

		if which is self.degC:
			t = self
			sym = 'C'
		elif which is self.degF:
			t = Temperature.CtoF(self)
			sym = 'F'
		else:
			raise PilotError('invalid temperature unit')
		return '{:.1f}'.format(t) + chr(0x00b0) + sym

	@staticmethod
	def FtoC(temp):
		return (temp-32) / 1.8

	@staticmethod
	def CtoF(temp):
		return 1.8*temp + 32

class Mass(BRCUnit):
	MG	= object()
	G	= object()
	KG	= object()
	OZ	= object()
	LB	= object()
	def __new__(cls, value, unit):
		if unit is Mass.G:
			value = value / 1000.0
		elif unit is Mass.MG:
			value = value / (1000.0 * 1000.0)
		elif unit is Mass.LB:
			value = value / constants.poundsperkg
		elif unit is Mass.OZ:
			value = constants.gramsperounce * value / 1000.0
		elif unit is not Mass.KG:
			raise PilotError('invalid Mass unit')

		self = super(Mass, cls).__new__(cls, value, unit)
		self.small = unit is Mass.OZ or unit is Mass.G
		return self

	def valueas(self, unit):
		if unit is Mass.G:
			return self * 1000.0
		elif unit is Mass.KG:
			return float(self)
		elif unit is Mass.MG:
			return self * 1000.0 * 1000.0
		elif unit is Mass.LB:
			return self * constants.poundsperkg
		elif unit is Mass.OZ:
			return (self*1000.0) / constants.gramsperounce
		else:
			raise PilotError('invalid Mass unit')

	def stras(self, unit):
		if unit is self.G:
			m = 1000.0 * self
			if m < 100:
				dec = '1'
			else:
				dec = '0'
			fmt = '{:.' + dec + 'f}'
			return fmt.format(m) + ' g'
		elif unit is self.KG:
			return '{:.2f}'.format(self) + ' kg'
		elif unit is self.OZ:
			return '{:.2f}'.format(self.valueas(self.OZ)) + ' oz'
		elif unit is self.LB:
			return '{:.2f}'.format(self.valueas(self.LB)) + ' lb'
		raise PilotError('unsupported Mass stras unit')

	# output either in "small" units (g/oz) or "large" ones,
	# depending on input unit and size
	def stras_system(self, system):
		_checksystem(system)
		if system == 'metric':
			if self.small or self < 1.0:
				return self.stras(Mass.G)
			return self.stras(Mass.KG)
		else:
			if self.small or self.valueas(Mass.LB) < 1.0:
				return self.stras(Mass.OZ)
			return self.stras(Mass.LB)

	def __str__(self):
		return self.stras_system(getparam('units_output'))

# Color is stored internally as EBC, regardless of what the maltster
# happened to report.  Conversions are the linear ones, so that
# going L -> EBC -> SRM and back gives the number you put in.
class Color(float):
	EBC		= object()
	SRM		= object()
	LOVIBOND	= object()

	def __new__(cls, value, unit):
		if unit is Color.SRM:
			value = Color.SRMtoEBC(value)
		elif unit is Color.LOVIBOND:
			value = Color.LtoEBC(value)
		elif unit is not Color.EBC:
			raise PilotError('invalid Color unit')

		return super(Color, cls).__new__(cls, value)

	def valueas(self, which):
		if which is Color.EBC:
			return float(self)
		elif which is Color.SRM:
			return Color.EBCtoSRM(self)
		elif which is Color.LOVIBOND:
			return Color.EBCtoL(self)
		else:
			raise PilotError('invalid Color unit')

	def stras(self, which):
		if which is Color.EBC:
			return '{:.0f} EBC'.format(self)
		elif which is Color.SRM:
			return '{:.1f} SRM'.format(self.valueas(Color.SRM))
		elif which is Color.LOVIBOND:
			return '{:.0f} L'.format(self.valueas(Color.LOVIBOND))
		raise PilotError('invalid Color unit')

	def __str__(self):
		if getparam('units_output') == 'us':
			return self.stras(self.SRM)
		return self.stras(self.EBC)

	@staticmethod
	def SRMtoEBC(v):
		return v * constants.ebcpersrm

	@staticmethod
	def EBCtoSRM(v):
		return v / constants.ebcpersrm

	@staticmethod
	def LtoEBC(v):
		return v * constants.ebcperlovibond

	@staticmethod
	def EBCtoL(v):
		return v / constants.ebcperlovibond

# extract potential of a fermentable, i.e. how many gravity points
# a unit mass of it gives in a unit volume of wort.  stored as PPG.
class Potential(float):
	PPG		= object()	# points / pound / US gallon
	PKL		= object()	# points / kilogram / liter

	def __new__(cls, value, unit):
		if unit is Potential.PKL:
			value = value * constants.ppgperpkl
		elif unit is not Potential.PPG:
			raise PilotError('invalid Potential unit')

		return super(Potential, cls).__new__(cls, value)

	def valueas(self, which):
		if which is Potential.PPG:
			return float(self)
		elif which is Potential.PKL:
			return self * constants.pklperppg
		else:
			raise PilotError('invalid Potential unit')

	def stras(self, which):
		if which is Potential.PPG:
			return '{:.1f} PPG'.format(self)
		elif which is Potential.PKL:
			return '{:.1f} PKL'.format(self.valueas(Potential.PKL))
		raise PilotError('invalid Potential unit')

	def __str__(self):
		if getparam('units_output') == 'us':
			return self.stras(self.PPG)
		return self.stras(self.PKL)

# Internally, we always use liters for volume and kilograms for mass.
# So, define internal names to avoid having to type the units every
# time.
class _Volume(Volume):
	def __new__(cls, value):
		return super(_Volume, cls).__new__(cls, value, Volume.LITER)
	def __init__(self, value):
		super(_Volume, self).__init__(value, Volume.LITER)

class _Mass(Mass):
	def __new__(cls, value):
		return super(_Mass, cls).__new__(cls, value, Mass.KG)
	def __init__(self, value):
		super(_Mass, self).__init__(value, Mass.KG)

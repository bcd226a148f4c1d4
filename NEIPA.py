from BRC.recipe import Recipe
from BRC.hop import Hop
from BRC import output_text
from BRC import water

from BRC.units import Color, Mass, Potential, Temperature

M = Mass
P = Potential

if __name__ == '__main__':
	r = Recipe('NEIPA', 10, boilsizel = 12, efficiency = 75,
	    hoputilization = 0.88)
	r.yeast('London Ale III', 71, 79)

	r.fermentable('Pale ale malt',	M(2.5, M.KG),	P(36, P.PPG),	2)
	r.fermentable('Wheat malt',	M(300, M.G),	P(35, P.PPG),	9)
	r.fermentable('Oat malt',	M(300, M.G),	P(36, P.PPG),	2)
	r.fermentable('Crystal 60',	M(300, M.G),	P(32, P.PPG),
	    Color(60, Color.LOVIBOND))

	r.hop('Magnum',	14,	M(15, M.G),	Hop.BOIL,	60)
	r.hop('Citra',	12,	M(25, M.G),	Hop.WHIRLPOOL,	5,
	    Temperature(85, Temperature.degC))
	r.hop('Mosaic',	12,	M(30, M.G),	Hop.DRYHOP,	0)

	r.basewater(water.IonProfile(ca = 20, mg = 5, na = 10,
	    cl = 20, so4 = 15, hco3 = 40))
	r.salt('Calcium Chloride', 3)
	r.salt('Gypsum', 1)

	r.carbonation(2.5, 'dextrose')

	output_text.printit(r, r.calculate())

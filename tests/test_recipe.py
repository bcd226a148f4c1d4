import pytest

from BRC import output_text
from BRC import sysparams
from BRC import water
from BRC.hop import Hop
from BRC.recipe import Recipe
from BRC.units import Color, Mass, Potential, Temperature, Volume
from BRC.utils import PilotError

def neipa():
	r = Recipe('NEIPA', 10, boilsizel = 12, efficiency = 75,
	    hoputilization = 0.88)
	r.yeast('London Ale III', 73, 77)
	r.fermentable('Pale ale malt', 2.5, 36, 2)
	r.fermentable('Wheat malt', 0.3, 35, 9)
	r.fermentable('Oat malt', 0.3, 36, 2)
	r.fermentable('Crystal 60', 0.3, 32, 60)
	r.hop('Magnum', 14, 15, Hop.BOIL, 60)
	r.hop('Citra', 12, 25, Hop.WHIRLPOOL, 5, 85)
	r.hop('Mosaic', 12, 30, Hop.DRYHOP, 0)
	return r

def test_neipa():
	res = neipa().calculate()
	assert res['og'] == pytest.approx(1.076, rel=0.02)
	assert res['og'] == 1.076
	assert res['fg'] == 1.019
	assert res['attenuation'] == 75
	assert res['ibu']['ibu'] == pytest.approx(43.0, abs=0.1)
	assert res['ibu']['boilgravity'] == pytest.approx(1.0631, abs=1e-4)
	assert res['srm'] == pytest.approx(15.2)
	assert res['ebc'] == pytest.approx(29.9)
	assert res['color'] == 'Copper'
	assert res['abv']['abv'] == pytest.approx(7.9)
	assert res['abv']['abv_standard'] == pytest.approx(7.4)
	assert res['bugu'] == pytest.approx(0.57)
	assert res['total_alcohol'] == pytest.approx(568)
	assert res['priming']['sugar_amount_g'] == pytest.approx(47.0)
	assert res['water_volumes'] == {'mash': 3.4, 'sparge': 8.6}

def test_neipa_hops():
	res = neipa().calculate()
	c = res['ibu']['contributions']
	assert [x['hop'] for x in c] == ['Magnum', 'Citra', 'Mosaic']
	assert c[0]['contribution'] == pytest.approx(37.9, abs=0.05)
	assert c[1]['contribution'] == pytest.approx(5.06, abs=0.01)
	assert c[2]['contribution'] == 0

def test_units_in():
	r1 = neipa()
	r2 = Recipe('NEIPA', Volume(10, Volume.LITER),
	    boilsizel = Volume(12, Volume.LITER), efficiency = 75,
	    hoputilization = 0.88)
	r2.yeast('London Ale III', 73, 77)
	r2.fermentable('Pale ale malt', Mass(2.5, Mass.KG),
	    Potential(36, Potential.PPG), Color(2, Color.LOVIBOND))
	r2.fermentable('Wheat malt', Mass(300, Mass.G), 35, 9)
	r2.fermentable('Oat malt', Mass(300, Mass.G), 36, 2)
	r2.fermentable('Crystal 60', Mass(300, Mass.G), 32,
	    Color(60 * 2.65, Color.EBC))
	r2.hop('Magnum', 14, Mass(15, Mass.G), Hop.BOIL, 60)
	r2.hop('Citra', 12, Mass(25, Mass.G), Hop.WHIRLPOOL, 5,
	    Temperature(185, Temperature.degF))
	r2.hop('Mosaic', 12, Mass(30, Mass.G), Hop.DRYHOP, 0)

	a = r1.calculate()
	b = r2.calculate()
	for x in ['og', 'fg', 'srm', 'ebc', 'bugu']:
		assert a[x] == pytest.approx(b[x])
	assert a['ibu']['ibu'] == pytest.approx(b['ibu']['ibu'])

def test_recalculate():
	r = neipa()
	a = r.calculate()
	b = r.calculate()
	assert a == b
	assert a is not b

	r.fermentable('Sugar', 0.5, 46, 0)
	assert r.calculate()['og'] > a['og']

def test_efficiency_sysparam():
	r = Recipe('x', 10)
	r.yeast('y', 75)
	r.fermentable('malt', 2, 36, 2)
	dflt = r.calculate()['og']
	sysparams.setparam('efficiency', '60%')
	res = r.calculate()
	assert res['efficiency'] == 60
	assert res['og'] < dflt

def test_abv_method_sysparam():
	r = neipa()
	sysparams.setparam('abv_method', 'standard')
	res = r.calculate()
	assert res['abv']['method'] == 'standard'
	assert res['abv']['abv'] == res['abv']['abv_standard']

def test_carbonation():
	r = neipa()
	sucrose = r.calculate()['priming']
	r.carbonation(sugartype = 'corn sugar')
	dextrose = r.calculate()['priming']
	assert dextrose['sugar_type'] == 'dextrose'
	assert dextrose['sugar_amount_g'] > sucrose['sugar_amount_g']
	r.carbonation(3.0, 'sucrose')
	assert r.calculate()['priming']['sugar_amount_g'] \
	    > sucrose['sugar_amount_g']
	with pytest.raises(PilotError):
		r.carbonation(2.4, 'maple syrup')

def test_fermentation_temp():
	warm = Recipe('x', 10, fermentationtempc = 25)
	warm.yeast('y', 75)
	cold = Recipe('x', 10, fermentationtempc = 10)
	cold.yeast('y', 75)
	assert warm.calculate()['priming']['sugar_amount_g'] \
	    > cold.calculate()['priming']['sugar_amount_g']

def test_water():
	r = neipa()
	r.basewater(water.IonProfile(ca = 10, cl = 10, so4 = 10))
	r.salt('Calcium Chloride', 2)
	r.salt('Gypsum', 1, 5)
	w = r.calculate()['water']
	assert w['profile'].ca == pytest.approx(10 + 54.5 + 46.6, abs=0.1)
	assert w['profile'].cl == pytest.approx(10 + 96.5, abs=0.1)
	assert w['profile'].so4 == pytest.approx(10 + 111.5, abs=0.1)
	assert w['description'] == 'Crisp, dry'

def test_distilled_water():
	w = neipa().calculate()['water']
	assert w['profile'] == water.distilled
	assert w['mash_ph'] == pytest.approx(2.2)

def test_unknown_salt():
	with pytest.raises(PilotError):
		neipa().salt('Unobtainium', 1)

def test_basewater_type():
	with pytest.raises(PilotError):
		neipa().basewater({'ca': 10})

def test_no_yeast():
	r = Recipe('x', 10)
	r.fermentable('malt', 2, 36, 2)
	with pytest.raises(PilotError):
		r.calculate()

def test_batch_size():
	with pytest.raises(PilotError):
		Recipe('x', 0)

def test_fermentable_volume():
	with pytest.raises(PilotError):
		neipa().fermentable('malt', Volume(1, Volume.LITER), 36)

def test_long_boil_warning(capsys):
	r = Recipe('x', 10, boiltimemin = 60)
	r.hop('Magnum', 14, 15, Hop.BOIL, 90)
	assert 'Magnum' in capsys.readouterr().err

def test_long_boil_warning_unnamed(capsys):
	r = Recipe('x', 10, boiltimemin = 30)
	r.hop(None, 10, 20, Hop.BOIL, 60)
	assert 'Hop 1' in capsys.readouterr().err
	assert r.hops[0].name is None
	r.yeast('y', 75)
	res = r.calculate()
	assert res['ibu']['contributions'][0]['hop'] == 'Hop 1'

def test_bad_hop_type():
	with pytest.raises(PilotError):
		neipa().hop('Magnum', 14, 15, 'first wort', 60)

def test_printcsv(capsys):
	neipa().printcsv()
	out = capsys.readouterr().out
	assert out.startswith('brcdata|1')
	assert 'stats|1.076|1.019|7.9|43.0|15.2' in out
	assert 'hop|Citra|12.0|25.0|whirlpool|5.0|85' in out

def test_printit(capsys):
	r = neipa()
	output_text.printit(r, r.calculate())
	out = capsys.readouterr().out
	assert 'NEIPA' in out
	assert 'Crystal 60' in out
	assert 'Copper' in out

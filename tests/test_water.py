import math
import pytest

from BRC import water
from BRC.water import IonProfile, SaltAddition, calculate_waterprofile, \
    expand_salt
from BRC.utils import PilotError

base = IonProfile(ca = 20.04, mg = 5, na = 10, cl = 20, so4 = 15, hco3 = 40)

def test_no_additions():
	r = calculate_waterprofile(base, [])
	assert r == IonProfile(20.0, 5, 10, 20, 15, 40)

def test_gypsum():
	r = calculate_waterprofile(water.distilled,
	    expand_salt('Gypsum', 1, 1))
	assert r.ca == pytest.approx(232.8)
	assert r.so4 == pytest.approx(557.7)
	assert r.cl == 0

def test_volume():
	r = calculate_waterprofile(water.distilled,
	    expand_salt('Calcium Chloride', 5, 20))
	assert r.ca == pytest.approx(68.15, abs=0.06)
	assert r.cl == pytest.approx(120.575, abs=0.06)

def test_zero_volume_treated_as_one_liter():
	r0 = calculate_waterprofile(water.distilled,
	    expand_salt('Table Salt', 1, 0))
	r1 = calculate_waterprofile(water.distilled,
	    expand_salt('Table Salt', 1, 1))
	assert r0 == r1

def test_order_independence():
	a = expand_salt('Epsom Salt', 2, 20)
	b = expand_salt('Baking Soda', 1.5, 20)
	assert calculate_waterprofile(base, a + b) \
	    == calculate_waterprofile(base, b + a)

def test_name_variants():
	for name in ['Gypsum (CaSO4' + chr(0x00b7) + '2H2O)', 'Gypsum (CaSO4)',
	    'caso4', ' GYPSUM ']:
		assert water.findsalt(name) == 'Gypsum'
	a = calculate_waterprofile(water.distilled,
	    expand_salt('Calcium Chloride (CaCl2)', 1, 10))
	b = calculate_waterprofile(water.distilled,
	    expand_salt('Calcium Chloride (CaCl2' + chr(0x00b7) + '2H2O)',
	    1, 10))
	assert a == b

def test_unknown_salt_skipped(capsys):
	assert expand_salt('Unobtainium', 5, 10) == []
	r = calculate_waterprofile(base,
	    [SaltAddition('Unobtainium', 5, 'ca', 10)])
	assert r == calculate_waterprofile(base, [])
	assert 'Unobtainium' in capsys.readouterr().err

def test_floor_at_zero():
	r = calculate_waterprofile(IonProfile(ca = 10),
	    [SaltAddition('Gypsum', -1, 'ca', 1)])
	assert r.ca == 0

def test_invalid_ion():
	with pytest.raises(PilotError):
		SaltAddition('Gypsum', 1, 'fe', 1)

def test_wrong_input_type():
	with pytest.raises(PilotError):
		calculate_waterprofile({'ca': 10}, [])

def test_cl_so4():
	assert water.cl_to_so4_ratio(IonProfile(cl = 100)) == math.inf
	assert water.cl_to_so4_ratio(IonProfile(cl = 100, so4 = 30)) == 3.33

@pytest.mark.parametrize('cl, so4, descr', [
	(150,	50,	'Malty, full-bodied'),
	(100,	100,	'Crisp, dry'),
	(150,	100,	'Balanced'),
	(50,	150,	'Very crisp, hop-forward'),
])
def test_description(cl, so4, descr):
	p = IonProfile(cl = cl, so4 = so4)
	assert water.waterprofile_description(p) == descr

def test_mashph():
	assert water.residual_alkalinity(IonProfile(ca = 35, mg = 14,
	    hco3 = 100)) == pytest.approx(88)
	assert water.estimate_mashph(IonProfile(hco3 = 100)) \
	    == pytest.approx(4.2)
	assert water.estimate_mashph(IonProfile(hco3 = 100), -3.0) \
	    == pytest.approx(4.7)

import pytest

from BRC.priming import calculate_primingsugar, residual_co2, findsugar, \
    SUCROSE, DEXTROSE
from BRC.utils import PilotError

def test_residual_anchors():
	assert residual_co2(0) == pytest.approx(1.70)
	assert residual_co2(18) == pytest.approx(1.10)
	assert residual_co2(30) == pytest.approx(0.88)

def test_residual_clamps():
	assert residual_co2(-5) == pytest.approx(1.70)
	assert residual_co2(40) == pytest.approx(0.88)

def test_residual_interpolates():
	assert residual_co2(1.5) == pytest.approx(1.64)
	assert residual_co2(20) == pytest.approx(1.10 - 0.07 * 2 / 3)

def test_residual_decreasing():
	temps = [x / 2.0 for x in range(-4, 70)]
	vals = [residual_co2(t) for t in temps]
	assert all(a >= b for a, b in zip(vals, vals[1:]))

def test_ten_liters():
	r = calculate_primingsugar(10, 2.4, 20, SUCROSE)
	assert r['sugar_amount_g'] == pytest.approx(47.0)
	assert r['sugar_type'] == SUCROSE
	assert r['co2_volumes'] == 2.4

def test_monotonic_in_target():
	prev = -1
	for vols in [1.0, 1.5, 2.0, 2.4, 3.0, 3.5]:
		g = calculate_primingsugar(20, vols, 18)['sugar_amount_g']
		assert g >= prev
		prev = g

# warmer beer holds less CO2, so it never needs less sugar
def test_monotonic_in_temperature():
	prev = -1
	for temp in [0, 4, 10, 15, 20, 25, 30, 35]:
		g = calculate_primingsugar(20, 2.5, temp)['sugar_amount_g']
		assert g >= prev
		prev = g

def test_dextrose_needs_more():
	s = calculate_primingsugar(20, 2.5, 20, SUCROSE)
	d = calculate_primingsugar(20, 2.5, 20, DEXTROSE)
	assert d['sugar_amount_g'] > s['sugar_amount_g']

def test_already_carbonated():
	r = calculate_primingsugar(20, 1.0, 5)
	assert r['sugar_amount_g'] == 0

def test_zero_volume():
	assert calculate_primingsugar(0, 2.4, 20)['sugar_amount_g'] == 0

def test_sugar_names():
	assert findsugar('Table Sugar') == SUCROSE
	assert findsugar('corn sugar') == DEXTROSE
	assert findsugar('glucose') == DEXTROSE
	with pytest.raises(PilotError):
		findsugar('honey')
	with pytest.raises(PilotError):
		calculate_primingsugar(20, 2.4, 20, 'honey')

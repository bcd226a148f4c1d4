import pytest

from BRC import parse
from BRC import sysparams
from BRC.getparam import getparam
from BRC.units import Color, Mass, Potential, Temperature, Volume, \
    _Mass, _Volume
from BRC.utils import PilotError, roundup

def test_mass():
	assert parse.mass('15g').valueas(Mass.G) == pytest.approx(15)
	assert parse.mass('2.5kg') == pytest.approx(2.5)
	assert parse.mass('1lb').valueas(Mass.G) == pytest.approx(453.59, 0.01)
	assert parse.mass('1oz').valueas(Mass.G) == pytest.approx(28.35, 0.01)

def test_volume():
	assert parse.volume('10L') == pytest.approx(10)
	assert parse.volume('500ml') == pytest.approx(0.5)
	assert parse.volume('5gal') == pytest.approx(18.927, abs=0.001)

def test_temperature():
	assert parse.temperature('68degF') == pytest.approx(20)
	assert parse.temperature('20' + chr(0x00b0) + 'C') == pytest.approx(20)
	assert parse.temperature('293.15K') == pytest.approx(20)

def test_color():
	assert parse.color('10L').valueas(Color.EBC) == pytest.approx(26.5)
	assert parse.color('10SRM').valueas(Color.EBC) == pytest.approx(19.7)
	assert parse.color('20EBC').valueas(Color.SRM) \
	    == pytest.approx(20 / 1.97)

def test_potential():
	assert parse.potential('36') == 36
	assert parse.potential(36) == 36
	assert parse.potential('36PPG').valueas(Potential.PKL) \
	    == pytest.approx(20.97, abs=0.01)
	assert parse.potential('300pkl') == pytest.approx(515.11, abs=0.01)

def test_percent_minutes():
	assert parse.percent('75%') == 75
	assert parse.minutes('60min') == 60
	assert parse.minutes(5) == 5

def test_percentrange():
	assert parse.percentrange('73%-77%') == (73, 77)
	assert parse.percentrange('75%') == (75, 75)
	with pytest.raises(PilotError):
		parse.percentrange('77%-73%')

def test_bad_suffix():
	with pytest.raises(ValueError):
		parse.mass('15 stone')
	with pytest.raises(ValueError):
		parse.percent('75')

def test_ratio():
	v, m = parse.ratio('1.0L/kg', parse.volume, parse.mass)
	assert v == pytest.approx(1)
	assert m == pytest.approx(1)
	with pytest.raises(ValueError):
		parse.ratio('1.0L', parse.volume, parse.mass)

def test_choice():
	assert parse.choice(' US ', ['metric', 'us']) == 'us'
	with pytest.raises(PilotError):
		parse.choice('imperial', ['metric', 'us'])

def test_units_output():
	assert str(_Volume(10)) == '10.0l'
	assert str(_Mass(0.015)) == '15.0 g'
	assert str(Color(19.7, Color.EBC)) == '20 EBC'
	sysparams.setparam('units_output', 'us')
	assert str(_Volume(10)) == '2.6gal'
	assert str(Color(19.7, Color.EBC)) == '10.0 SRM'
	assert str(Temperature(20, Temperature.degC)) \
	    == '68.0' + chr(0x00b0) + 'F'

def test_roundup():
	assert roundup(0.25, 1) == 0.3
	assert roundup(2.5) == 3
	assert roundup(-2.5) == -3
	assert roundup(float('inf'), 2) == float('inf')

def test_defaults():
	assert getparam('efficiency') == 75
	assert getparam('hop_utilization') == 1.0
	assert getparam('whirlpool_temp') == pytest.approx(80)
	assert getparam('whirlpool_retention') == pytest.approx(75)
	assert getparam('co2_volumes') == pytest.approx(2.4)
	assert getparam('priming_sugar') == 'sucrose'
	assert getparam('abv_method') == 'advanced'
	v, m = getparam('grain_absorption')
	assert v.valueas(Volume.LITER) == pytest.approx(1.0)
	assert m.valueas(Mass.KG) == pytest.approx(1.0)
	sysparams.checkset()

def test_setparam():
	sysparams.setparam('efficiency', '60%')
	assert getparam('efficiency') == 60
	sysparams.setparam('ef', '65%')
	assert getparam('efficiency') == 65
	sysparams.processline('Tf = 18degC')
	assert getparam('fermentation_temp') == pytest.approx(18)

def test_bad_params():
	with pytest.raises(PilotError):
		sysparams.setparam('nonexistent', '1')
	with pytest.raises(PilotError):
		getparam('nonexistent')
	with pytest.raises(PilotError):
		sysparams.setparam('units_output', 'imperial')
	with pytest.raises(PilotError):
		sysparams.setparam('hop_utilization', '-1')
	with pytest.raises(PilotError):
		sysparams.setparam('priming_sugar', 'sucrose|x')
	with pytest.raises(PilotError):
		sysparams.processline('')
	with pytest.raises(PilotError):
		sysparams.processparam('a=b=c')

def test_processfile(tmp_path, capsys):
	f = tmp_path / 'params'
	f.write_text('# my brewery\n\nefficiency=68%\nam=standard\n')
	sysparams.processfile(str(f))
	assert getparam('efficiency') == 68
	assert getparam('abv_method') == 'standard'
	assert str(f) in capsys.readouterr().err

def test_paramshorts():
	sysparams.setparam('efficiency', '70%')
	s = sysparams.getparamshorts()
	assert 'ef=70%' in s.split('|')
	dec = sysparams.decodeparamshorts(s)
	assert ('efficiency', '70%') in dec
	assert len(dec) == len(sysparams.paramparsers)
	with pytest.raises(PilotError):
		sysparams.decodeparamshorts('xx=1')

import pytest

from BRC import sysparams

# system parameters are module globals, don't let one test's
# settings leak into the next
@pytest.fixture(autouse=True)
def defaultparams():
	sysparams.resetdefaults()
	yield
	sysparams.resetdefaults()

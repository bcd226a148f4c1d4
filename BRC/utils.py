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

import math
import sys

class PilotError(Exception):
	pass

def checktype(type, cls):
	if not isinstance(type, cls):
		raise PilotError('invalid input type for ' + cls.__name__)

def checktypes(lst):
	for chk in lst:
		checktype(*chk)

def warn(msg, prepend=''):
	sys.stderr.write(prepend + 'WARNING: ' + msg)

def notice(msg, prepend=''):
	sys.stderr.write(prepend + '>> ' + msg)

# round half away from zero, like a pocket calculator.  the builtin
# round() does banker's rounding, which makes e.g. 0.25 -> 0.2 and
# brewers tend to disagree with that
def roundup(v, ndigits = 0):
	if math.isinf(v) or math.isnan(v):
		return v
	m = pow(10, ndigits)
	return math.copysign(math.floor(abs(v) * m + 0.5) / m, v)

def prtsep(char='='):
	print(char * 79)

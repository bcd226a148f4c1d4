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

from BRC.utils import PilotError, roundup

STANDARD=	'standard'
ADVANCED=	'advanced'
methods=	[ STANDARD, ADVANCED ]

#
# The standard formula is the usual homebrewer's 131.25 magic number.
#
# The advanced one is the Balling-derived formula which accounts for
# alcohol being lighter than water (0.794 is the specific gravity of
# ethanol) and for the extract not turning 1:1 into alcohol.  It goes
# haywire when OG approaches 1.775, which is not beer anymore anyway,
# so there it's just reported as 0.
#
def abv_standard(og, fg):
	return max(0, (og - fg) * 131.25)

def abv_advanced(og, fg):
	if 1.775 - og <= 0:
		return 0
	return max(0, (76.08 * (og - fg) / (1.775 - og)) * (fg / 0.794))

def calculate_abv(og, fg, method = ADVANCED):
	if method not in methods:
		raise PilotError('invalid ABV method: ' + str(method))

	std = roundup(abv_standard(og, fg), 1)
	adv = roundup(abv_advanced(og, fg), 1)

	return {
		'abv': adv if method == ADVANCED else std,
		'method': method,
		'abv_standard': std,
		'abv_advanced': adv,
		# approximately, grams per liter
		'alcohol_content': roundup(max(0, (og - fg) * 1000), 1),
	}

# grams of alcohol in the whole batch
def total_alcohol(abvresult, batchsizel):
	return abvresult['alcohol_content'] * max(0, batchsizel)

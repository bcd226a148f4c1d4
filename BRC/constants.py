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

gramsperounce	= 28.349523
poundsperkg	= 2.2046226218
gramsperpound	= 1000.0 / poundsperkg
gallonsperliter	= 0.2641720524
literspergallon	= 1.0 / gallonsperliter
litersperquart	= literspergallon / 4

absolute_zero_c	= -273.15

# extract potential.  points/lb/gal into points/kg/l is
# (lb per kg) * (gal per l), i.e. ~0.582.  the other way is ~1.718
pklperppg	= poundsperkg * gallonsperliter
ppgperpkl	= 1.0 / pklperppg

# color.  plain linear conversions, the Lovibond one is the
# "multiply by 2.65 to get EBC" rule of thumb
ebcpersrm	= 1.97
ebcperlovibond	= 2.65

# Morey: SRM = 1.4922 * MCU^0.6859
morey_c		= 1.4922
morey_exp	= 0.6859

# whirlpool/hopstand bitterness.  nobody agrees on these, so they
# are only the defaults for the corresponding sysparams
whirlpool_temp	= 80
whirlpool_retention = 0.75

# "distilled water mash pH" intercept and typical pale malt acidity
# for the coarse mash pH estimate
mashph_base	= 5.7
grain_acidity	= -3.5

# default carbonation target, volumes of CO2
co2_volumes	= 2.4

# water absorption of grains, liters per kilogram.  used only
# for the mash/sparge water split estimate
grain_absorption = 1.0

#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pyPureFluid - Pure Fluid Equation of State Utilities
              Copyright (C) 2022, Mark Burgoyne

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.

          Contact author at mark.w.burgoyne@gmail.com
"""


# Constants
P_ATM = 101325.0  # One standard atmosphere (Pa)
NPOS = -1  # Returned by lookups that find no match
PURE_FLUID = "PureFluid"  # Phase type tag accepted by the pure fluid reactor

# Offsets into the reactor state vector
Y_MASS = 0
Y_VOLUME = 1
Y_ENERGY = 2
Y_SPECIES = 3

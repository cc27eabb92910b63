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

from enum import Enum

class fluid_name(Enum):  # Pure fluids with a shipped coefficient set
    HELIUM4 = 0

class region_name(Enum):  # Correlation regions of the (T, rho) plane
    I = 0
    II = 1
    III = 2

class_dic = {
    "fluid": fluid_name,
    "region": region_name,
}


# Errors
class DomainError(ValueError):
    """ Temperature, density or pressure outside the validated range of a correlation """


class UnimplementedRegionError(DomainError):
    """ Recognised part of the (T, rho) plane with no fitted coefficients """


class IncompatiblePhaseError(TypeError):
    """ Reactor attached to a phase that is not a single component pure fluid """


class ContractViolation(Exception):
    """ Internal index or table size outside its defined set. Indicates a defect, not bad input """

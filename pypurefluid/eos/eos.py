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

# Multi-region Reynolds equation of state.
#
# Pressure, eqn P-5:
#     P = rho*R*T + sum_j C_j(T) H_j(rho)
# Internal energy, eqn 15 with constant ideal heat capacity G:
#     u = G (T - To) + sum_j [C_j - T C_j'] I_j + u0
# Entropy, eqn 16:
#     s = G ln(T/To) - sum_j C_j' I_j - R ln(rho) + s0
# where I_j = integral_0^rho H_j / rho^2 drho.
#
# Every property call selects its region from its own (T, rho) and passes
# the region down explicitly. Nothing is cached between calls.

import logging
import math
import numbers

from pypurefluid.classes import region_name, DomainError, UnimplementedRegionError, ContractViolation
from pypurefluid.saturation import liquid_density_boundary
from pypurefluid.shared_fns import is_finite
from pypurefluid.tables import N_TERMS

logger = logging.getLogger(__name__)

# Temperature exponent of each coefficient, per basis term j
EXPONENTS = (
    tuple(2.0 - 0.5 * i for i in range(9)),
    tuple(1.0 - 0.5 * i for i in range(8)),
    tuple(0.5 - i for i in range(4)),
    tuple(0.5 - 0.25 * i for i in range(6)),
    (0.0, -1.0),
    (0.0, -1.0, -2.0),
    (0.0, -1.0, -2.0),
)


def _check_index(j, caller):
    if not (isinstance(j, numbers.Integral) and 0 <= j < N_TERMS):
        raise ContractViolation(f"{caller}: Index out of range. j = {j}")


# =============================================================================
# Basis terms
# =============================================================================
def term(table, j: int, T: float) -> float:
    """ C_j(T), the temperature factor of basis term j """
    _check_index(j, "term")
    return sum(a * T ** e for a, e in zip(table.range(j), EXPONENTS[j]))


def term_prime(table, j: int, T: float) -> float:
    """ dC_j/dT """
    _check_index(j, "term_prime")
    return sum(a * e * T ** (e - 1.0) for a, e in zip(table.range(j), EXPONENTS[j]) if e != 0.0)


def density_multiplier(j: int, rho: float, gamma: float) -> float:
    """ H_j(rho), the density factor of basis term j """
    _check_index(j, "density_multiplier")
    if j <= 4:
        return rho ** (j + 2)
    egrho = math.exp(-gamma * rho * rho)
    if j == 5:
        return rho ** 3 * egrho
    return rho ** 5 * egrho


def density_integral(j: int, rho: float, gamma: float) -> float:
    """ I_j(rho) = integral from 0 to rho of H_j / rho^2 """
    _check_index(j, "density_integral")
    if j <= 4:
        return rho ** (j + 1) / (j + 1)
    x = gamma * rho * rho
    if j == 5:
        return -math.expm1(-x) / (2.0 * gamma)
    return (1.0 - (x + 1.0) * math.exp(-x)) / (2.0 * gamma * gamma)


# =============================================================================
# Region selection
# =============================================================================
def temperature_bands(fluid):
    """ Returns [(T_lo, T_hi), ...], the temperature intervals where some region is defined """
    c = fluid.constants
    return [(c.t_min, fluid.t_split_low), (fluid.t_split_high, c.t_max)]


def select_region(fluid, T: float, rho: float):
    """ Returns the Region whose fit covers (T, rho)

        Tmin <= T < Tc            rho <= ldens(T) -> I, else II
        Tc <= T <= t_split_low    rho <= rho_crit -> I, else II
        t_split_low < T < t_split_high            -> UnimplementedRegionError
        t_split_high <= T <= Tmax                 -> III
    """
    c = fluid.constants
    if not is_finite(T, rho):
        raise DomainError(f"select_region: Non-finite state. T = {T}, rho = {rho}")
    if rho <= 0:
        raise DomainError(f"select_region: Density must be positive. rho = {rho}")
    if T < c.t_min or T > c.t_max:
        raise DomainError(f"select_region: Temperature out of range. T = {T} K, valid {c.t_min} - {c.t_max} K")

    if T < c.t_crit:
        name = region_name.I if rho <= liquid_density_boundary(fluid, T) else region_name.II
    elif T <= fluid.t_split_low:
        name = region_name.I if rho <= c.rho_crit else region_name.II
    elif T < fluid.t_split_high:
        raise UnimplementedRegionError(f"select_region: Region not implemented. T = {T} K, rho = {rho}")
    else:
        name = region_name.III
    return fluid.regions[name]


def _region(fluid, T, rho, region):
    if region is None:
        return select_region(fluid, T, rho)
    if not is_finite(T, rho) or rho <= 0 or T <= 0:
        raise DomainError(f"Invalid state. T = {T}, rho = {rho}")
    return region


# =============================================================================
# Properties
# =============================================================================
def pressure(fluid, T: float, rho: float, region=None) -> float:
    """ Returns pressure (Pa)
        fluid: FluidData
        T: Temperature (K)
        rho: Density (kg/m3)
        region: Region to evaluate with. Selected from (T, rho) if not specified
    """
    region = _region(fluid, T, rho, region)
    table = region.table
    P = rho * fluid.reference.R * T
    for j in range(N_TERMS):
        P += term(table, j, T) * density_multiplier(j, rho, table.gamma)
    return P


def internal_energy(fluid, T: float, rho: float, offset: float = 0.0, region=None) -> float:
    """ Returns specific internal energy (J/kg)
        offset: Calibration energy offset added to the result (J/kg)
    """
    region = _region(fluid, T, rho, region)
    table = region.table
    ref = fluid.reference
    u = ref.G * (T - ref.To)
    for j in range(N_TERMS):
        u += density_integral(j, rho, table.gamma) * (term(table, j, T) - T * term_prime(table, j, T))
    return u + ref.u0 + offset


def entropy(fluid, T: float, rho: float, offset: float = 0.0, region=None) -> float:
    """ Returns specific entropy (J/kg.K)
        offset: Calibration entropy offset added to the result (J/kg.K)
    """
    region = _region(fluid, T, rho, region)
    table = region.table
    ref = fluid.reference
    s = ref.G * math.log(T / ref.To)
    for j in range(N_TERMS):
        s -= term_prime(table, j, T) * density_integral(j, rho, table.gamma)
    s += ref.s0 - ref.R * math.log(rho)
    return s + offset


def enthalpy(fluid, T: float, rho: float, offset: float = 0.0, region=None) -> float:
    """ Returns specific enthalpy h = u + P/rho (J/kg) """
    region = _region(fluid, T, rho, region)
    return internal_energy(fluid, T, rho, offset, region) + pressure(fluid, T, rho, region) / rho


def properties(fluid, T: float, rho: float, energy_offset: float = 0.0, entropy_offset: float = 0.0):
    """ Returns dict of region, P (Pa), u (J/kg), s (J/kg.K) and h (J/kg), all from one region selection """
    region = select_region(fluid, T, rho)
    P = pressure(fluid, T, rho, region)
    u = internal_energy(fluid, T, rho, energy_offset, region)
    s = entropy(fluid, T, rho, entropy_offset, region)
    logger.debug(f"properties: T={T}, rho={rho}, region={region.name.name} => P={P}, u={u}, s={s}")
    return {"region": region.name, "P": P, "u": u, "s": s, "h": u + P / rho}

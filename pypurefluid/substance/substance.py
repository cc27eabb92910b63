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

import numpy as np
import numpy.typing as npt
import pandas as pd
from tabulate import tabulate

import pypurefluid.eos as eos
import pypurefluid.saturation as saturation
from pypurefluid.classes import fluid_name
from pypurefluid.fluids import get_fluid
from pypurefluid.shared_fns import convert_to_numpy, process_input

class Substance():
    """ Pure fluid property evaluator for one coefficient set
        fluid: fluid_name member or string, e.g. 'helium4'. Defaults to helium-4
        energy_offset: Added to every internal energy / enthalpy result (J/kg)
        entropy_offset: Added to every entropy result (J/kg.K)

        All state functions take T (K) and rho (kg/m3), scalars or arrays that
        broadcast together, and return floats for scalar input.
    """
    def __init__(self, fluid = fluid_name.HELIUM4, energy_offset = 0.0, entropy_offset = 0.0):
        self.data = get_fluid(fluid)
        self.name = self.data.constants.name
        self.formula = self.data.constants.formula
        self.energy_offset = float(energy_offset)
        self.entropy_offset = float(entropy_offset)

    def __repr__(self):
        return f"Substance('{self.name}')"

    def set_offsets(self, energy = 0.0, entropy = 0.0):
        """ Sets calibration offsets that move the zero point of u and s """
        self.energy_offset = float(energy)
        self.entropy_offset = float(entropy)

    def _map(self, f, T, rho, *args):
        T, rho = np.broadcast_arrays(convert_to_numpy(T), convert_to_numpy(rho))
        out = np.array([f(self.data, float(t), float(r), *args) for t, r in zip(T.ravel(), rho.ravel())])
        return process_input(out.reshape(T.shape))

    # State dependent properties
    def pressure(self, T: npt.ArrayLike, rho: npt.ArrayLike):
        """ Pressure (Pa) """
        return self._map(eos.pressure, T, rho)

    def up(self, T: npt.ArrayLike, rho: npt.ArrayLike):
        """ Specific internal energy (J/kg) """
        return self._map(eos.internal_energy, T, rho, self.energy_offset)

    def sp(self, T: npt.ArrayLike, rho: npt.ArrayLike):
        """ Specific entropy (J/kg.K) """
        return self._map(eos.entropy, T, rho, self.entropy_offset)

    def hp(self, T: npt.ArrayLike, rho: npt.ArrayLike):
        """ Specific enthalpy (J/kg) """
        return self._map(eos.enthalpy, T, rho, self.energy_offset)

    def region(self, T: float, rho: float):
        """ Name of the correlation region covering (T, rho) """
        return eos.select_region(self.data, T, rho).name

    def properties(self, T: float, rho: float):
        """ Dict of region, P, u, s and h at (T, rho) """
        return eos.properties(self.data, T, rho, self.energy_offset, self.entropy_offset)

    def property_table(self, T: npt.ArrayLike, rho: npt.ArrayLike, display: bool = False) -> pd.DataFrame:
        """ Returns DataFrame of P, u, s and h over broadcast T and rho """
        T, rho = np.broadcast_arrays(convert_to_numpy(T), convert_to_numpy(rho))
        rows = []
        for t, r in zip(T.ravel(), rho.ravel()):
            p = self.properties(float(t), float(r))
            rows.append([t, r, p["region"].name, p["P"], p["u"], p["s"], p["h"]])
        df = pd.DataFrame(rows, columns=["T (K)", "rho (kg/m3)", "Region", "P (Pa)", "u (J/kg)", "s (J/kg.K)", "h (J/kg)"])
        if display:
            print(tabulate(df, headers="keys", tablefmt="psql", showindex=False, floatfmt=".6g"))
        return df

    # Saturation line
    def psat(self, T: npt.ArrayLike):
        """ Saturation pressure (Pa) """
        return saturation.saturation_pressure(self.data, T)

    def ldens(self, T: npt.ArrayLike):
        """ Saturated liquid density (kg/m3) """
        return saturation.liquid_density_boundary(self.data, T)

    def tsat(self, P: float) -> float:
        """ Saturation temperature (K) """
        return saturation.saturation_temperature(self.data, P)

    # State independent properties
    def mol_wt(self):
        return self.data.constants.mol_wt

    def t_crit(self):
        return self.data.constants.t_crit

    def p_crit(self):
        return self.data.constants.p_crit

    def v_crit(self):
        return self.data.constants.v_crit

    def t_min(self):
        return self.data.constants.t_min

    def t_max(self):
        return self.data.constants.t_max

    def gas_constant(self):
        """ Specific gas constant (J/kg.K) """
        return self.data.reference.R

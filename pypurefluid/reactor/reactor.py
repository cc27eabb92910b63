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

import logging

import numpy as np

from pypurefluid.classes import IncompatiblePhaseError
from pypurefluid.constants import NPOS, PURE_FLUID, Y_MASS, Y_VOLUME, Y_ENERGY, Y_SPECIES
from pypurefluid.shared_fns import convert_to_numpy

logger = logging.getLogger(__name__)

class PureFluidReactor():
    """ Zero dimensional stirred reactor holding a single pure fluid phase

        The ODE state vector y is laid out as
            y[0]          total mass (kg)
            y[1]          total volume (m3)
            y[2]          total internal energy (J), or temperature (K) with energy off
            y[3:3+K]      species mass fractions, K = phase.n_species
            y[3+K:]       surface species coverages, handled by surface_species / update_surface_state

        phase: Phase object with phase_type 'PureFluid'. May be attached later with set_thermo_mgr
        energy: If True the energy equation is solved (state set from u, v). If False the
                temperature is held and only the density follows mass / volume
        volume: Initial reactor volume (m3)
        name: Reactor name
    """
    def __init__(self, phase=None, energy=True, volume=1.0, name="(none)"):
        self.name = name
        self.energy = bool(energy)
        self.thermo = None
        self.surface_species = []
        self.mass = 0.0
        self.volume = float(volume)
        self.enthalpy = None
        self.pressure = None
        self.int_energy = None
        self.state = None
        if phase is not None:
            self.set_thermo_mgr(phase)

    def __repr__(self):
        return f"PureFluidReactor('{self.name}', energy={self.energy})"

    def set_thermo_mgr(self, phase):
        """ Attaches the phase object. Raises IncompatiblePhaseError for anything but a pure fluid """
        phase_type = getattr(phase, "phase_type", None)
        if phase_type != PURE_FLUID:
            raise IncompatiblePhaseError(f"Incompatible phase type provided: '{phase_type}'. Expected '{PURE_FLUID}'")
        self.thermo = phase
        self.mass = phase.density * self.volume
        self._save_outputs()

    def initialize(self, t0=0.0):
        """ Checks the attached phase before integration starts at time t0 """
        if self.thermo is None:
            raise IncompatiblePhaseError(f"Reactor '{self.name}' has no phase attached")
        self.set_thermo_mgr(self.thermo)
        logger.debug(f"initialize: reactor {self.name} at t0={t0}, mass={self.mass}, volume={self.volume}")

    @property
    def n_species(self):
        return self.thermo.n_species

    @property
    def neq(self):
        """ Number of equations (length of the state vector) """
        return Y_SPECIES + self.n_species + len(self.surface_species)

    def get_state(self, y=None):
        """ Fills (or returns a new) state vector from the current phase state """
        if y is None:
            y = np.zeros(self.neq)
        y[Y_MASS] = self.mass
        y[Y_VOLUME] = self.volume
        if self.energy:
            y[Y_ENERGY] = self.mass * self.thermo.int_energy_mass()
        else:
            y[Y_ENERGY] = self.thermo.T
        y[Y_SPECIES:Y_SPECIES + self.n_species] = self.thermo.mass_fractions()
        return y

    def update_state(self, y):
        """ Sets the phase from state vector y and caches h, P and u for connected reactors """
        y = convert_to_numpy(y)
        if y.size < Y_SPECIES + self.n_species:
            raise ValueError(f"State vector needs at least {Y_SPECIES + self.n_species} entries, got {y.size}")
        mass = y[Y_MASS]
        volume = y[Y_VOLUME]
        k = Y_SPECIES + self.n_species

        previous = self.thermo.save_state()
        try:
            self.thermo.set_mass_fractions_no_norm(y[Y_SPECIES:k])
            if self.energy:
                self.thermo.set_state_UV(y[Y_ENERGY] / mass, volume / mass)
            else:
                self.thermo.set_density(mass / volume)
        except ValueError:  # DomainError included
            self.thermo.restore_state(previous)
            raise
        self.mass, self.volume = mass, volume

        self.update_surface_state(y[k:])
        self._save_outputs()
        logger.debug(f"update_state: {self.name} T={self.thermo.T}, rho={self.thermo.density}, P={self.pressure}")

    def update_surface_state(self, coverages):
        """ Surface coverages are owned by surface collaborators; no surfaces are modelled here """
        pass

    def restore_state(self):
        """ Returns the phase to the snapshot taken by the last update_state """
        if self.state is not None:
            self.thermo.restore_state(self.state)

    def _save_outputs(self):
        self.enthalpy = self.thermo.enthalpy_mass()
        self.pressure = self.thermo.pressure()
        self.int_energy = self.thermo.int_energy_mass()
        self.state = self.thermo.save_state()

    def component_index(self, nm):
        """ Index in the state vector of component nm: 'mass', 'volume', 'int_energy'
            (or 'temperature' with energy off), a species name or a surface species name.
            Returns NPOS if not found. Slot 2 has one name at a time: with energy on it holds U,
            so 'temperature' is not a component and gives NPOS
        """
        if nm == "mass":
            return Y_MASS
        if nm == "volume":
            return Y_VOLUME
        if nm == ("int_energy" if self.energy else "temperature"):
            return Y_ENERGY
        k = self.thermo.species_index(nm)
        if k is not None:
            return Y_SPECIES + k
        if nm in self.surface_species:
            return Y_SPECIES + self.n_species + self.surface_species.index(nm)
        return NPOS

    def component_name(self, k):
        """ Name of state vector component k """
        if k == Y_MASS:
            return "mass"
        if k == Y_VOLUME:
            return "volume"
        if k == Y_ENERGY:
            return "int_energy" if self.energy else "temperature"
        if Y_SPECIES <= k < Y_SPECIES + self.n_species:
            return self.thermo.species_names[k - Y_SPECIES]
        k_surf = k - Y_SPECIES - self.n_species
        if 0 <= k_surf < len(self.surface_species):
            return self.surface_species[k_surf]
        raise IndexError(f"Index out of range. k = {k}")

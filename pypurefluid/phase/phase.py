"""
Single component pure fluid phase.

Holds the thermodynamic state (T, rho) and mass fractions of a pure fluid and
answers property queries through its Substance. This is the phase object the
pure fluid reactor drives:

    set_state_UV(u, v)            solve T at rho = 1/v so that u(T, rho) = u
    set_density(rho)              change rho at fixed T
    set_mass_fractions_no_norm(Y) store Y as given
    pressure(), int_energy_mass(), enthalpy_mass(), entropy_mass()
    save_state() / restore_state(state)

Every setter validates the new state before storing it, so a failed call
leaves the previous state untouched.
"""

import logging

import numpy as np
from scipy.optimize import brentq

import pypurefluid.eos as eos
from pypurefluid.classes import DomainError
from pypurefluid.constants import PURE_FLUID
from pypurefluid.shared_fns import convert_to_numpy, is_finite
from pypurefluid.substance import Substance

logger = logging.getLogger(__name__)


class PureFluid:
    """ Pure fluid phase
        substance: Substance instance, or fluid name accepted by Substance. Defaults to helium-4
        T: Initial temperature (K)
        rho: Initial density (kg/m3)
    """
    phase_type = PURE_FLUID

    def __init__(self, substance=None, T=300.0, rho=1.0):
        if substance is None:
            substance = Substance()
        elif not isinstance(substance, Substance):
            substance = Substance(substance)
        self.substance = substance
        self.species_names = [substance.formula]
        self.n_species = 1
        self._Y = np.ones(self.n_species)
        self._T = None
        self._rho = None
        self.set_state_TD(T, rho)

    def __repr__(self):
        return f"PureFluid({self.substance.name}, T={self._T}, rho={self._rho})"

    # State access
    @property
    def T(self):
        return self._T

    @property
    def density(self):
        return self._rho

    @property
    def specific_volume(self):
        return 1.0 / self._rho

    def mass_fractions(self):
        return self._Y.copy()

    def species_index(self, name):
        """ Index of species 'name', or None if not in this phase """
        try:
            return self.species_names.index(name)
        except ValueError:
            return None

    # State setters
    def set_state_TD(self, T, rho):
        eos.select_region(self.substance.data, T, rho)
        self._T, self._rho = float(T), float(rho)

    def set_temperature(self, T):
        self.set_state_TD(T, self._rho)

    def set_density(self, rho):
        self.set_state_TD(self._T, rho)

    def set_mass_fractions_no_norm(self, Y):
        Y = convert_to_numpy(Y)
        if Y.size != self.n_species:
            raise ValueError(f"Expected {self.n_species} mass fractions, got {Y.size}")
        self._Y = Y.copy()

    def set_state_UV(self, u, v, xtol=1e-10, rtol=1e-6):
        """ Sets the state from specific internal energy u (J/kg) and specific volume v (m3/kg)
            Solves u(T, 1/v) = u for T on each temperature band of the fluid in turn.
            A root is accepted only if its energy residual is within rtol * max(1, |u|);
            a sign change that is a jump between region tables is not a root.
        """
        if not is_finite(u, v) or v <= 0:
            raise DomainError(f"set_state_UV: Invalid state. u = {u}, v = {v}")
        rho = 1.0 / v
        data = self.substance.data
        offset = self.substance.energy_offset

        def f(T):
            return eos.internal_energy(data, T, rho, offset) - u

        for lo, hi in eos.temperature_bands(data):
            f_lo, f_hi = f(lo), f(hi)
            if f_lo * f_hi > 0:
                continue
            T = brentq(f, lo, hi, xtol=xtol)
            if abs(f(T)) > rtol * max(1.0, abs(u)):
                logger.debug(f"set_state_UV: u={u}, v={v} => T={T} rejected, residual {f(T)} J/kg")
                continue
            logger.debug(f"set_state_UV: u={u}, v={v} => T={T} in band {lo} - {hi} K")
            self.set_state_TD(T, rho)
            return
        raise DomainError(f"set_state_UV: No temperature in the valid range gives u = {u} J/kg at v = {v} m3/kg")

    # Properties at the current state
    def pressure(self):
        return self.substance.pressure(self._T, self._rho)

    def int_energy_mass(self):
        return self.substance.up(self._T, self._rho)

    def enthalpy_mass(self):
        return self.substance.hp(self._T, self._rho)

    def entropy_mass(self):
        return self.substance.sp(self._T, self._rho)

    def region(self):
        return self.substance.region(self._T, self._rho)

    # Snapshots
    def save_state(self):
        """ Returns array [T, rho, Y...] """
        return np.concatenate(([self._T, self._rho], self._Y))

    def restore_state(self, state):
        state = convert_to_numpy(state)
        if state.size != 2 + self.n_species:
            raise ValueError(f"State array must have {2 + self.n_species} entries, got {state.size}")
        self.set_state_TD(state[0], state[1])
        self._Y = state[2:].copy()

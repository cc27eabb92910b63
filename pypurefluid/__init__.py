"""
pypurefluid
===================================

-----------------------------------------------
Pure Fluid Equation of State Utilities
-----------------------------------------------

Thermodynamic properties of pure fluids from the piecewise analytic
correlations of W.C. Reynolds, "Thermodynamic Properties in SI", and a
zero-dimensional pure fluid reactor that drives them from an ODE state vector.

Includes functions to perform calculations including;

- Pressure, internal energy, entropy and enthalpy from temperature and density
- Region selection across the fitted parts of the (T, rho) plane
- Saturation pressure, saturation temperature and saturated liquid density
- Property and saturation tables
- Pure fluid phase with (u, v) state solution
- Pure fluid reactor state vector mapping

Ships with the helium-4 coefficient set.

Note: Functionality is split into submodules, requiring seperate imports

"""

submodules = [
    'classes',
    'constants',
    'eos',
    'fluids',
    'phase',
    'reactor',
    'saturation',
    'shared_fns',
    'substance',
    'tables',
    'validate'
]

__all__ = submodules

import importlib

def __dir__():
    return __all__


def __getattr__(name):
    if name in submodules:
        return importlib.import_module(f'pypurefluid.{name}')
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(
                f"Module 'pypurefluid' has no attribute '{name}'"
            )

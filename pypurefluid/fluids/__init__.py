"""
Shipped pure fluid coefficient sets.

Adding a fluid means adding a data module that builds a FluidData and
registering it in FLUIDS; no evaluator code changes.
"""

from pypurefluid.classes import fluid_name
from pypurefluid.validate import validate_methods
from .helium4 import HELIUM4

FLUIDS = {
    fluid_name.HELIUM4: HELIUM4,
}


def get_fluid(fluid=fluid_name.HELIUM4):
    """ Returns the FluidData for a fluid_name member or its string name (e.g. 'helium4') """
    fluid = validate_methods(["fluid"], [fluid])
    return FLUIDS[fluid]

from .constants import P_ATM, NPOS, PURE_FLUID, Y_MASS, Y_VOLUME, Y_ENERGY, Y_SPECIES

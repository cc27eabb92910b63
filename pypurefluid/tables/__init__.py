from .tables import CoefficientTable, Region, SubstanceConstants, ReferenceConstants, FluidData, RANGES, N_COEFFS, N_TERMS

from .eos import EXPONENTS, term, term_prime, density_multiplier, density_integral, temperature_bands, select_region, pressure, internal_energy, entropy, enthalpy, properties

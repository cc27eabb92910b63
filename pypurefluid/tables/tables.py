"""
Coefficient tables and fixed constants for Reynolds-type pure fluid correlations.

The pressure equation P-5 of Reynolds' "Thermodynamic Properties in SI" is

    P = rho*R*T + sum_j C_j(T) * H_j(rho),   j = 0..6

with the 35 fitted coefficients A_0..A_34 grouped into seven ranges, one per
basis term j. Each range is held as its own fixed-size tuple so basis code
never indexes into a flat buffer.

    range   size  C_j(T)                                H_j(rho)
    rho2     9    sum A_i T^(2 - i/2),   i = 0..8       rho^2
    rho3     8    sum A_i T^(1 - i/2),   i = 0..7       rho^3
    rho4     4    sum A_i T^(1/2 - i),   i = 0..3       rho^4
    rho5     6    sum A_i T^(1/2 - i/4), i = 0..5       rho^5
    rho6     2    A_0 + A_1/T                           rho^6
    core3    3    A_0 + A_1/T + A_2/T^2                 rho^3 exp(-gamma rho^2)
    core5    3    A_0 + A_1/T + A_2/T^2                 rho^5 exp(-gamma rho^2)

Units: T in K, rho in kg/m3, P in Pa, u in J/kg, s in J/kg.K
"""

from collections import namedtuple
from dataclasses import dataclass
from typing import Tuple

from pypurefluid.classes import ContractViolation

# (name, size) of each coefficient range, in published order
RANGES = (
    ("rho2", 9),
    ("rho3", 8),
    ("rho4", 4),
    ("rho5", 6),
    ("rho6", 2),
    ("core3", 3),
    ("core5", 3),
)
N_COEFFS = sum(size for _, size in RANGES)  # 35
N_TERMS = len(RANGES)  # 7 basis terms, j = 0..6


@dataclass(frozen=True)
class CoefficientTable:
    """Fitted coefficients and decay constant of one correlation region."""
    rho2: Tuple[float, ...]
    rho3: Tuple[float, ...]
    rho4: Tuple[float, ...]
    rho5: Tuple[float, ...]
    rho6: Tuple[float, ...]
    core3: Tuple[float, ...]
    core5: Tuple[float, ...]
    gamma: float  # Exponential core decay constant (m6/kg2)

    def __post_init__(self):
        for name, size in RANGES:
            values = tuple(float(a) for a in getattr(self, name))
            if len(values) != size:
                raise ContractViolation(f"Coefficient range '{name}' needs {size} values, got {len(values)}")
            object.__setattr__(self, name, values)
        if not self.gamma > 0:
            raise ContractViolation(f"Decay constant must be positive, got {self.gamma}")

    @classmethod
    def from_flat(cls, coeffs, gamma):
        """ Builds a table from the 35 coefficients in published A_0..A_34 order """
        coeffs = list(coeffs)
        if len(coeffs) != N_COEFFS:
            raise ContractViolation(f"Expected {N_COEFFS} coefficients, got {len(coeffs)}")
        ranges, start = {}, 0
        for name, size in RANGES:
            ranges[name] = tuple(coeffs[start:start + size])
            start += size
        return cls(gamma=gamma, **ranges)

    def flat(self):
        """ Coefficients in published A_0..A_34 order """
        out = []
        for name, _ in RANGES:
            out.extend(getattr(self, name))
        return tuple(out)

    def range(self, j):
        """ Coefficient range feeding basis term j """
        if not 0 <= j < N_TERMS:
            raise ContractViolation(f"Basis index out of range. j = {j}")
        return getattr(self, RANGES[j][0])


Region = namedtuple("Region", ["name", "table"])


@dataclass(frozen=True)
class SubstanceConstants:
    """Fixed scalars of a pure fluid."""
    name: str
    formula: str
    mol_wt: float    # kg/kmol
    t_crit: float    # K
    p_crit: float    # Pa
    rho_crit: float  # kg/m3
    t_min: float     # K, lowest validated temperature
    t_max: float     # K, highest validated temperature

    @property
    def v_crit(self):
        return 1.0 / self.rho_crit


@dataclass(frozen=True)
class ReferenceConstants:
    """Gas constant and the reference state anchoring u and s."""
    R: float   # Specific gas constant, J/kg.K
    To: float  # Reference temperature, K
    u0: float  # Internal energy at To, J/kg
    s0: float  # Entropy at To, J/kg.K
    G: float   # Constant ideal gas heat capacity used in the u and s integrals, J/kg.K


@dataclass(frozen=True)
class FluidData:
    """Everything the evaluator needs to know about one fluid."""
    constants: SubstanceConstants
    reference: ReferenceConstants
    regions: dict             # region_name -> Region
    t_split_low: float        # Upper edge of the regions I/II band above Tc (K)
    t_split_high: float       # Lower edge of region III (K)
    psat_coeffs: Tuple[float, ...]   # F_1..F_10 of eqn S-5
    ldens_coeffs: Tuple[float, ...]  # D_1..D_7 of eqn D-2

"""
Helium-4 coefficient data.

Values from W.C. Reynolds, "Thermodynamic Properties in SI" (1979):
    - Pressure: equation P-5, three regions
    - Saturation pressure: equation S-5
    - Saturated liquid density: equation D-2

Region I covers T <= 10 K up to the saturated liquid density (T < Tc) or up
to the critical density (T >= Tc). Region II is the denser side of the same
band. Region III covers T >= 15 K. The 10 K - 15 K band has no fit.

Notes on the published tables:
    - Region I A_26 and A_27 are separate entries (-9.44142746383E-2 and
      -3.72006192405E-6). A transcription that drops the separator between
      them silently shifts every following coefficient by one.
    - The S-5 entries F_6 = 1.6621956504E5 and F_9 = -2.7771806992E5 are the
      published values. The variants 1.16621956504E5 and -2.771806992E5 seen
      in some transcriptions give Psat(4 K) of order 1E-79 Pa.
    - The decay constant exponent of regions II and III is uncertain in the
      source. Region II does not join region I continuously at the saturated
      liquid density with these values. Kept as published.
"""

from pypurefluid.classes import region_name
from pypurefluid.tables import CoefficientTable, Region, SubstanceConstants, ReferenceConstants, FluidData

CONSTANTS = SubstanceConstants(
    name="helium4",
    formula="He",
    mol_wt=4.0026,
    t_crit=5.2014,
    p_crit=0.22746E6,
    rho_crit=69.64,
    t_min=2.177,
    t_max=1501.0,
)

REFERENCE = ReferenceConstants(
    R=2077.22578699,
    To=2.177,
    u0=1.8712207E4,
    s0=1.0812833E4,
    G=3115.85,
)

T_SPLIT_LOW = 10.0
T_SPLIT_HIGH = 15.0

# A_0..A_8 are shared by all three regions
_A_RHO2 = [
    -2.63717841606E-4, -5.79620044301E-2, 6.04727743809, 3.86500111589E1, -2.75796664744E2,
    -4.96960774707E2, 2.04341052964E3, -2.66595676810E3, 1.07968703317E3,
]

A_REGION_I = _A_RHO2 + [
    2.33740311250E-1, -5.14034417722, 3.08419481342E1, -1.67047385071E2,
    5.24045883077E2, -8.07915654647E2, 6.31099960781E2, -2.45791511511E2,
    1.47668657398E-2, -2.53062442742E-1, 7.33463898526E-1, 2.92163822280E-1,
    4.07953759561E-3, -3.73905300971E-2, 1.36171997779E-1, -2.47415495892E-1,
    2.33727221372E-1, -9.44142746383E-2,
    -3.72006192405E-6, 1.59283523218E-5,
    7.75248537108, -4.13169817472E1, 5.40743659299E1,
    5.34172600153E-4, -1.05413018834E-3, -8.82580260817E-4,
]

A_REGION_II = _A_RHO2 + [
    3.23316248529E-2, 2.01417823467, -3.20336592218E1, 1.17952847254E2,
    -2.72064513304E2, 8.06705554799E2, -6.34863771449E2, 4.23944026969E2,
    -1.26804959063E-2, 5.58960362485E-2, 5.81328684698E-1, -1.03365680210,
    -1.01057001312E-3, 8.40859671873E-3, -2.48181422872E-2, 3.24270326025E-2,
    -1.04566294786E-2, -1.05412341221E-2,
    -1.04201749588E-6, 1.09726080203E-5,
    1.24933778088E1, -1.41252424541E2, -2.38228039845E2,
    2.65139980533E-4, 3.33310756017E-3, -2.41601688592E-3,
]

A_REGION_III = _A_RHO2 + [
    -5.69281410539E-2, 2.54082433493, -4.33612764494E1, 2.32901880818E2,
    -6.88289870860E2, 2.12493828516E3, -2.69258356337E3, 1.42625846393E3,
    7.76178949940E-4, 6.75967782095E-2, 9.09992115812E-2, -3.81211874106E-1,
    -2.30068006523E-5, 4.02950826349E-5, 1.07511466109E-3, -4.93747339170E-3,
    1.11576934297E-2, -1.23679512941E-2,
    -3.64745210287E-7, 1.02807881652E-5,
    8.98703364016, -2.28140026278E2, 5.33588707469,
    1.06067862115E-4, -4.46441499497E-3, 3.80683087199E-3,
]

GAMMA_I = 1.56047072875E-4
GAMMA_II = 3.12094145751E-5
GAMMA_III = 3.12094145751E-5

# Saturation pressure, ln(P) = sum F_i T^(2-i), i = 1..10
F_PSAT = (
    -3.9394635287, 1.3925998798E2, -1.6407741565E3, 1.1974557102E4, -5.5283309818E4,
    1.6621956504E5, -3.2521282840E5, 3.9884322750E5, -2.7771806992E5, 8.3395204183E4,
)

# Saturated liquid density, rho = sum D_i (1 - T/Tc)^((i-1)/3), i = 1..7
D_LDENS = (
    6.6940000000E1, 1.2874326484E2, -4.3128217346E2, 1.7851911824E3,
    -3.3509624489E3, 3.0344215824E3, -1.0981289602E3,
)

REGIONS = {
    region_name.I: Region(region_name.I, CoefficientTable.from_flat(A_REGION_I, GAMMA_I)),
    region_name.II: Region(region_name.II, CoefficientTable.from_flat(A_REGION_II, GAMMA_II)),
    region_name.III: Region(region_name.III, CoefficientTable.from_flat(A_REGION_III, GAMMA_III)),
}

HELIUM4 = FluidData(
    constants=CONSTANTS,
    reference=REFERENCE,
    regions=REGIONS,
    t_split_low=T_SPLIT_LOW,
    t_split_high=T_SPLIT_HIGH,
    psat_coeffs=F_PSAT,
    ldens_coeffs=D_LDENS,
)

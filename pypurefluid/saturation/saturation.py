"""
Saturation line correlations.

    - saturation_pressure(fluid, T): vapour pressure, Reynolds eqn S-5
    - liquid_density_boundary(fluid, T): saturated liquid density, eqn D-2
    - saturation_temperature(fluid, P): inverse of saturation_pressure
    - saturation_table(fluid, temps): DataFrame of the above

All are valid between the fluid's minimum temperature and its critical
temperature only. Outside that interval a DomainError is raised; nothing is
extrapolated.

Units: T in K, P in Pa, rho in kg/m3
"""

import numpy as np
import numpy.typing as npt
import pandas as pd
from scipy.optimize import brentq
from tabulate import tabulate

from pypurefluid.classes import DomainError
from pypurefluid.shared_fns import convert_to_numpy, process_input


def _check_saturation_range(fluid, T, caller):
    c = fluid.constants
    bad = ~((T >= c.t_min) & (T <= c.t_crit))
    if np.any(bad):
        raise DomainError(f"{caller}: Temperature out of range. T = {T[bad][0]} K, valid {c.t_min} - {c.t_crit} K")


def saturation_pressure(fluid, T: npt.ArrayLike):
    """ Returns saturation pressure (Pa)
        ln(P) = sum F_i T^(2-i), i = 1..10
        fluid: FluidData
        T: Temperature (K), scalar or array
    """
    T = convert_to_numpy(T)
    _check_saturation_range(fluid, T, "saturation_pressure")
    lnp = np.zeros_like(T)
    for i, f in enumerate(fluid.psat_coeffs, start=1):
        lnp += f * T ** (2 - i)
    return process_input(np.exp(lnp))


def liquid_density_boundary(fluid, T: npt.ArrayLike):
    """ Returns saturated liquid density (kg/m3), the density splitting regions I and II below Tc
        rho = sum D_i (1 - T/Tc)^((i-1)/3), i = 1..7
        fluid: FluidData
        T: Temperature (K), scalar or array
    """
    T = convert_to_numpy(T)
    _check_saturation_range(fluid, T, "liquid_density_boundary")
    x = 1.0 - T / fluid.constants.t_crit
    rho = np.zeros_like(T)
    for i, d in enumerate(fluid.ldens_coeffs):
        rho += d * x ** (i / 3.0)  # 0**0 == 1 at Tc
    return process_input(rho)


def saturation_temperature(fluid, P: float) -> float:
    """ Returns saturation temperature (K) for pressure P (Pa) """
    c = fluid.constants
    p_lo = saturation_pressure(fluid, c.t_min)
    p_hi = saturation_pressure(fluid, c.t_crit)
    if not p_lo <= P <= p_hi:
        raise DomainError(f"saturation_temperature: Pressure out of range. P = {P} Pa, valid {p_lo:.6g} - {p_hi:.6g} Pa")
    lnp = np.log(P)
    return brentq(lambda t: np.log(saturation_pressure(fluid, t)) - lnp, c.t_min, c.t_crit, xtol=1e-12)


def saturation_table(fluid, temps: npt.ArrayLike = None, n: int = 21, display: bool = False) -> pd.DataFrame:
    """ Returns DataFrame of saturation pressure and saturated liquid density
        fluid: FluidData
        temps: Temperatures (K). Defaults to n evenly spaced values from Tmin to Tc
        n: Number of rows when temps is not specified
        display: If True, prints the table
    """
    c = fluid.constants
    if temps is None:
        temps = np.linspace(c.t_min, c.t_crit, n)
    temps = convert_to_numpy(temps)
    df = pd.DataFrame()
    df["T (K)"] = temps
    df["Psat (Pa)"] = convert_to_numpy(saturation_pressure(fluid, temps))
    df["ldens (kg/m3)"] = convert_to_numpy(liquid_density_boundary(fluid, temps))
    if display:
        print(f"Saturation properties of {c.name}")
        print(tabulate(df, headers="keys", tablefmt="psql", showindex=False, floatfmt=".6g"))
    return df

#!/usr/bin/env python3
"""
Validation tests for the multi-region equation of state.
Run with: python3 -m pytest pypurefluid/tests/ -v
"""

import sys
import os
import math
import numpy as np
import pytest
from scipy.integrate import quad

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
import pypurefluid.eos as eos
from pypurefluid.classes import region_name, DomainError, UnimplementedRegionError, ContractViolation
from pypurefluid.fluids import get_fluid
from pypurefluid.saturation import saturation_pressure, liquid_density_boundary

HE = get_fluid('helium4')
C = HE.constants
TABLES = [HE.regions[r].table for r in region_name]

# =============================================================================
# Basis terms
# =============================================================================

def test_term_prime_matches_central_difference():
    """Analytic dC_j/dT agrees with a numerical derivative for every term and region"""
    for table in TABLES:
        for j in range(7):
            for T in [2.5, 4.0, 8.0, 20.0, 300.0]:
                h = 1e-6 * T
                numeric = (eos.term(table, j, T + h) - eos.term(table, j, T - h)) / (2 * h)
                analytic = eos.term_prime(table, j, T)
                scale = sum(abs(a) * T ** e * (abs(e) + 1) for a, e in zip(table.range(j), eos.EXPONENTS[j])) / T
                assert abs(numeric - analytic) <= 1e-6 * scale, \
                    f"j={j}, T={T}: numeric {numeric} vs analytic {analytic}"

def test_constant_terms_have_zero_derivative_part():
    """The constant coefficient of j = 4..6 contributes to C_j but not to C_j'"""
    table = HE.regions[region_name.I].table
    T = 7.0
    assert abs(eos.term(table, 4, T) - (table.rho6[0] + table.rho6[1] / T)) < 1e-15
    assert abs(eos.term_prime(table, 4, T) - (-table.rho6[1] / T ** 2)) < 1e-15
    expected = -table.core5[1] / T ** 2 - 2 * table.core5[2] / T ** 3
    assert abs(eos.term_prime(table, 6, T) - expected) < 1e-15

def test_density_multiplier_forms():
    rho, gamma = 20.0, 1.5e-4
    for j in range(5):
        assert eos.density_multiplier(j, rho, gamma) == rho ** (j + 2)
    e = math.exp(-gamma * rho ** 2)
    assert abs(eos.density_multiplier(5, rho, gamma) - rho ** 3 * e) < 1e-9
    assert abs(eos.density_multiplier(6, rho, gamma) - rho ** 5 * e) < 1e-6

def test_density_integral_matches_quadrature():
    """I_j is the integral of H_j / rho^2 from 0 to rho"""
    for gamma in [HE.regions[region_name.I].table.gamma, HE.regions[region_name.III].table.gamma]:
        for rho in [10.0, 30.0, 140.0]:
            for j in range(7):
                numeric, _ = quad(lambda r: eos.density_multiplier(j, r, gamma) / r ** 2, 0, rho, epsabs=0, epsrel=1e-12)
                analytic = eos.density_integral(j, rho, gamma)
                assert abs(numeric - analytic) <= 1e-9 * abs(analytic), f"j={j}, rho={rho}"

def test_bad_basis_index_is_contract_violation():
    table = TABLES[0]
    for f, args in [(eos.term, (table, 7, 4.0)),
                    (eos.term_prime, (table, -1, 4.0)),
                    (eos.density_multiplier, (7, 10.0, 1e-4)),
                    (eos.density_integral, (2.0, 10.0, 1e-4))]:
        with pytest.raises(ContractViolation):
            f(*args)

def test_contract_violation_is_not_a_domain_error():
    assert not issubclass(ContractViolation, ValueError)
    assert issubclass(UnimplementedRegionError, DomainError)

# =============================================================================
# Region selection
# =============================================================================

def test_region_selection_bands():
    cases = [
        (3.0, 10.0, region_name.I),
        (3.0, 145.0, region_name.II),
        (C.t_min, 1.0, region_name.I),
        (C.t_crit, C.rho_crit, region_name.I),
        (C.t_crit, 70.0, region_name.II),
        (8.0, 50.0, region_name.I),
        (8.0, 100.0, region_name.II),
        (10.0, 10.0, region_name.I),
        (15.0, 10.0, region_name.III),
        (C.t_max, 1.0, region_name.III),
    ]
    for T, rho, expected in cases:
        assert eos.select_region(HE, T, rho).name == expected, f"T={T}, rho={rho}"

def test_liquid_density_boundary_is_inclusive_below():
    T = 4.0
    rho_l = liquid_density_boundary(HE, T)
    assert eos.select_region(HE, T, rho_l).name == region_name.I
    assert eos.select_region(HE, T, rho_l * (1 + 1e-12)).name == region_name.II

def test_region_selection_out_of_domain():
    for T, rho in [(1.0, 10.0), (2.0, 10.0), (1600.0, 1.0), (4.0, 0.0), (4.0, -1.0),
                   (float('nan'), 10.0), (4.0, float('inf'))]:
        with pytest.raises(DomainError):
            eos.select_region(HE, T, rho)

def test_unimplemented_band():
    for T in [10.5, 12.0, 14.999]:
        with pytest.raises(UnimplementedRegionError):
            eos.select_region(HE, T, 10.0)
        with pytest.raises(DomainError):
            eos.pressure(HE, T, 10.0)

def test_selection_is_repeatable():
    """Interleaved calls at different states do not affect each other"""
    a = eos.pressure(HE, 4.0, 13.5)
    eos.pressure(HE, 4.0, 145.0)
    eos.pressure(HE, 300.0, 1.0)
    assert eos.pressure(HE, 4.0, 13.5) == a
    u = eos.internal_energy(HE, 4.0, 13.5)
    eos.internal_energy(HE, 4.0, 145.0)
    assert eos.internal_energy(HE, 4.0, 13.5) == u

# =============================================================================
# Properties
# =============================================================================

def test_properties_finite_over_domain():
    for T in [2.2, 3.0, 4.0, 5.0, C.t_crit, 6.0, 8.0, 10.0, 15.0, 50.0, 300.0, 1500.0]:
        for rho in [0.1, 1.0, 10.0, 50.0, C.rho_crit, 100.0, 150.0]:
            p = eos.properties(HE, T, rho)
            for key in ["P", "u", "s", "h"]:
                assert np.isfinite(p[key]), f"{key} not finite at T={T}, rho={rho}"

def test_pressure_near_saturation_at_4K():
    """Saturated vapour density at 4 K gives a pressure close to Psat"""
    T, rho = 4.0, 13.5
    assert rho < liquid_density_boundary(HE, T)
    P = eos.pressure(HE, T, rho)
    psat = saturation_pressure(HE, T)
    assert P > 0
    assert abs(P - psat) / psat < 0.05, f"P={P}, Psat={psat}"

def test_below_minimum_temperature_fails():
    for f in [eos.pressure, eos.internal_energy, eos.entropy, eos.enthalpy]:
        with pytest.raises(DomainError):
            f(HE, 1.0, 10.0)

def test_critical_point():
    P = eos.pressure(HE, C.t_crit, C.rho_crit)
    assert abs(P - C.p_crit) / C.p_crit < 0.01, f"P(Tc, rho_c) = {P}"

def test_continuity_across_critical_temperature():
    """The Tmin-Tc band and the Tc-10 K band agree at T = Tc for region I densities"""
    T_below = C.t_crit * (1 - 1e-9)
    for rho in [5.0, 20.0, 50.0, 66.0]:
        below = eos.properties(HE, T_below, rho)
        above = eos.properties(HE, C.t_crit, rho)
        assert below["region"] == above["region"] == region_name.I
        for key in ["P", "u", "s"]:
            assert abs(below[key] - above[key]) <= 1e-6 * abs(above[key]), f"{key} at rho={rho}"

def test_region_I_and_region_III_tables_agree_at_critical_point():
    """Region I and region III tables both reproduce the critical state.
    Region II, which meets region I there, does not: it gives P ~ 2.03 MPa at (Tc, rho_c)
    against Pc = 0.227 MPa, the discontinuity noted in fluids/helium4.py"""
    r1, r3 = HE.regions[region_name.I], HE.regions[region_name.III]
    T, rho = C.t_crit, C.rho_crit
    p1, p3 = eos.pressure(HE, T, rho, r1), eos.pressure(HE, T, rho, r3)
    assert abs(p1 - p3) / p1 < 1e-3
    u1, u3 = eos.internal_energy(HE, T, rho, region=r1), eos.internal_energy(HE, T, rho, region=r3)
    assert abs(u1 - u3) / abs(u1) < 1e-2
    s1, s3 = eos.entropy(HE, T, rho, region=r1), eos.entropy(HE, T, rho, region=r3)
    assert abs(s1 - s3) / abs(s1) < 1e-2

def test_ideal_gas_limit():
    T, rho = 300.0, 1e-3
    P = eos.pressure(HE, T, rho)
    assert abs(P - rho * HE.reference.R * T) / P < 1e-4

def test_energy_and_pressure_are_consistent():
    """(du/drho)_T = (P - T (dP/dT)_rho) / rho^2 for each region table"""
    for name, T, rho in [(region_name.I, 6.0, 30.0), (region_name.II, 8.0, 100.0), (region_name.III, 300.0, 50.0)]:
        region = HE.regions[name]
        hr, ht = 1e-4 * rho, 1e-5 * T
        dudr = (eos.internal_energy(HE, T, rho + hr, region=region)
                - eos.internal_energy(HE, T, rho - hr, region=region)) / (2 * hr)
        dpdt = (eos.pressure(HE, T + ht, rho, region) - eos.pressure(HE, T - ht, rho, region)) / (2 * ht)
        rhs = (eos.pressure(HE, T, rho, region) - T * dpdt) / rho ** 2
        scale = abs(eos.pressure(HE, T, rho, region)) / rho ** 2
        assert abs(dudr - rhs) <= 1e-6 * scale, f"{name}: {dudr} vs {rhs}"

def test_entropy_and_pressure_are_consistent():
    """(ds/drho)_T = -(dP/dT)_rho / rho^2 for each region table"""
    for name, T, rho in [(region_name.I, 6.0, 30.0), (region_name.II, 8.0, 100.0), (region_name.III, 300.0, 50.0)]:
        region = HE.regions[name]
        hr, ht = 1e-4 * rho, 1e-5 * T
        dsdr = (eos.entropy(HE, T, rho + hr, region=region) - eos.entropy(HE, T, rho - hr, region=region)) / (2 * hr)
        dpdt = (eos.pressure(HE, T + ht, rho, region) - eos.pressure(HE, T - ht, rho, region)) / (2 * ht)
        assert abs(dsdr + dpdt / rho ** 2) <= 1e-6 * abs(dpdt) / rho ** 2, f"{name}"

def test_enthalpy_and_offsets():
    T, rho = 20.0, 5.0
    u = eos.internal_energy(HE, T, rho)
    P = eos.pressure(HE, T, rho)
    assert abs(eos.enthalpy(HE, T, rho) - (u + P / rho)) < 1e-9 * abs(u)
    assert abs(eos.internal_energy(HE, T, rho, offset=1000.0) - (u + 1000.0)) < 1e-9
    s = eos.entropy(HE, T, rho)
    assert abs(eos.entropy(HE, T, rho, offset=-50.0) - (s - 50.0)) < 1e-9

def test_reference_state():
    """At To and vanishing density u -> u0"""
    ref = HE.reference
    u = eos.internal_energy(HE, ref.To, 1e-8)
    assert abs(u - ref.u0) / ref.u0 < 1e-6

def test_properties_dict():
    p = eos.properties(HE, 300.0, 1.0, energy_offset=10.0, entropy_offset=1.0)
    assert p["region"] == region_name.III
    assert abs(p["u"] - eos.internal_energy(HE, 300.0, 1.0, 10.0)) < 1e-9
    assert abs(p["s"] - eos.entropy(HE, 300.0, 1.0, 1.0)) < 1e-9
    assert abs(p["h"] - (p["u"] + p["P"] / 1.0)) < 1e-6

"""
Linear wave theory helpers.

Dispersion relation for surface gravity waves:
    omega^2 = g * k * tanh(k * h)

with omega = 2 * pi / T, k the wavenumber (1/m) and h the water depth (m).
"""
import numpy as np

# Gravitational acceleration (m/s^2)
G = 9.81

# Depth treated as infinite (m)
DEEP_WATER_DEPTH = 1000.0

def deep_water_wavelength(period: float) -> float:
    """L0 = g * T^2 / (2 * pi)"""
    if period <= 0:
        return 0.0
    return G * period ** 2 / (2.0 * np.pi)

def solve_dispersion(period: float, depth: float, tol: float = 1e-9, max_iter: int = 100) -> float:
    """
    Solve the dispersion relation for wavenumber k.

    Newton-Raphson seeded with the deep water wavenumber omega^2 / g.
    Returns 0.0 for non-physical inputs.
    """
    if period <= 0 or depth <= 0:
        return 0.0

    omega = 2.0 * np.pi / period
    k0 = omega ** 2 / G

    if depth > DEEP_WATER_DEPTH:
        return float(k0)

    # Shallow water seed converges faster when k0 * h is small
    k = k0 if k0 * depth > 1.0 else omega / np.sqrt(G * depth)

    for _ in range(max_iter):
        kh = k * depth
        f = omega ** 2 - G * k * np.tanh(kh)
        df = -G * np.tanh(kh) - G * kh / np.cosh(kh) ** 2
        if abs(df) < 1e-12:
            break

        k_new = k - f / df
        if k_new <= 0:
            k_new = k / 2.0

        if abs(k_new - k) < tol:
            k = k_new
            break
        k = k_new

    return float(k)

def group_speed(period: float, depth: float) -> float:
    """
    Group velocity in finite depth:
        cg = 0.5 * c * (1 + 2kh / sinh(2kh))
    """
    if period <= 0:
        return 0.0

    omega = 2.0 * np.pi / period
    k = solve_dispersion(period, depth)
    if k <= 0:
        return 0.0

    c = omega / k
    kh = k * depth

    # Deep water limit, also keeps sinh from overflowing
    if kh > 10:
        return float(0.5 * c)

    return float(0.5 * c * (1.0 + 2.0 * kh / np.sinh(2.0 * kh)))

def deep_water_group_speed(period: float) -> float:
    """cg0 = g * T / (4 * pi)"""
    if period <= 0:
        return 0.0
    return G * period / (4.0 * np.pi)

def shoaling_coefficient(period: float, depth: float) -> float:
    """Ks = sqrt(cg0 / cg), the height amplification from deep water to depth."""
    cg = group_speed(period, depth)
    if cg <= 0:
        return 0.0
    return float(np.sqrt(deep_water_group_speed(period) / cg))

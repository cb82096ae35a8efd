"""
hx-calc configuration and constants.

All states are computed at a fixed standard atmosphere; there is no unit
system switch. Units: °C, g/kg dry air, kJ/kg dry air, %, Pa.
"""

# Ambient (atmospheric) pressure
P_AMB = 101325.0  # Pa

# Magnus saturation vapour pressure parameters:
#   p_s = MAGNUS_P0 * exp(MAGNUS_A * t / (MAGNUS_B + t))
MAGNUS_A = 17.62
MAGNUS_B = 243.12  # °C
MAGNUS_P0 = 611.2  # Pa

# Ratio of the gas constants of dry air and water vapour (R_a / R_v)
GAS_CONSTANT_RATIO = 0.622

# Enthalpy model: h = CP_AIR * t + x_kg * (L0 + CP_VAPOR * t)
CP_AIR = 1.006  # kJ/(kg·K), dry air
L0 = 2501.0  # kJ/kg, latent heat of vaporisation at 0 °C
CP_VAPOR = 1.86  # kJ/(kg·K), water vapour

# g/kg <-> kg/kg
GRAMS_PER_KG = 1000.0

# Decimal places used for the display strings of a process result
DISPLAY_DECIMALS = {
    "t": 2,
    "x": 3,
    "h": 2,
    "phi": 2,
    "q": 2,
    "dw": 3,
}

# Local frontend dev servers allowed by CORS
CORS_ORIGINS = [
    "http://localhost:5173",  # Vite default
    "http://localhost:3000",
    "http://127.0.0.1:5173",
    "http://127.0.0.1:3000",
]

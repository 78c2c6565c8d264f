"""Physical constants and fixed model parameters used throughout VCRC.

All values in SI units unless otherwise noted.
"""

# Atmospheric
P_ATM = 101325.0  # Pa, standard atmosphere

# Thermodynamic
T_CELSIUS_OFFSET = 273.15  # K

# Conversion factors
BAR_TO_PA = 1.0e5
PA_TO_BAR = 1.0e-5
MPA_TO_PA = 1.0e6
PA_TO_MPA = 1.0e-6

# Component limits
MAX_TEMPERATURE_DIFFERENCE = 50.0  # K, superheat, subcooling and approach limit
GLIDE_THRESHOLD = 0.01  # K, glide-free below this

# Ejector
EJECTOR_MIXING_PRESSURE_RATIO = 0.9  # mixing section / suction inlet

# Default R744 gas cooler pressure correlation, P[bar] = a·T[°C] + b
R744_GAS_COOLER_SLOPE = 2.759  # bar/K
R744_GAS_COOLER_OFFSET = -9.912  # bar
R744_GAS_COOLER_MAX_TEMPERATURE = 60.0 + T_CELSIUS_OFFSET  # K

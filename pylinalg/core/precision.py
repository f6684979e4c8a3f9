"""
Numerical precision constants.

Both Vector and Matrix store their values in float64 arrays. Keeping the
storage dtype in one place means the two components never disagree on it.
"""

import numpy as np


# Storage dtype for every Vector and Matrix
DTYPE = np.float64

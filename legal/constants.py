"""Named constants for legal description assembly.

Angles are in radians unless noted.
"""

# Tangency
TANGENT_TOLERANCE = 1e-9          # max |prev - entry| still treated as tangent
THREAD_EXIT_TANGENTS = False      # False: every preamble compares against 0.0

# Report defaults (CLI)
DEFAULT_CITY = "NORTH LITTLE ROCK"
DEFAULT_COUNTY = "PULASKI"
DEFAULT_STATE = "ARKANSAS"
DEFAULT_COMMENCEMENT_UNIT = "FEET"  # unit of the --cdist leg

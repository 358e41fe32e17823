# Debug-only check performed by the unchecked ``unsafe`` constructors
UNIT_LENGTH_TOLERANCE = 1e-9

# Allowed deviation from unit length / orthogonality when reading JSON
DESERIALIZE_TOLERANCE = 1e-6

"""Numerical tolerances used by the geometry routines."""

# Arc center solver
ARC_RADIUS_EPSILON = 0.001    # chord may exceed the diameter by this much before failing

# Ellipse intercepts
ELLIPSE_PRECISION = 14        # decimal places when checking x²/a² + y²/b² == 1

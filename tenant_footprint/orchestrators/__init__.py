"""Orchestration of the geometry core and the provider adapters.

1. Preview: ring → area → viewport outline → bounding rect → bands
2. Annotation: ring → centroid → address → business recommendations
"""

"""Tenant Footprint.

Map annotation backend: estimates the floor area of polygons drawn over a
map and subdivides that area into proportional bands, one per tenant, for
preview rendering. Reverse geocoding and business lookup are pluggable
provider adapters.
"""

__version__ = "0.1.0"

"""
flysite - Paragliding site geometry
Launch wind arcs, site topology and the fact/decision boundary used to
decide which launches are flyable for a given wind.
"""

__version__ = "0.1.0"

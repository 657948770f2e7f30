# flysite/utils/coordinates.py
"""
Coordinate geometry for site records: haversine distance for area search
and the tolerance-box match used to flag launches and landings that share
a spot on the map.
"""
import numpy as np
from typing import List, Sequence, Tuple

from ..constants.compass import GeoConstants

class CoordinateCalculations:
    """A collection of static methods for coordinate-based calculations."""

    @staticmethod
    def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Calculates the Haversine distance between two points in kilometers."""
        R = GeoConstants.EARTH_RADIUS_KM
        d_lat = np.radians(lat2 - lat1)
        d_lon = np.radians(lon2 - lon1)
        a = np.sin(d_lat / 2)**2 + np.cos(np.radians(lat1)) * np.cos(np.radians(lat2)) * np.sin(d_lon / 2)**2
        c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
        return float(R * c)

    @staticmethod
    def coords_match(a: Tuple[float, float], b: Tuple[float, float], tolerance: float) -> bool:
        """
        Independent latitude/longitude deltas, both strictly below tolerance.
        A display heuristic, not a distance.
        """
        return abs(a[0] - b[0]) < tolerance and abs(a[1] - b[1]) < tolerance

    @staticmethod
    def match_matrix(rows: Sequence[Tuple[float, float]], cols: Sequence[Tuple[float, float]], tolerance: float) -> np.ndarray:
        """
        Boolean matrix M where M[i, j] is coords_match(rows[i], cols[j]).
        Shape is (len(rows), len(cols)); either side may be empty.
        """
        row_arr = np.asarray(rows, dtype=float).reshape(-1, 2)
        col_arr = np.asarray(cols, dtype=float).reshape(-1, 2)
        deltas = np.abs(row_arr[:, np.newaxis, :] - col_arr[np.newaxis, :, :])
        return np.all(deltas < tolerance, axis=2)

    @staticmethod
    def any_match(rows: Sequence[Tuple[float, float]], cols: Sequence[Tuple[float, float]], tolerance: float) -> List[bool]:
        """For each row coordinate, whether any column coordinate matches it."""
        matrix = CoordinateCalculations.match_matrix(rows, cols, tolerance)
        return [bool(flag) for flag in matrix.any(axis=1)]

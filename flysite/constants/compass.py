# flysite/constants/compass.py

class CompassConstants:
    """Compass rose and wind-scoring constants."""

    # 16-point compass, plus the German "O" (Ost) used by DHV site records
    POINTS = {
        'N': 0.0, 'NNE': 22.5, 'NE': 45.0, 'ENE': 67.5,
        'E': 90.0, 'ESE': 112.5, 'SE': 135.0, 'SSE': 157.5,
        'S': 180.0, 'SSW': 202.5, 'SW': 225.0, 'WSW': 247.5,
        'W': 270.0, 'WNW': 292.5, 'NW': 315.0, 'NNW': 337.5,
        'O': 90.0,
    }
    POINT_NAMES = [
        'N', 'NNE', 'NE', 'ENE', 'E', 'ESE', 'SE', 'SSE',
        'S', 'SSW', 'SW', 'WSW', 'W', 'WNW', 'NW', 'NNW',
    ]
    TEXT_SEPARATORS = ',- '

    TICK_BEARINGS = [0, 45, 90, 135, 180, 225, 270, 315]
    CARDINAL_LABELS = {'N': 0, 'E': 90, 'S': 180, 'W': 270}

    FULL_CIRCLE_DEG = 360.0
    HALF_CIRCLE_DEG = 180.0
    # Planar angle 0 points east; bearing 0 points north
    PLANAR_OFFSET_DEG = 90.0

class WindConstants:
    """Thresholds used by the embedded rule engine."""
    MS_TO_KMH = 3.6
    IDEAL_SPEED_KMH = 10.0
    SPEED_PENALTY_PER_KMH = 5.0
    MAX_GUST_KMH = 40.0
    MAX_SCORE = 100

class GeoConstants:
    EARTH_RADIUS_KM = 6371.0
    # ~11 m at the equator
    DEFAULT_COINCIDENCE_TOLERANCE_DEG = 1e-4
    DEFAULT_LATITUDE = 47.0
    DEFAULT_LONGITUDE = 10.0

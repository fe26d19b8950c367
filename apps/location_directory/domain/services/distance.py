"""Great-circle distance.

저장소와 무관한 순수 함수로 거리 계산을 수행합니다.
"""

from __future__ import annotations

import math

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """두 좌표 간 거리를 km로 계산합니다 (Haversine).

    부동소수점 오차로 sqrt/asin 인자가 [0, 1]을 벗어나지 않도록 clamp 합니다.
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)
    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    a = min(1.0, max(0.0, a))
    return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(a)))

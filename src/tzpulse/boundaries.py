"""Embedded timezone boundary data.

Record shape (one dict per boundary, consumed by ``catalog.load_catalog``):

    id        IANA identifier, unique across records ("Europe/London")
    name      Display name ("Greenwich Mean Time")
    color     "#rrggbb" canonical colour
    vertices  Sequence of (lat, lng) pairs in degrees, at least 3, not
              repeating the first vertex at the end
    center    Optional (lat, lng); defaults to the vertex centroid

``RELATED_GROUPS`` maps a canonical record id to the identifiers that share
its boundary and colour. Any other data source producing the same shapes can
be passed to ``load_catalog`` instead.

Polygons are coarse approximations for a dashboard overlay, not legal
boundaries. Centres are major cities and sit inside their own polygon and
no other. Group members share the canonical zone's UTC offset all year.
"""

BOUNDARY_RECORDS: tuple[dict, ...] = (
    # North America
    {
        "id": "America/Los_Angeles",
        "name": "Pacific Time",
        "color": "#3b82f6",
        "center": (34.05, -118.24),
        "vertices": (
            (60, -135), (30, -135), (30, -125), (32, -120), (32.5, -118),
            (32.5, -117), (33, -116), (33.5, -115), (35, -114.5), (38, -114),
            (42, -114), (49, -117), (52, -120), (55, -125),
        ),
    },
    {
        "id": "America/Denver",
        "name": "Mountain Time",
        "color": "#10b981",
        "center": (39.74, -104.99),
        "vertices": (
            (60, -114), (42, -114), (38, -114), (35, -114.5), (33.5, -115),
            (32, -114), (31, -107), (30, -105), (30, -103), (49, -103),
            (60, -103),
        ),
    },
    {
        "id": "America/Chicago",
        "name": "Central Time",
        "color": "#f59e0b",
        "center": (41.88, -87.63),
        "vertices": (
            (60, -103), (49, -103), (30, -103), (28, -101), (26, -99),
            (25.5, -97), (26, -95), (28, -92), (29, -90), (30, -87.5),
            (36, -86.5), (42, -86.5), (49, -89), (60, -89),
        ),
    },
    {
        "id": "America/New_York",
        "name": "Eastern Time",
        "color": "#8b5cf6",
        "center": (40.71, -74.01),
        "vertices": (
            (60, -89), (49, -89), (42, -86.5), (36, -86.5), (30, -87.5),
            (27, -83), (25, -80), (25, -76), (31, -78), (35, -74),
            (40, -72), (41, -69), (44, -66), (47, -67), (60, -71),
        ),
    },
    {
        "id": "America/Halifax",
        "name": "Atlantic Time",
        "color": "#6366f1",
        "center": (44.65, -63.58),
        "vertices": ((48, -67), (48, -59), (43, -59), (43, -66), (44, -66), (47, -67)),
    },
    {
        "id": "America/Mexico_City",
        "name": "Mexico Central Time",
        "color": "#eab308",
        "center": (19.43, -99.13),
        "vertices": (
            (25, -106), (25.5, -97), (21, -97), (18, -94), (15, -92),
            (16, -98), (20, -105.5),
        ),
    },
    # South America
    {
        "id": "America/Lima",
        "name": "Peru Time",
        "color": "#f97316",
        "center": (-12.05, -77.04),
        "vertices": ((12, -80), (12, -70), (-2, -70), (-17, -69), (-17, -76), (-5, -82)),
    },
    {
        "id": "America/Santiago",
        "name": "Chile Time",
        "color": "#0ea5e9",
        "center": (-33.45, -70.67),
        "vertices": ((-17, -76), (-17, -68), (-56, -66), (-56, -76)),
    },
    {
        "id": "America/Sao_Paulo",
        "name": "Brasilia Time",
        "color": "#84cc16",
        "center": (-23.55, -46.63),
        "vertices": (
            (-20, -60), (-15, -55), (-10, -50), (-8, -45), (-10, -40),
            (-15, -35), (-25, -35), (-30, -40), (-33, -45), (-33, -50),
            (-30, -55), (-25, -60),
        ),
    },
    # Europe
    {
        # Britain, Ireland and Portugal
        "id": "Europe/London",
        "name": "Greenwich Mean Time",
        "color": "#ef4444",
        "center": (51.5, -0.1),
        "vertices": (
            (65, -12), (48, -12), (43, -10), (36.5, -10), (37, -7.4),
            (42, -6.5), (43.5, -8), (48, -5), (51, 2), (53, 1), (55, 0),
            (58, -2), (60, -5), (62, -8),
        ),
    },
    {
        "id": "Europe/Paris",
        "name": "Central European Time",
        "color": "#f97316",
        "center": (48.85, 2.35),
        "vertices": (
            (70, 2), (51, 2), (48, -5), (43.5, -8), (42, -6.5), (37, -7.4),
            (36, -6), (36, 0), (36, 4), (36, 8), (38, 14), (40, 19),
            (45, 22), (52, 22), (58, 20), (65, 14), (70, 8),
        ),
    },
    {
        "id": "Europe/Helsinki",
        "name": "Eastern European Time",
        "color": "#06b6d4",
        "center": (60.17, 24.94),
        "vertices": (
            (70, 28), (60, 30), (56, 28), (52, 32), (46, 30), (44, 29),
            (41, 26), (36, 26), (36, 22), (40, 19), (45, 22), (52, 22),
            (58, 20), (65, 22), (70, 22),
        ),
    },
    {
        "id": "Europe/Moscow",
        "name": "Moscow Time",
        "color": "#0ea5e9",
        "center": (55.75, 37.62),
        "vertices": (
            (70, 28), (70, 35), (65, 42), (58, 48), (50, 48), (45, 45),
            (40, 40), (40, 36), (44, 29), (46, 30), (52, 32), (56, 28),
            (60, 30),
        ),
    },
    # Africa
    {
        "id": "Africa/Casablanca",
        "name": "Morocco Time",
        "color": "#f59e0b",
        "center": (33.57, -7.59),
        "vertices": ((35.9, -6), (35, -1.5), (28, -1.5), (27.5, -13.5), (32, -10), (34, -8)),
    },
    {
        "id": "Africa/Lagos",
        "name": "West Africa Time",
        "color": "#eab308",
        "center": (6.45, 3.40),
        "vertices": ((14, 2), (14, 16), (-5, 20), (-18, 20), (-18, 12), (4, 2)),
    },
    {
        "id": "Africa/Cairo",
        "name": "Egypt Time",
        "color": "#d946ef",
        "center": (30.04, 31.24),
        "vertices": (
            (31.7, 25), (22, 25), (22, 36.5), (29.5, 35), (31.3, 34.2),
            (31.5, 32), (31.7, 28),
        ),
    },
    {
        "id": "Africa/Nairobi",
        "name": "East Africa Time",
        "color": "#22c55e",
        "center": (-1.29, 36.82),
        "vertices": ((12, 34), (12, 51), (-2, 42), (-11, 40), (-11, 29), (4, 29)),
    },
    {
        "id": "Africa/Johannesburg",
        "name": "South Africa Time",
        "color": "#10b981",
        "center": (-26.2, 28.05),
        "vertices": ((-8, 20), (-8, 40), (-27, 33), (-35, 28), (-35, 18), (-18, 12)),
    },
    # Asia
    {
        "id": "Asia/Riyadh",
        "name": "Arabia Time",
        "color": "#84cc16",
        "center": (24.71, 46.67),
        "vertices": (
            (31, 37), (30, 48), (24, 51), (22, 52), (19, 52), (16, 52),
            (12, 44), (16, 42), (28, 35),
        ),
    },
    {
        "id": "Asia/Dubai",
        "name": "Gulf Time",
        "color": "#f59e0b",
        "center": (25.2, 55.27),
        "vertices": ((26.5, 52), (26.5, 60), (17, 60), (16.5, 53), (22, 52.5), (24, 52)),
    },
    {
        "id": "Asia/Karachi",
        "name": "Pakistan Time",
        "color": "#22c55e",
        "center": (24.86, 67.01),
        "vertices": ((35, 63), (35, 68), (30, 68), (22, 70), (24, 63)),
    },
    {
        "id": "Asia/Kolkata",
        "name": "Indian Standard Time",
        "color": "#14b8a6",
        "center": (28.61, 77.21),
        "vertices": (
            (40, 68), (30, 68), (22, 70), (15, 72), (8, 75), (8, 80),
            (10, 85), (14, 90), (18, 92), (22, 92), (28, 90), (33, 85),
            (36, 80), (38, 72),
        ),
    },
    {
        "id": "Asia/Bangkok",
        "name": "Indochina Time",
        "color": "#3b82f6",
        "center": (13.75, 100.5),
        "vertices": (
            (20, 97), (23, 102), (22, 107), (17, 107.5), (10, 109), (8, 105),
            (6, 100.5), (6, 99), (10, 98.5), (16, 97.5),
        ),
    },
    {
        "id": "Asia/Jakarta",
        "name": "Western Indonesia Time",
        "color": "#ef4444",
        "center": (-6.21, 106.85),
        "vertices": ((6, 95), (2, 104), (2, 112), (-3, 115), (-9, 115), (-7, 105), (-2, 98)),
    },
    {
        "id": "Asia/Shanghai",
        "name": "China Standard Time",
        "color": "#a855f7",
        "center": (31.23, 121.47),
        "vertices": (
            (55, 73), (45, 73), (35, 75), (28, 80), (25, 85), (22, 90),
            (20, 95), (18, 100), (18, 105), (18, 110), (20, 115), (22, 120),
            (30, 125), (35, 130), (40, 130), (45, 125), (50, 120), (52, 115),
            (55, 110), (55, 90), (55, 80),
        ),
    },
    {
        "id": "Asia/Tokyo",
        "name": "Japan Standard Time",
        "color": "#ec4899",
        "center": (35.68, 139.76),
        "vertices": (
            (34, 127), (30, 130), (30, 132), (31, 134), (32, 136), (33, 138),
            (34, 140), (35, 142), (40, 145), (44, 147), (48, 145), (47, 141),
            (44, 137), (40, 133), (36, 130),
        ),
    },
    # Oceania
    {
        "id": "Australia/Perth",
        "name": "Western Australia Time",
        "color": "#a855f7",
        "center": (-31.95, 115.86),
        "vertices": ((-13, 113), (-13, 129), (-36, 129), (-36, 113)),
    },
    {
        "id": "Australia/Adelaide",
        "name": "Central Australia Time",
        "color": "#d946ef",
        "center": (-34.93, 138.6),
        "vertices": ((-10, 129), (-10, 138), (-26, 138), (-26, 141), (-38, 141), (-38, 129)),
    },
    {
        "id": "Australia/Sydney",
        "name": "Eastern Australia Time",
        "color": "#06b6d4",
        "center": (-33.87, 151.21),
        "vertices": (
            (-45, 141), (-38, 141), (-34, 142), (-30, 145), (-28, 148),
            (-28, 150), (-28, 153), (-30, 155), (-34, 155), (-38, 153),
            (-40, 150), (-42, 148), (-44, 145),
        ),
    },
    {
        "id": "Pacific/Auckland",
        "name": "New Zealand Time",
        "color": "#6366f1",
        "center": (-36.85, 174.76),
        "vertices": ((-34, 166), (-34, 179), (-48, 179), (-48, 166)),
    },
    {
        "id": "Pacific/Honolulu",
        "name": "Hawaii-Aleutian Time",
        "color": "#f43f5e",
        "center": (21.31, -157.86),
        "vertices": ((18, -161), (23, -161), (23, -154), (18, -154)),
    },
    {
        # Straddles the antimeridian
        "id": "Pacific/Fiji",
        "name": "Fiji Time",
        "color": "#22c55e",
        "center": (-17.71, 178.06),
        "vertices": ((-12, 175), (-12, -178), (-22, -178), (-22, 175)),
    },
)

RELATED_GROUPS: dict[str, tuple[str, ...]] = {
    "America/Los_Angeles": ("America/Vancouver", "America/Tijuana"),
    "America/Denver": ("America/Edmonton", "America/Yellowknife", "America/Boise"),
    "America/Chicago": ("America/Winnipeg", "America/Matamoros"),
    "America/New_York": (
        "America/Toronto", "America/Montreal", "America/Detroit",
        "America/Indiana/Indianapolis",
    ),
    "America/Halifax": ("America/Moncton", "Atlantic/Bermuda"),
    "America/Lima": ("America/Bogota", "America/Guayaquil", "America/Panama"),
    "America/Sao_Paulo": (
        "America/Bahia", "America/Fortaleza", "America/Argentina/Buenos_Aires",
    ),
    "Europe/London": ("Europe/Dublin", "Europe/Lisbon", "Atlantic/Canary"),
    "Europe/Paris": (
        "Europe/Berlin", "Europe/Madrid", "Europe/Rome", "Europe/Amsterdam",
        "Europe/Brussels", "Europe/Vienna", "Europe/Stockholm", "Europe/Zurich",
        "Europe/Warsaw", "Europe/Prague", "Europe/Budapest", "Europe/Copenhagen",
    ),
    "Europe/Helsinki": (
        "Europe/Kyiv", "Europe/Tallinn", "Europe/Riga", "Europe/Vilnius",
        "Europe/Sofia", "Europe/Bucharest", "Europe/Athens",
    ),
    "Europe/Moscow": ("Europe/Minsk", "Europe/Istanbul"),
    "Africa/Lagos": ("Africa/Kinshasa", "Africa/Douala", "Africa/Luanda", "Africa/Algiers"),
    "Africa/Nairobi": ("Africa/Addis_Ababa", "Africa/Dar_es_Salaam", "Africa/Kampala"),
    "Africa/Johannesburg": ("Africa/Maputo", "Africa/Harare", "Africa/Lusaka"),
    "Asia/Riyadh": ("Asia/Kuwait", "Asia/Qatar", "Asia/Baghdad", "Asia/Aden"),
    "Asia/Dubai": ("Asia/Muscat",),
    "Asia/Karachi": ("Asia/Tashkent",),
    "Asia/Kolkata": ("Asia/Colombo",),
    "Asia/Bangkok": ("Asia/Ho_Chi_Minh", "Asia/Phnom_Penh", "Asia/Vientiane"),
    "Asia/Jakarta": ("Asia/Pontianak",),
    "Asia/Tokyo": ("Asia/Seoul", "Asia/Pyongyang", "Pacific/Palau"),
    "Asia/Shanghai": (
        "Asia/Hong_Kong", "Asia/Macau", "Asia/Taipei", "Asia/Singapore",
        "Asia/Kuala_Lumpur", "Asia/Manila", "Asia/Brunei",
    ),
    "Australia/Adelaide": ("Australia/Broken_Hill",),
    "Australia/Sydney": ("Australia/Melbourne", "Australia/Hobart"),
    "Pacific/Auckland": ("Antarctica/McMurdo",),
}

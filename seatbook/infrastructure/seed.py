"""
Built-in route catalog used when no ``catalog_file`` is configured.

Contains:
  - 9 routes across Cameroon (Yaoundé, Douala, Bamenda, Bafoussam, ...)
  - 2-3 departure points per route, each with pre-taken Classic / VIP seats

The records use the same JSON shape accepted by ``catalog_file``.
"""

ROUTES = [
    {
        "id": "1",
        "origin": "Yaoundé",
        "destinations": ["Douala"],
        "arrival": "Gare Routière Bonabéri",
        "fares": {"Classic": 3500, "VIP": 6000},
        "duration": "3h 45m",
        "bus_type": "Express",
        "departure_time": "06:30 AM",
        "arrival_time": "10:15 AM",
        "departure_points": [
            {"name": "Mvog-Ada", "seats_taken": {"Classic": ["1A", "1B", "2C", "3D", "6E"], "VIP": ["1A"]}},
            {"name": "Biyem-Assi", "seats_taken": {"Classic": ["4A", "4B"], "VIP": []}},
            {"name": "Olembe", "seats_taken": {"Classic": [], "VIP": ["2D", "2E"]}},
        ],
    },
    {
        "id": "2",
        "origin": "Douala",
        "destinations": ["Bafoussam"],
        "arrival": "Gare Routière Bafoussam",
        "fares": {"Classic": 4200, "VIP": 7000},
        "duration": "4h 30m",
        "bus_type": "Luxury",
        "departure_time": "08:00 AM",
        "arrival_time": "12:30 PM",
        "departure_points": [
            {"name": "Bonabéri", "seats_taken": {"Classic": ["8B", "9A", "9B"], "VIP": ["1C"]}},
            {"name": "Makepe", "seats_taken": {"Classic": ["2A"], "VIP": []}},
            {"name": "Akwa", "seats_taken": {"Classic": ["5A", "5B", "5C"], "VIP": ["3A"]}},
        ],
    },
    {
        "id": "3",
        "origin": "Yaoundé",
        "destinations": ["Bamenda"],
        "arrival": "Commercial Avenue Motor Park",
        "fares": {"Classic": 6500, "VIP": 9500},
        "duration": "6h 15m",
        "bus_type": "Standard",
        "departure_time": "09:00 AM",
        "arrival_time": "03:15 PM",
        "departure_points": [
            {"name": "Mvog-Ada", "seats_taken": {"Classic": ["14C", "14D"], "VIP": []}},
            {"name": "Mvan", "seats_taken": {"Classic": ["7B"], "VIP": ["7B"]}},
            {"name": "Nkomo", "seats_taken": {"Classic": [], "VIP": []}},
        ],
    },
    {
        "id": "4",
        "origin": "Douala",
        "destinations": ["Buéa"],
        "arrival": "Buea Motor Park",
        "fares": {"Classic": 2500, "VIP": 4000},
        "duration": "2h 30m",
        "bus_type": "Express",
        "departure_time": "01:00 PM",
        "arrival_time": "03:30 PM",
        "departure_points": [
            {"name": "Bonabéri", "seats_taken": {"Classic": ["5A"], "VIP": []}},
            {"name": "Deido", "seats_taken": {"Classic": [], "VIP": []}},
            {"name": "Bonanjo", "seats_taken": {"Classic": ["10E"], "VIP": ["10E"]}},
        ],
    },
    {
        "id": "5",
        "origin": "Bafoussam",
        "destinations": ["Garoua"],
        "arrival": "Gare Routière de Garoua",
        "fares": {"Classic": 8500, "VIP": 12000},
        "duration": "8h 00m",
        "bus_type": "VIP",
        "departure_time": "10:00 PM",
        "arrival_time": "06:00 AM",
        "departure_points": [
            {"name": "Centre-ville", "seats_taken": {"Classic": ["3D", "3E"], "VIP": ["1A", "1B", "1C"]}},
            {"name": "Tamdja", "seats_taken": {"Classic": [], "VIP": []}},
            {"name": "Djeleng", "seats_taken": {"Classic": ["12A"], "VIP": []}},
        ],
    },
    {
        "id": "6",
        "origin": "Yaoundé",
        "destinations": ["Bertoua"],
        "arrival": "Gare Routière Bertoua",
        "fares": {"Classic": 5500, "VIP": 8000},
        "duration": "5h 30m",
        "bus_type": "Standard",
        "departure_time": "07:30 AM",
        "arrival_time": "01:00 PM",
        "departure_points": [
            {"name": "Mvog-Ada", "seats_taken": {"Classic": [], "VIP": []}},
            {"name": "Mokolo", "seats_taken": {"Classic": ["6A", "6B"], "VIP": []}},
            {"name": "Mfoundi", "seats_taken": {"Classic": ["13C"], "VIP": ["4D"]}},
        ],
    },
    {
        "id": "7",
        "origin": "Douala",
        "destinations": ["Kribi"],
        "arrival": "Kribi Beach Motor Park",
        "fares": {"Classic": 3000, "VIP": 5000},
        "duration": "3h 00m",
        "bus_type": "Express",
        "departure_time": "02:00 PM",
        "arrival_time": "05:00 PM",
        "departure_points": [
            {"name": "Bonabéri", "seats_taken": {"Classic": ["1D", "1E"], "VIP": []}},
            {"name": "Bessengue", "seats_taken": {"Classic": [], "VIP": []}},
            {"name": "Logbaba", "seats_taken": {"Classic": ["11B"], "VIP": []}},
        ],
    },
    {
        "id": "8",
        "origin": "Bamenda",
        "destinations": ["Kumba"],
        "arrival": "Kumba Motor Park",
        "fares": {"Classic": 4500, "VIP": 7000},
        "duration": "4h 45m",
        "bus_type": "Luxury",
        "departure_time": "11:00 AM",
        "arrival_time": "03:45 PM",
        "departure_points": [
            {"name": "Commercial Avenue", "seats_taken": {"Classic": ["2B"], "VIP": []}},
            {"name": "Foncha Street", "seats_taken": {"Classic": [], "VIP": ["5E"]}},
            {"name": "Up Station", "seats_taken": {"Classic": ["9C", "9D"], "VIP": []}},
        ],
    },
    {
        "id": "9",
        "origin": "Bamenda",
        "destinations": ["Yaoundé", "Douala"],
        "arrival": "Gare Routière Mvan",
        "fares": {"Classic": 7000, "VIP": 10000},
        "duration": "7h 00m",
        "bus_type": "VIP",
        "departure_time": "06:00 AM",
        "arrival_time": "01:00 PM",
        "departure_points": [
            {
                "name": "Bamenda Park",
                "seats_taken": {
                    "Classic": ["1A", "1B", "1C", "2A", "2D", "3B", "4E", "5C", "7A", "9D"],
                    "VIP": ["1A", "1B"],
                },
            },
            {"name": "Nkwen Motor Park", "seats_taken": {"Classic": ["3A", "3B"], "VIP": []}},
        ],
    },
]

"""
Default records written when a collection is first provisioned.
"""

DEFAULT_GAMES = [
    {"gameId": "game_1", "name": "Car Dancing", "coins": "1", "minutes": 3, "rate": 30},
    {"gameId": "game_2", "name": "Horse Riding", "coins": "1", "minutes": 3, "rate": 30},
    {"gameId": "game_3", "name": "Elephant Riding", "coins": "1", "minutes": 3, "rate": 30},
    {"gameId": "game_4", "name": "Frog Hitter", "coins": "1", "minutes": 3, "rate": 30},
    {"gameId": "game_5", "name": "Ball Shooter", "coins": "1", "minutes": 3, "rate": 30},
    {"gameId": "game_6", "name": "Car Racing", "coins": "2", "minutes": 3, "rate": 60},
    {"gameId": "game_7", "name": "Dancing Roll", "coins": "1", "minutes": 3, "rate": 30},
    {"gameId": "game_8", "name": "Bike Racing", "coins": "2", "minutes": 3, "rate": 60},
    {"gameId": "game_9", "name": "Basket Ball", "coins": "1", "minutes": 1.5, "rate": 30},
    {"gameId": "game_10", "name": "Gun Shooter", "coins": "2", "minutes": 3, "rate": 40},
    {"gameId": "game_11", "name": "Bull Rider (18+)", "coins": "Ticket", "minutes": 5, "rate": 50},
    {"gameId": "game_12", "name": "Table Striker", "coins": "-", "minutes": 3, "rate": 100},
    {"gameId": "game_13", "name": "VR Game (18+)", "coins": "-", "minutes": 15, "rate": 100},
    {"gameId": "game_14", "name": "PS-4", "coins": "-", "minutes": 30, "rate": 200},
]


def _menu(item_id, name, category, price, description):
    return {
        "itemId": item_id,
        "name": name,
        "category": category,
        "price": price,
        "description": description,
        "available": True,
    }


DEFAULT_MENU_ITEMS = [
    _menu("menu_1", "Veg Biryani", "veg", 150, "Aromatic rice with mixed vegetables"),
    _menu("menu_2", "Paneer Butter Masala", "veg", 180, "Paneer in rich tomato gravy"),
    _menu("menu_3", "Dal Fry", "veg", 120, "Yellow lentils tempered with spices"),
    _menu("menu_4", "Veg Fried Rice", "veg", 130, "Stir fried rice with vegetables"),
    _menu("menu_5", "Jeera Rice", "veg", 100, "Basmati rice with cumin"),
    _menu("menu_6", "Butter Naan", "veg", 40, "Soft naan brushed with butter"),
    _menu("menu_7", "Chicken Biryani", "non-veg", 200, "Hyderabadi style chicken biryani"),
    _menu("menu_8", "Butter Chicken", "non-veg", 220, "Creamy tomato chicken curry"),
    _menu("menu_9", "Mutton Curry", "non-veg", 280, "Spicy mutton in rich gravy"),
    _menu("menu_10", "Fish Fry", "non-veg", 180, "Crispy fried fish"),
    _menu("menu_11", "Egg Curry", "non-veg", 140, "Eggs in spiced onion gravy"),
    _menu("menu_12", "Chicken Fried Rice", "non-veg", 160, "Stir fried rice with chicken"),
    _menu("menu_13", "Coca Cola", "drinks", 40, "300ml bottle"),
    _menu("menu_14", "Sprite", "drinks", 40, "300ml bottle"),
    _menu("menu_15", "Mango Lassi", "drinks", 60, "Sweet mango yogurt drink"),
    _menu("menu_16", "Fresh Lime Soda", "drinks", 50, "Refreshing lime soda"),
    _menu("menu_17", "Mineral Water", "drinks", 20, "500ml bottle"),
    _menu("menu_18", "Gulab Jamun", "desserts", 60, "2 pieces with sugar syrup"),
    _menu("menu_19", "Ice Cream", "desserts", 80, "Vanilla/Chocolate/Strawberry"),
    _menu("menu_20", "Kheer", "desserts", 70, "Rice pudding with nuts"),
]

DEFAULT_POOL_TYPES = [
    {
        "typeId": "pool_type_1",
        "name": "Kids Pool",
        "description": "For children aged 4-12 years",
        "ageRange": "4-12",
        "price": 150,
        "icon": "human-child",
    },
    {
        "typeId": "pool_type_2",
        "name": "Adults Pool",
        "description": "For ages 12 and above",
        "ageRange": "12+",
        "price": 200,
        "icon": "swim",
    },
]

DEFAULT_TAX_SETTINGS = [
    {"serviceId": "games", "serviceName": "Games", "taxPercent": 0, "description": "Game Zone"},
    {
        "serviceId": "restaurant",
        "serviceName": "Restaurant",
        "taxPercent": 5,
        "description": "Food & Dining",
    },
    {"serviceId": "bakery", "serviceName": "Bakery", "taxPercent": 5, "description": "Bakery Items"},
    {"serviceId": "juice", "serviceName": "Juice Bar", "taxPercent": 5, "description": "Fresh Juices"},
    {
        "serviceId": "massage",
        "serviceName": "Massage",
        "taxPercent": 18,
        "description": "Spa & Massage",
    },
    {"serviceId": "pool", "serviceName": "Pool", "taxPercent": 18, "description": "Swimming Pool"},
]

ROOM_FACILITIES = [
    "FREE BREAKFAST",
    "FREE PARKING",
    "LIVING AREA",
    "FREE WIFI",
    "RESTAURANTS",
    "24HRS SAFETY & SECURITY",
]


def _room(room_id, name, tamil_name, price, size):
    return {
        "roomId": room_id,
        "name": name,
        "tamilName": tamil_name,
        "price": price,
        "size": size,
        "facilities": list(ROOM_FACILITIES),
        "ac": True,
        "imageUrl": "",
        "descriptions": [],
        "subImages": [],
    }


DEFAULT_ROOMS = [
    _room("room_1", "Semi Suite Hut", "குறிஞ்சி இல்லம்", 4000, "256 SQ.FT"),
    _room("room_2", "Semi Suite Hut", "முல்லை இல்லம்", 4200, "260 SQ.FT"),
    _room("room_3", "Semi Suite Hut", "மருதம் இல்லம்", 3800, "250 SQ.FT"),
    _room("room_4", "Semi Suite Hut", "நெய்தல் இல்லம்", 4500, "280 SQ.FT"),
    _room("room_5", "Semi Suite Hut", "பாலை இல்லம்", 4000, "256 SQ.FT"),
    _room("room_6", "Luxury Suite", "தாமரை இல்லம்", 5500, "350 SQ.FT"),
    _room("room_7", "Luxury Suite", "மல்லிகை இல்லம்", 5500, "350 SQ.FT"),
    _room("room_8", "Premium Hut", "ரோஜா இல்லம்", 4800, "300 SQ.FT"),
    _room("room_9", "Premium Hut", "லில்லி இல்லம்", 4800, "300 SQ.FT"),
    _room("room_10", "Standard Room", "செம்பருத்தி இல்லம்", 3500, "220 SQ.FT"),
    _room("room_11", "Standard Room", "டெய்சி இல்லம்", 3500, "220 SQ.FT"),
    _room("room_12", "Family Suite", "சூரியகாந்தி இல்லம்", 6000, "450 SQ.FT"),
    _room("room_13", "Executive Room", "ஆர்க்கிட் இல்லம்", 5200, "320 SQ.FT"),
]

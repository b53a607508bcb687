"""Editable static menu configuration."""

from __future__ import annotations

# Canonical menu metadata consumed by lunch_tray.data (which wraps these into MenuItem instances).
# Prices are kept as strings so they convert to Decimal without float noise.
MENU_ITEMS_BY_ID: dict[str, dict[str, str]] = {
    "cauliflower": {
        "name": "Cauliflower",
        "description": "Whole cauliflower, brined, roasted, and deep fried",
        "price": "7.00",
        "category": "entree",
    },
    "chili": {
        "name": "Spicy Black Bean Chili",
        "description": "Rich black bean chili, seasoned with red peppers",
        "price": "4.00",
        "category": "entree",
    },
    "pasta": {
        "name": "Mushroom Pasta",
        "description": "Penne pasta, mushrooms, basil, and tomatoes",
        "price": "5.50",
        "category": "entree",
    },
    "skillet": {
        "name": "Spicy Potato Skillet",
        "description": "Chickpeas, red onion, and spicy potatoes",
        "price": "5.50",
        "category": "entree",
    },
    "salad": {
        "name": "Summer Salad",
        "description": "Heirloom tomatoes, butter lettuce, peaches, avocado, balsamic dressing",
        "price": "2.50",
        "category": "side",
    },
    "soup": {
        "name": "Butternut Squash Soup",
        "description": "Roasted butternut squash, roasted peppers, chili oil",
        "price": "3.00",
        "category": "side",
    },
    "potatoes": {
        "name": "Spicy Potatoes",
        "description": "Marble potatoes, roasted, and fried in house spice mix",
        "price": "2.00",
        "category": "side",
    },
    "rice": {
        "name": "Coconut Rice",
        "description": "Rice, coconut milk, lime, and sugar",
        "price": "1.50",
        "category": "side",
    },
    "bread": {
        "name": "Lunch Roll",
        "description": "Fresh baked roll made in house",
        "price": "0.50",
        "category": "accompaniment",
    },
    "berries": {
        "name": "Mixed Berries",
        "description": "Strawberries, blueberries, raspberries, and huckleberries",
        "price": "1.00",
        "category": "accompaniment",
    },
    "pickles": {
        "name": "Pickled Veggies",
        "description": "Pickled cucumbers and carrots, made in house",
        "price": "0.50",
        "category": "accompaniment",
    },
}

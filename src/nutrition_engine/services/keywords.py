"""Keyword heuristics for inferring food categories from dish names.

Matching is a plain case-insensitive substring test, so "rib" also matches
"ribeye" and "caribbean". The tables are a hint for the user, not ground
truth.
"""

GLUTEN_KEYWORDS = (
    "bread",
    "bun",
    "wrap",
    "tortilla",
    "pasta",
    "noodle",
    "breaded",
    "crispy",
    "fried",
    "sandwich",
    "burger",
    "pizza",
    "pancake",
    "waffle",
    "muffin",
    "cookie",
    "cake",
    "pastry",
    "croissant",
    "bagel",
    "roll",
)

MEAT_KEYWORDS = (
    "chicken",
    "beef",
    "pork",
    "bacon",
    "ham",
    "turkey",
    "steak",
    "sausage",
    "fish",
    "shrimp",
    "salmon",
    "tuna",
    "cod",
    "nugget",
    "wing",
    "rib",
    "brisket",
    "meatball",
    "pepperoni",
    "chorizo",
    "lamb",
    "duck",
    "crab",
    "lobster",
    "prawn",
    "anchovy",
)

DAIRY_KEYWORDS = (
    "cheese",
    "cream",
    "milk",
    "butter",
    "yogurt",
    "latte",
    "cappuccino",
    "mocha",
    "frappuccino",
    "ice cream",
    "milkshake",
)

RED_MEAT_KEYWORDS = (
    "beef",
    "steak",
    "brisket",
    "rib",
    "pork",
    "bacon",
    "ham",
    "sausage",
    "lamb",
)


def likely_contains_gluten(name: str) -> bool:
    """Return True when the name suggests a wheat-based item."""
    return _matches_any(name, GLUTEN_KEYWORDS)


def likely_contains_meat(name: str) -> bool:
    """Return True when the name mentions meat or seafood."""
    return _matches_any(name, MEAT_KEYWORDS)


def likely_contains_dairy(name: str) -> bool:
    """Return True when the name mentions a dairy product."""
    return _matches_any(name, DAIRY_KEYWORDS)


def contains_red_meat(name: str) -> bool:
    """Return True when the name mentions red or processed meat."""
    return _matches_any(name, RED_MEAT_KEYWORDS)


def _matches_any(name: str, keywords: tuple[str, ...]) -> bool:
    lowered = name.lower()
    return any(keyword in lowered for keyword in keywords)

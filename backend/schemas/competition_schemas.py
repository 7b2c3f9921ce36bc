"""Vocabulary and rule tables for competition extraction.

The heuristic extractors are driven entirely by the tables in this module, so
tuning the Norwegian keyword sets never requires touching extractor code.
"""

# Valid record categories
COMPETITION_CATEGORIES = {
    "technology": "Phones, computers and other electronics",
    "travel": "Trips, holidays and hotel stays",
    "gaming": "Consoles, games and gaming gear",
    "sports": "Sports equipment and training",
    "food": "Restaurants, groceries and drinks",
    "other": "Everything else",
}

DEFAULT_CATEGORY = "other"
DEFAULT_EMOJI = "🎁"

# Ordered (category, emoji, keywords) rules; first matching rule wins
CATEGORY_RULES = [
    ("technology", "📱", ["iphone", "apple", "samsung", "mobil", "tech", "pc", "laptop"]),
    ("travel", "✈️", ["reise", "ferie", "tur", "hotell", "fly"]),
    ("gaming", "🎮", ["gaming", "spill", "playstation", "xbox", "nintendo"]),
    ("sports", "⚽", ["sport", "trening", "fotball", "ski"]),
    ("food", "🍕", ["mat", "restaurant", "kaffe", "pizza"]),
]

# Brands that force organizer and emoji regardless of category
BRAND_RULES = [
    ("ikea", "Ikea", "🏠"),
]

# Norwegian category names the model sometimes answers with
CATEGORY_ALIASES = {
    "teknologi": "technology",
    "reise": "travel",
    "sport": "sports",
    "mat": "food",
    "annet": "other",
}

# Lines containing one of these are preferred as titles
TITLE_KEYWORDS = ["vinn", "konkurranse", "premie", "gavekort"]

# Ordered prize patterns; the full match text is used
PRIZE_PATTERNS = [
    r"vinn\s+([^.!?\n]{10,80})",
    r"premie[^.!?\n]{0,20}([^.!?\n]{10,80})",
    r"gavekort[^.!?\n]{0,50}",
    r"(\d+\s*kr[^.!?\n]{0,30})",
]

KNOWN_BRANDS = ["ikea", "apple", "samsung", "nintendo", "sony", "microsoft", "google"]

# Ordered organizer patterns as (pattern, case_insensitive)
ORGANIZER_PATTERNS = [
    (r"arrangør[:\s]+([^\n.!?]{2,30})", True),
    (r"\bav\s+([A-ZÆØÅ][a-zæøåA-ZÆØÅ ]{2,30})", False),
    (r"\b(" + "|".join(KNOWN_BRANDS) + r")\b", True),
]

NORWEGIAN_MONTHS = {
    "januar": 1,
    "februar": 2,
    "mars": 3,
    "april": 4,
    "mai": 5,
    "juni": 6,
    "juli": 7,
    "august": 8,
    "september": 9,
    "oktober": 10,
    "november": 11,
    "desember": 12,
}

# Placeholders used when a field cannot be extracted
DEFAULT_TITLE = "New competition"
DEFAULT_ORGANIZER = "Unknown organizer"
DEFAULT_PRIZE = "See the competition page for prize information"
DEFAULT_TYPE = "free"

# Fields a caller may override on any analysis
OVERRIDABLE_FIELDS = ("title", "organizer", "prize", "deadline", "category", "type")

"""Ingredient lookup tables and normalized ingredient model."""

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class NormalizedIngredient:
    """Canonical ingredient name with its trigger category, if known."""

    canonical: str
    category: str | None = None


INGREDIENT_CATEGORIES: MappingProxyType[str, str] = MappingProxyType(
    {
        # dairy
        "milk": "dairy",
        "cream": "dairy",
        "butter": "dairy",
        "cheese": "dairy",
        "yogurt": "dairy",
        "ice cream": "dairy",
        "whey": "dairy",
        "ghee": "dairy",
        # alliums
        "garlic": "alliums",
        "onion": "alliums",
        "scallion": "alliums",
        "shallot": "alliums",
        "leek": "alliums",
        "chives": "alliums",
        # gluten grains
        "wheat": "gluten grains",
        "flour": "gluten grains",
        "breadcrumbs": "gluten grains",
        "semolina": "gluten grains",
        "barley": "gluten grains",
        "rye": "gluten grains",
        # spicy
        "hot sauce": "spicy",
        "cayenne": "spicy",
        "chili pepper": "spicy",
        "chili flakes": "spicy",
        "jalapeño": "spicy",
        "habanero": "spicy",
        "sriracha": "spicy",
        "tabasco": "spicy",
        "chili powder": "spicy",
        # nightshades
        "tomato": "nightshades",
        "bell pepper": "nightshades",
        "eggplant": "nightshades",
        # legumes
        "beans": "legumes",
        "chickpeas": "legumes",
        "lentils": "legumes",
        "hummus": "legumes",
        # nuts
        "peanut": "nuts",
        "almond": "nuts",
        "cashew": "nuts",
        "walnut": "nuts",
        "pistachio": "nuts",
        "peanut butter": "nuts",
        "almond butter": "nuts",
    }
)

CATEGORIES: frozenset[str] = frozenset(INGREDIENT_CATEGORIES.values())

# Keys are cleaned lookup keys, so "2% milk" is stored as "2 milk".
CANONICAL_MAP: MappingProxyType[str, str] = MappingProxyType(
    {
        # dairy
        "whole milk": "milk",
        "2 milk": "milk",
        "skim milk": "milk",
        "heavy cream": "cream",
        "sour cream": "cream",
        "whipping cream": "cream",
        "double cream": "cream",
        "light cream": "cream",
        "half and half": "cream",
        "half & half": "cream",
        "cheddar cheese": "cheese",
        "cheddar": "cheese",
        "mozzarella cheese": "cheese",
        "mozzarella": "cheese",
        "parmesan cheese": "cheese",
        "parmesan": "cheese",
        "parmigiano reggiano": "cheese",
        "feta cheese": "cheese",
        "feta": "cheese",
        "brie": "cheese",
        "gouda": "cheese",
        "cream cheese": "cheese",
        "cottage cheese": "cheese",
        "swiss cheese": "cheese",
        "provolone": "cheese",
        "ricotta": "cheese",
        "gruyere": "cheese",
        "gruyère": "cheese",
        "monterey jack": "cheese",
        "pepper jack": "cheese",
        "american cheese": "cheese",
        "colby jack": "cheese",
        "havarti": "cheese",
        "manchego": "cheese",
        "mascarpone": "cheese",
        "burrata": "cheese",
        "greek yogurt": "yogurt",
        "plain yogurt": "yogurt",
        "vanilla yogurt": "yogurt",
        # plant milks are not dairy
        "oat milk": "oat milk",
        "almond milk": "almond milk",
        "coconut milk": "coconut milk",
        "soy milk": "soy milk",
        # alliums
        "roasted garlic": "garlic",
        "garlic powder": "garlic",
        "minced garlic": "garlic",
        "garlic cloves": "garlic",
        "crushed garlic": "garlic",
        "garlic paste": "garlic",
        "red onion": "onion",
        "white onion": "onion",
        "yellow onion": "onion",
        "sweet onion": "onion",
        "vidalia onion": "onion",
        "onion powder": "onion",
        "diced onion": "onion",
        "caramelized onion": "onion",
        "caramelized onions": "onion",
        "green onion": "scallion",
        "spring onion": "scallion",
        "green onions": "scallion",
        "spring onions": "scallion",
        # gluten grains
        "all purpose flour": "flour",
        "bread flour": "flour",
        "whole wheat flour": "flour",
        "wheat flour": "flour",
        "white flour": "flour",
        "self rising flour": "flour",
        "cake flour": "flour",
        "pastry flour": "flour",
        "panko breadcrumbs": "breadcrumbs",
        "panko": "breadcrumbs",
        # spicy
        "red pepper flakes": "chili flakes",
        "crushed red pepper": "chili flakes",
        "cayenne pepper": "cayenne",
        "chili peppers": "chili pepper",
        "jalapeño pepper": "jalapeño",
        "jalapeno": "jalapeño",
        "jalapeno pepper": "jalapeño",
        "serrano pepper": "chili pepper",
        "thai chili": "chili pepper",
        # nightshades
        "tomatoes": "tomato",
        "cherry tomatoes": "tomato",
        "grape tomatoes": "tomato",
        "roma tomatoes": "tomato",
        "plum tomatoes": "tomato",
        "heirloom tomatoes": "tomato",
        "tomato sauce": "tomato",
        "tomato paste": "tomato",
        "tomato puree": "tomato",
        "diced tomatoes": "tomato",
        "crushed tomatoes": "tomato",
        "sun dried tomatoes": "tomato",
        "canned tomatoes": "tomato",
        "stewed tomatoes": "tomato",
        "marinara sauce": "tomato",
        "marinara": "tomato",
        "red pepper": "bell pepper",
        "green pepper": "bell pepper",
        "yellow pepper": "bell pepper",
        "orange pepper": "bell pepper",
        "red bell pepper": "bell pepper",
        "green bell pepper": "bell pepper",
        "yellow bell pepper": "bell pepper",
        "roasted red pepper": "bell pepper",
        "roasted red peppers": "bell pepper",
        # legumes
        "black beans": "beans",
        "kidney beans": "beans",
        "pinto beans": "beans",
        "navy beans": "beans",
        "cannellini beans": "beans",
        "white beans": "beans",
        "lima beans": "beans",
        "great northern beans": "beans",
        "garbanzo beans": "chickpeas",
        "red lentils": "lentils",
        "green lentils": "lentils",
        "brown lentils": "lentils",
        # nuts
        "peanuts": "peanut",
        "almonds": "almond",
        "cashews": "cashew",
        "walnuts": "walnut",
        "pistachios": "pistachio",
        "roasted peanuts": "peanut",
        "roasted almonds": "almond",
        "sliced almonds": "almond",
        "slivered almonds": "almond",
        "chopped walnuts": "walnut",
        "crushed peanuts": "peanut",
    }
)

# Checked in order; the first matching prefix is stripped.
PREP_PREFIXES: tuple[str, ...] = (
    "fresh",
    "dried",
    "dry",
    "frozen",
    "raw",
    "cooked",
    "chopped",
    "diced",
    "minced",
    "sliced",
    "grated",
    "shredded",
    "ground",
    "crushed",
    "toasted",
    "roasted",
    "grilled",
    "fried",
    "steamed",
    "baked",
    "sauteed",
    "sautéed",
    "blanched",
    "organic",
    "extra virgin",
    "virgin",
    "unsalted",
    "salted",
    "low fat",
    "nonfat",
    "non fat",
    "fat free",
    "reduced fat",
    "whole",
    "large",
    "small",
    "medium",
    "baby",
)

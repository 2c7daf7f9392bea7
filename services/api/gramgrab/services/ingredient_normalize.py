import re

DESCRIPTORS = [
    "fresh", "chopped", "minced", "diced", "sliced",
    "optional", "to taste", "for garnish",
    "sifted", "packed", "softened", "melted",
    "large", "medium", "small",
    "organic", "raw",
]


def normalize_ingredient_key(name: str) -> str:
    """
    Normalize ingredient name to a canonical key for density caching.

    Rules:
    - Lowercase
    - Parentheticals and punctuation removed
    - Whitespace collapse
    - Preparation descriptors removed
    - Basic singularization
    """
    if not name:
        return ""

    s = name.lower()

    # "Flour (all purpose)" -> "flour "
    s = re.sub(r'\(.*?\)', '', s)

    # Replace with space to avoid merging words (all-purpose -> all purpose)
    s = re.sub(r'[^\w\s%]', ' ', s)
    s = re.sub(r'\s+', ' ', s).strip()

    for desc in DESCRIPTORS:
        s = re.sub(rf'\b{desc}\b', '', s)

    s = re.sub(r'\s+', ' ', s).strip()

    # Very naive: if ends in 's', not 'ss', len > 3 -> strip 's'
    words = []
    for w in s.split():
        if len(w) > 3 and w.endswith('s') and not w.endswith('ss'):
            words.append(w[:-1])
        else:
            words.append(w)

    return " ".join(words)

"""Detector label categories used by the verification arithmetic.

Labels are compared lower-cased. Excluded labels are small incidental objects
(tableware, fruit) that stay in the displayed detection list but never count
toward confidence, coverage, spread, clutter or composition.
"""

PERSON_LABEL = "person"

# COCO furniture classes plus common synonyms from other detectors.
FURNITURE_CATEGORIES: frozenset[str] = frozenset({
    "chair", "couch", "bed", "dining table", "desk",
    "refrigerator", "sofa",
    "table", "ottoman",
})

EXCLUDED_CATEGORIES: frozenset[str] = frozenset({
    "bowl", "bowls",
    "banana", "bananas",
    "crockery",
    "fruit", "fruits",
    "apple", "apples",
    "orange", "oranges",
    "plate", "plates",
    "cup", "cups",
    "fork", "forks",
    "knife", "knives",
    "spoon", "spoons",
})


def is_excluded(label: str) -> bool:
    return label.lower() in EXCLUDED_CATEGORIES


def is_furniture(label: str) -> bool:
    return label.lower() in FURNITURE_CATEGORIES


def is_person(label: str) -> bool:
    return label.lower() == PERSON_LABEL

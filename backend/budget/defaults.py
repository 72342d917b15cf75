"""Starter budget categories and their targets"""

DEFAULT_CATEGORIES = [
    ('Venue & Catering', 30000),
    ('Photography & Video', 8000),
    ('Florals & Decor', 5000),
    ('Attire & Beauty', 4000),
    ('Entertainment', 6000),
]


def default_category_rows():
    return [
        {'name': name, 'target': target, 'sort_order': index}
        for index, (name, target) in enumerate(DEFAULT_CATEGORIES)
    ]

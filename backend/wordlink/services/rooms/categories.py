# Default catalogue; clients render prompts for a category by its index.
CATEGORIES = (
    'Animals',
    'Food & Drink',
    'Countries',
    'Sports',
    'Music',
    'Movies',
    'Professions',
    'Nature',
    'Colours',
    'Household Items',
)

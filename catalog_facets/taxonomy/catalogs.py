"""
Static taxonomies for the catalog's entity kinds (pets and store products).
"""
from catalog_facets.taxonomy.registry import CategoryEntry, TaxonomyEntry, TaxonomyRegistry


# ============================================================================
# Pets
# ============================================================================

PET_TAXONOMY = TaxonomyRegistry(
    name="pets",
    categories=[
        CategoryEntry(value="dogs", label="Dogs"),
        CategoryEntry(value="cats", label="Cats"),
        CategoryEntry(value="aquatic", label="Aquatic"),
        CategoryEntry(value="other", label="Other Pets"),
    ],
    entries=[
        TaxonomyEntry(type_key="dog", label="Dogs", category="dogs", icon="🐕"),
        TaxonomyEntry(type_key="cat", label="Cats", category="cats", icon="🐱"),
        TaxonomyEntry(type_key="fish", label="Fish", category="aquatic", icon="🐠"),
        TaxonomyEntry(type_key="bird", label="Birds", category="other", icon="🦜"),
        TaxonomyEntry(type_key="fancy-rat", label="Fancy Rats", category="other", icon="🐭"),
        TaxonomyEntry(type_key="guinea-pig", label="Guinea Pigs", category="other", icon="🐹"),
        TaxonomyEntry(type_key="sugar-glider", label="Sugar Gliders", category="other", icon="🐿️"),
        TaxonomyEntry(type_key="chinchilla", label="Chinchillas", category="other", icon="🐭"),
        TaxonomyEntry(type_key="ferret", label="Ferrets", category="other", icon="🦔"),
        TaxonomyEntry(type_key="hedgehog", label="Hedgehogs", category="other", icon="🦔"),
        TaxonomyEntry(type_key="hamster", label="Hamsters", category="other", icon="🐹"),
        TaxonomyEntry(type_key="rabbit", label="Rabbits", category="other", icon="🐰"),
        TaxonomyEntry(type_key="gerbil", label="Gerbils", category="other", icon="🐭"),
        TaxonomyEntry(type_key="stoat", label="Stoats", category="other", icon="🦔"),
    ],
)


# ============================================================================
# Products
# ============================================================================

PRODUCT_TAXONOMY = TaxonomyRegistry(
    name="products",
    categories=[
        CategoryEntry(value="food", label="Food & Treats"),
        CategoryEntry(value="toys", label="Toys"),
        CategoryEntry(value="accessories", label="Accessories"),
        CategoryEntry(value="health", label="Health & Care"),
        CategoryEntry(value="beds", label="Beds & Comfort"),
        CategoryEntry(value="carriers", label="Carriers & Travel"),
    ],
    entries=[
        # Food & Treats
        TaxonomyEntry(type_key="dry-food", label="Dry Food", category="food", icon="🥘"),
        TaxonomyEntry(type_key="wet-food", label="Wet Food", category="food", icon="🥫"),
        TaxonomyEntry(type_key="treats", label="Treats", category="food", icon="🦴"),
        TaxonomyEntry(type_key="supplements", label="Supplements", category="health", icon="💊"),

        # Toys
        TaxonomyEntry(type_key="chew-toys", label="Chew Toys", category="toys", icon="🦴"),
        TaxonomyEntry(type_key="interactive-toys", label="Interactive Toys", category="toys", icon="🧩"),
        TaxonomyEntry(type_key="balls", label="Balls", category="toys", icon="⚽"),
        TaxonomyEntry(type_key="rope-toys", label="Rope Toys", category="toys", icon="🪢"),

        # Accessories
        TaxonomyEntry(type_key="collars", label="Collars", category="accessories", icon="🦮"),
        TaxonomyEntry(type_key="leashes", label="Leashes", category="accessories", icon="🦮"),
        TaxonomyEntry(type_key="harnesses", label="Harnesses", category="accessories", icon="🦮"),
        TaxonomyEntry(type_key="bowls", label="Bowls & Feeders", category="accessories", icon="🥣"),

        # Health & Care
        TaxonomyEntry(type_key="grooming", label="Grooming", category="health", icon="✂️"),
        TaxonomyEntry(type_key="dental-care", label="Dental Care", category="health", icon="🦷"),
        TaxonomyEntry(type_key="flea-tick", label="Flea & Tick", category="health", icon="🚫"),

        # Beds & Furniture
        TaxonomyEntry(type_key="beds", label="Beds", category="beds", icon="🛏️"),
        TaxonomyEntry(type_key="blankets", label="Blankets", category="beds", icon="🧸"),
        TaxonomyEntry(type_key="furniture", label="Furniture", category="beds", icon="🪑"),

        # Carriers & Travel
        TaxonomyEntry(type_key="carriers", label="Carriers", category="carriers", icon="👜"),
        TaxonomyEntry(type_key="travel", label="Travel Gear", category="carriers", icon="🧳"),
    ],
)

"""Sample catalogue for demos and local development.

Loaded at app start when ``FARMFRESH_SEED`` is set. Seeding is skipped when
categories already exist.
"""

import structlog
from protean.utils.globals import current_domain

from farmfresh.catalogue.category.category import Category
from farmfresh.catalogue.category.management import CreateCategory
from farmfresh.catalogue.product.management import AddProduct

logger = structlog.get_logger(__name__)

CATEGORIES = [
    {"name": "Fruits", "slug": "fruits", "description": "Fresh fruits from local farms"},
    {"name": "Vegetables", "slug": "vegetables", "description": "Organic vegetables grown locally"},
    {"name": "Grains", "slug": "grains", "description": "Locally grown grains and cereals"},
    {"name": "Dairy", "slug": "dairy", "description": "Farm-fresh dairy products"},
    {"name": "Herbs", "slug": "herbs", "description": "Fresh herbs and spices"},
    {"name": "Specialty", "slug": "specialty", "description": "Specialty products from local farms"},
]

PRODUCTS = [
    {
        "seller_id": "farmer-john",
        "category": "fruits",
        "name": "Organic Apples",
        "description": "Fresh organic apples from our orchard. No pesticides used.",
        "price": 3.99,
        "unit": "kg",
        "stock": 100,
        "featured": True,
    },
    {
        "seller_id": "farmer-john",
        "category": "vegetables",
        "name": "Fresh Carrots",
        "description": "Locally grown carrots harvested at peak ripeness.",
        "price": 2.49,
        "unit": "kg",
        "stock": 75,
    },
    {
        "seller_id": "sunset-apiaries",
        "category": "specialty",
        "name": "Organic Honey",
        "description": "Pure, raw honey made by our happy bees.",
        "price": 8.99,
        "unit": "500g",
        "stock": 50,
        "featured": True,
    },
    {
        "seller_id": "green-valley",
        "category": "dairy",
        "name": "Farm Fresh Eggs",
        "description": "Free-range eggs from our happy hens.",
        "price": 4.50,
        "unit": "dozen",
        "stock": 40,
    },
]


def seed_catalogue() -> bool:
    """Load the sample categories and products. Returns False if already seeded."""
    if current_domain.repository_for(Category).all_categories():
        logger.info("Catalogue already seeded")
        return False

    category_ids = {}
    for category in CATEGORIES:
        category_ids[category["slug"]] = current_domain.process(CreateCategory(**category), asynchronous=False)

    for product in PRODUCTS:
        data = dict(product)
        category_id = category_ids[data.pop("category")]
        current_domain.process(AddProduct(category_id=category_id, **data), asynchronous=False)

    logger.info("Catalogue seeded", categories=len(CATEGORIES), products=len(PRODUCTS))
    return True

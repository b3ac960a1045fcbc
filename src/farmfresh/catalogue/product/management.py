"""Product management — seller commands and handler.

Sellers may only change or delist their own products; the handler enforces
ownership before touching the aggregate.
"""

import structlog
from protean import handle
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from farmfresh.catalogue.product.product import Product
from farmfresh.domain import farmfresh
from farmfresh.exceptions import Forbidden

logger = structlog.get_logger(__name__)


@farmfresh.command(part_of="Product")
class AddProduct:
    seller_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    unit = String(required=True, max_length=50)
    stock = Integer(min_value=0)
    description = Text()
    image_url = String(max_length=500)
    category_id = Identifier()
    featured = Boolean(default=False)


@farmfresh.command(part_of="Product")
class UpdateProduct:
    product_id = Identifier(required=True)
    seller_id = Identifier(required=True)
    name = String(max_length=255)
    price = Float(min_value=0.0)
    unit = String(max_length=50)
    stock = Integer(min_value=0)
    description = Text()
    image_url = String(max_length=500)
    category_id = Identifier()
    featured = Boolean()


@farmfresh.command(part_of="Product")
class RemoveProduct:
    product_id = Identifier(required=True)
    seller_id = Identifier(required=True)


def _owned_product(repo, product_id, seller_id, action):
    product = repo.get(product_id)
    if not product.is_owned_by(seller_id):
        raise Forbidden(f"You can only {action} your own products")
    return product


@farmfresh.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.add(
            seller_id=command.seller_id,
            name=command.name,
            price=command.price,
            unit=command.unit,
            stock=command.stock,
            description=command.description,
            image_url=command.image_url,
            category_id=command.category_id,
            featured=command.featured,
        )
        current_domain.repository_for(Product).add(product)
        logger.info("Product added", product_id=str(product.id), seller_id=str(command.seller_id))
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = _owned_product(repo, command.product_id, command.seller_id, "update")
        product.update(
            name=command.name,
            price=command.price,
            unit=command.unit,
            stock=command.stock,
            description=command.description,
            image_url=command.image_url,
            category_id=command.category_id,
            featured=command.featured,
        )
        repo.add(product)

    @handle(RemoveProduct)
    def remove_product(self, command):
        repo = current_domain.repository_for(Product)
        product = _owned_product(repo, command.product_id, command.seller_id, "delete")
        return repo.remove(product.id)

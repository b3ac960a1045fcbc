"""FastAPI endpoints for categories and products."""

from fastapi import APIRouter, Depends
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from farmfresh.api.identity import Identity, require_farmer
from farmfresh.api.schemas import (
    CategoryResponse,
    CreateCategoryRequest,
    CreateProductRequest,
    ProductResponse,
    StatusResponse,
    UpdateProductRequest,
)
from farmfresh.catalogue.category.category import Category
from farmfresh.catalogue.category.management import CreateCategory
from farmfresh.catalogue.product.management import AddProduct, RemoveProduct, UpdateProduct
from farmfresh.catalogue.product.product import Product

product_router = APIRouter(prefix="/products", tags=["products"])
category_router = APIRouter(prefix="/categories", tags=["categories"])


# --- Category endpoints ---


@category_router.get("", response_model=list[CategoryResponse])
async def list_categories() -> list[CategoryResponse]:
    categories = current_domain.repository_for(Category).all_categories()
    return [CategoryResponse.from_aggregate(c) for c in categories]


@category_router.get("/slug/{slug}", response_model=CategoryResponse)
async def get_category_by_slug(slug: str) -> CategoryResponse:
    category = current_domain.repository_for(Category).by_slug(slug)
    if category is None:
        raise ObjectNotFoundError({"_entity": f"Category '{slug}' not found"})
    return CategoryResponse.from_aggregate(category)


@category_router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(category_id: str) -> CategoryResponse:
    return CategoryResponse.from_aggregate(current_domain.repository_for(Category).get(category_id))


@category_router.post("", status_code=201, response_model=CategoryResponse)
async def create_category(body: CreateCategoryRequest, identity: Identity = Depends(require_farmer)) -> CategoryResponse:
    command = CreateCategory(
        name=body.name,
        slug=body.slug,
        description=body.description,
        image_url=body.image_url,
    )
    category_id = current_domain.process(command, asynchronous=False)
    return CategoryResponse.from_aggregate(current_domain.repository_for(Category).get(category_id))


# --- Product endpoints ---


@product_router.get("", response_model=list[ProductResponse])
async def list_products(
    category_id: str | None = None,
    seller_id: str | None = None,
    featured: bool | None = None,
) -> list[ProductResponse]:
    repo = current_domain.repository_for(Product)
    if category_id:
        products = repo.by_category(category_id)
    elif seller_id:
        products = repo.by_seller(seller_id)
    elif featured:
        products = repo.featured()
    else:
        products = repo.all_products()
    return [ProductResponse.from_aggregate(p) for p in products]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    return ProductResponse.from_aggregate(current_domain.repository_for(Product).get(product_id))


@product_router.post("", status_code=201, response_model=ProductResponse)
async def add_product(body: CreateProductRequest, identity: Identity = Depends(require_farmer)) -> ProductResponse:
    command = AddProduct(
        seller_id=identity.user_id,
        name=body.name,
        description=body.description,
        price=body.price,
        unit=body.unit,
        image_url=body.image_url,
        stock=body.stock,
        category_id=body.category_id,
        featured=body.featured,
    )
    product_id = current_domain.process(command, asynchronous=False)
    return ProductResponse.from_aggregate(current_domain.repository_for(Product).get(product_id))


@product_router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str, body: UpdateProductRequest, identity: Identity = Depends(require_farmer)
) -> ProductResponse:
    command = UpdateProduct(
        product_id=product_id,
        seller_id=identity.user_id,
        **body.model_dump(exclude_none=True),
    )
    current_domain.process(command, asynchronous=False)
    return ProductResponse.from_aggregate(current_domain.repository_for(Product).get(product_id))


@product_router.delete("/{product_id}", response_model=StatusResponse)
async def remove_product(product_id: str, identity: Identity = Depends(require_farmer)) -> StatusResponse:
    command = RemoveProduct(product_id=product_id, seller_id=identity.user_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()

"""
Product business logic.

Scope:
- create listings (server stamps `postedTime`, `isSold` starts false)
- filtered, paginated listing with the seller's public card embedded
- single product lookup with seller card
- sold flag toggle
"""

from __future__ import annotations

import logging

from core import documents, listing
from core.db import Database
from core.errors import NotFound
from users import repository as users_repository

from . import repository, schemas

logger = logging.getLogger(__name__)

SELLER_INFO = listing.Enrichment(
    as_field="sellerInfo",
    local_field="userEmail",
    foreign_field="email",
    fields=users_repository.PUBLIC_FIELDS,
)


def listing_query(params: schemas.ProductListParams) -> listing.ListingQuery:
    return listing.build_listing(
        "products",
        exact={
            "district": params.district,
            "categoryId": params.categoryId,
            "userEmail": params.email,
        },
        contains={"name": params.search},
        page=params.page,
        size=params.size,
        enrichment=SELLER_INFO,
    )


async def create_product(database: Database, payload: schemas.ProductCreate) -> dict:
    doc = payload.model_dump(mode="json")
    doc.pop("_id", None)
    doc["postedTime"] = documents.posted_time()

    product = await repository.insert_product(database, doc)
    logger.info("product_created id=%s seller=%s", product["_id"], payload.userEmail)
    return documents.insert_result(product)


async def list_products(database: Database, params: schemas.ProductListParams) -> dict:
    plan = listing_query(params)
    products = await repository.list_products(database, plan)
    count = await repository.count_products(database, plan)
    return {"count": count, "products": products}


async def get_product(database: Database, raw_id: str) -> dict:
    product_id = documents.parse_id(raw_id, label="product id")
    product = await repository.get_product(database, product_id)
    if product is None:
        raise NotFound("Product not found.")

    seller_email = product.get("userEmail")
    seller = None
    if seller_email:
        seller = await users_repository.get_public_user_by_email(database, str(seller_email))
    product["sellerInfo"] = seller
    return product


async def toggle_sold(database: Database, raw_id: str) -> dict:
    product_id = documents.parse_id(raw_id, label="product id")
    product = await repository.toggle_sold(database, product_id)
    if product is None:
        raise NotFound("Product not found.")
    logger.info("product_sold_toggled id=%s is_sold=%s", product_id, product.get("isSold"))
    return documents.update_result(modified=True)

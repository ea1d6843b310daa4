"""
Booking business logic.
"""

from __future__ import annotations

import logging

from core import documents, listing
from core.db import Database
from core.errors import InvalidArgument, NotFound

from . import repository, schemas

logger = logging.getLogger(__name__)

CUSTOMER_INFO = listing.Enrichment(
    as_field="customerInfo",
    local_field="userEmail",
    foreign_field="email",
    fields=("_id", "name", "email", "mobile", "img", "status"),
)


def listing_query(params: schemas.BookingListParams) -> listing.ListingQuery:
    if params.required and not (params.userEmail and params.productId):
        raise InvalidArgument("Parameter missing: userEmail and productId are required.")

    return listing.build_listing(
        "bookings",
        exact={"userEmail": params.userEmail, "productId": params.productId},
        page=params.page,
        size=params.size,
        enrichment=CUSTOMER_INFO,
    )


async def create_booking(database: Database, payload: schemas.BookingCreate) -> dict:
    doc = payload.model_dump(mode="json")
    doc.pop("_id", None)
    doc["postedTime"] = documents.posted_time()

    booking = await repository.insert_booking(database, doc)
    logger.info("booking_created id=%s product_id=%s", booking["_id"], payload.productId)
    return documents.insert_result(booking)


async def list_bookings(database: Database, params: schemas.BookingListParams) -> list[dict]:
    return await repository.list_bookings(database, listing_query(params))


async def toggle_confirmed(database: Database, raw_id: str) -> dict:
    booking_id = documents.parse_id(raw_id, label="booking id")
    booking = await repository.toggle_confirmed(database, booking_id)
    if booking is None:
        raise NotFound("Booking not found.")
    logger.info("booking_confirmed_toggled id=%s is_confirmed=%s", booking_id, booking.get("isConfirmed"))
    return documents.update_result(modified=True)

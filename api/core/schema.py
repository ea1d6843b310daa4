"""
Collection tables. Applied on startup with `Database.ensure_schema()`.

Every collection stores its documents in `doc` (JSONB). Insertion order is
`id` order, which the listings sort on.
"""

COLLECTIONS = ("users", "categories", "products", "bookings")

DDL = """
CREATE TABLE IF NOT EXISTS users (
    id BIGSERIAL PRIMARY KEY,
    doc JSONB NOT NULL DEFAULT '{}'::jsonb,
    created_at TIMESTAMPTZ NOT NULL DEFAULT now()
);

-- One account per email; registration relies on this instead of a pre-check.
CREATE UNIQUE INDEX IF NOT EXISTS users_email_key ON users ((doc->>'email'));

CREATE TABLE IF NOT EXISTS categories (
    id BIGSERIAL PRIMARY KEY,
    doc JSONB NOT NULL DEFAULT '{}'::jsonb,
    created_at TIMESTAMPTZ NOT NULL DEFAULT now()
);

CREATE TABLE IF NOT EXISTS products (
    id BIGSERIAL PRIMARY KEY,
    doc JSONB NOT NULL DEFAULT '{}'::jsonb,
    created_at TIMESTAMPTZ NOT NULL DEFAULT now()
);

CREATE INDEX IF NOT EXISTS products_user_email_idx ON products ((doc->>'userEmail'));
CREATE INDEX IF NOT EXISTS products_district_idx ON products ((doc->>'district'));
CREATE INDEX IF NOT EXISTS products_category_idx ON products ((doc->>'categoryId'));

CREATE TABLE IF NOT EXISTS bookings (
    id BIGSERIAL PRIMARY KEY,
    doc JSONB NOT NULL DEFAULT '{}'::jsonb,
    created_at TIMESTAMPTZ NOT NULL DEFAULT now()
);

CREATE INDEX IF NOT EXISTS bookings_user_email_idx ON bookings ((doc->>'userEmail'));
CREATE INDEX IF NOT EXISTS bookings_product_idx ON bookings ((doc->>'productId'));
"""

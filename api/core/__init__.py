"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple features use
(DB handle, errors, logging, the listing query builder). Keep
feature-specific SQL and business logic in the corresponding feature
package (e.g. `products/`).
"""

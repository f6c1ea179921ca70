"""
High-level use cases for the landing site.

ContentService owns the seed/fallback policy and the CRUD rules for the
profile, products and testimonials. Routers and scripts call it instead of
touching a store directly.
"""

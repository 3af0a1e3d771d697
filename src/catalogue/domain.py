"""Catalogue bounded context — categories, subcategories and shop items.

The storefront only reads from the catalogue; the admin endpoints are the
sole writers.
"""

from protean.domain import Domain

from shared.utils.logging import configure_logging, get_logger

configure_logging(log_file_prefix="cutiefy")

logger = get_logger(__name__)

# Domain Composition Root
catalogue = Domain(name="catalogue")

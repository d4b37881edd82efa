"""
Resort API - Modular Blueprint Structure

This package organizes the API endpoints into sub-blueprints, one module
per resource family, all mounted under /api by the application factory.
"""

from flask import Blueprint

# Create main API blueprint
api_bp = Blueprint("api", __name__)

# Import and register sub-blueprints
from .admin import admin_bp  # noqa: E402
from .bookings import bookings_bp  # noqa: E402
from .catalog import catalog_blueprints  # noqa: E402
from .customers import customers_bp  # noqa: E402
from .games import games_bp  # noqa: E402
from .orders import order_blueprints  # noqa: E402
from .rooms import rooms_bp  # noqa: E402
from .system import system_bp  # noqa: E402
from .tax_settings import tax_settings_bp  # noqa: E402

# Register sub-blueprints
api_bp.register_blueprint(system_bp)
api_bp.register_blueprint(customers_bp)
api_bp.register_blueprint(games_bp)
api_bp.register_blueprint(bookings_bp)
for catalog_bp in catalog_blueprints:
    api_bp.register_blueprint(catalog_bp)
for orders_bp in order_blueprints:
    api_bp.register_blueprint(orders_bp)
api_bp.register_blueprint(tax_settings_bp)
api_bp.register_blueprint(rooms_bp)
api_bp.register_blueprint(admin_bp)

__all__ = ["api_bp"]

"""Routes package for the errand application."""


def register_routes(app):
    """Register all route blueprints with the application."""
    from .notifications import notifications_bp
    from .orders import orders_bp
    from .reviews import reviews_bp
    from .users import users_bp

    app.register_blueprint(users_bp, url_prefix='/api')
    app.register_blueprint(orders_bp, url_prefix='/api/orders')
    app.register_blueprint(reviews_bp, url_prefix='/api/reviews')
    app.register_blueprint(notifications_bp, url_prefix='/api/notifications')

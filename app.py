"""
Devodyssey - Blog presentation API
"""
from flask import Flask, request
import os
from config import get_config
from extensions import csrf, db, limiter
from services import BlogService, DisplayModeStore, FeedService, DatabaseStorage, SessionStorage
from utils.logger import setup_logger


def set_security_headers(response):
    """Apply security headers to all responses."""
    response.headers['X-Content-Type-Options'] = 'nosniff'
    response.headers['X-Frame-Options'] = 'SAMEORIGIN'
    response.headers['X-XSS-Protection'] = '1; mode=block'

    if request.is_secure:
        response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'

    response.headers['Content-Security-Policy'] = (
        "default-src 'self'; "
        "img-src 'self' data: https:; "
        "connect-src 'self'; "
        "frame-ancestors 'self'; "
        "base-uri 'self'; "
        "form-action 'self'"
    )

    response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
    response.headers['Permissions-Policy'] = 'geolocation=(), microphone=(), camera=()'

    return response


def _build_display_mode_store(app):
    backend = app.config.get('DISPLAY_MODE_BACKEND', 'session')
    if backend == 'database':
        storage = DatabaseStorage()
    elif backend == 'session':
        storage = SessionStorage()
    else:
        raise ValueError(f"Unknown DISPLAY_MODE_BACKEND: {backend}")
    return DisplayModeStore(storage, key=app.config['DISPLAY_MODE_KEY'])


def create_app(config_class=None):
    """
    Application factory.

    Args:
        config_class: Config class to load; defaults to the FLASK_ENV one

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)
    app.config.from_object(config_class or get_config())

    setup_logger(app)
    app.after_request(set_security_headers)

    csrf.init_app(app)
    limiter.init_app(app)
    db.init_app(app)

    # Initialize Services
    app.extensions['blog_service'] = BlogService(
        words_per_minute=app.config['READING_WORDS_PER_MINUTE'],
        avatar_fallback_url=app.config['AVATAR_FALLBACK_URL'],
        all_blogs_path=app.config['ALL_BLOGS_PATH'],
        blog_detail_path=app.config['BLOG_DETAIL_PATH']
    )
    app.extensions['feed_service'] = FeedService(app.config['BLOGS_FILE'])
    app.extensions['display_mode_store'] = _build_display_mode_store(app)

    from routes import main_bp, blog_bp
    app.register_blueprint(main_bp)
    app.register_blueprint(blog_bp)
    csrf.exempt(blog_bp)

    with app.app_context():
        import models.preference  # noqa: F401 - registers the table
        db.create_all()

    config_name = (config_class or get_config()).__name__
    app.logger.info(
        f"App created - config: {config_name}, "
        f"display mode backend: {app.config.get('DISPLAY_MODE_BACKEND')}"
    )
    return app


if __name__ == "__main__":
    app = create_app()
    debug_mode = app.config.get('DEBUG', False)
    env_name = os.environ.get('FLASK_ENV', 'development')

    # Display startup information
    print("=" * 60)
    print("Devodyssey API Starting")
    print(f"Environment: {env_name}")
    print(f"Debug Mode: {debug_mode}")
    print("=" * 60)

    if debug_mode and env_name == 'production':
        print("\n⚠️  WARNING: Debug mode enabled in production!")
        print("This is a security risk. Set FLASK_DEBUG=false\n")

    host = os.environ.get('FLASK_HOST', '127.0.0.1')
    port = int(os.environ.get('FLASK_PORT', 5000))

    app.run(host=host, port=port, debug=debug_mode)

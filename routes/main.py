"""
Main Routes Blueprint

Home page data: featured blogs and the visitor's display mode.
"""

from flask import Blueprint, jsonify, current_app

from routes.blog import card_to_dict

main_bp = Blueprint('main', __name__)


@main_bp.route("/")
def home():
    """Featured blogs for the marketing page."""
    blog_service = current_app.extensions['blog_service']
    feed = current_app.extensions['feed_service'].get_feed()
    display_mode = current_app.extensions['display_mode_store'].get_display_mode()

    listing = blog_service.resolve_listing(feed, limit=current_app.config['FEATURED_BLOG_LIMIT'])
    return jsonify({
        'status': listing.status.value,
        'message': listing.message,
        'displayMode': display_mode.value,
        'featured': [card_to_dict(card) for card in listing.cards],
        'allBlogsPath': current_app.config['ALL_BLOGS_PATH'],
    })


@main_bp.app_errorhandler(404)
def page_not_found(e):
    """JSON 404 for unknown routes."""
    return jsonify({'error': 'Not found'}), 404

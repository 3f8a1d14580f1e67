"""
Blog Routes Blueprint

JSON endpoints for blog listings, single blogs and the display-mode
preference.
"""

from urllib.parse import quote

from flask import Blueprint, jsonify, request, current_app
from pydantic import ValidationError

from extensions import limiter
from models.blog import BlogCard, BlogMetrics, CommentSection, NavigationTarget, ViewStatus
from schemas.blog import DisplayModeSchema

blog_bp = Blueprint('blog', __name__, url_prefix='/api')

DETAIL_STATUS_CODES = {
    ViewStatus.FOUND: 200,
    ViewStatus.LOADING: 202,
    ViewStatus.NOT_FOUND: 404,
    ViewStatus.ERROR: 502,
}


def _display_mode_limit():
    return current_app.config.get('DISPLAY_MODE_RATE_LIMIT', '30 per minute')


# ========== SERIALIZERS ==========

def target_to_dict(target: NavigationTarget) -> dict:
    return {'path': target.path, 'query': target.params, 'url': target.url}


def metrics_to_dict(metrics: BlogMetrics) -> dict:
    return {
        'readingTimeMinutes': metrics.reading_time_minutes,
        'readingTimeLabel': metrics.reading_time_label,
        'likeCount': metrics.like_count,
        'viewCount': metrics.view_count,
        'commentCount': metrics.comment_count,
    }


def comments_to_dict(section: CommentSection) -> dict:
    return {
        'isEmpty': section.is_empty,
        'emptyMessage': section.empty_message,
        'items': [
            {
                'id': entry.id,
                'text': entry.text,
                'username': entry.username,
                'avatarUrl': entry.avatar_url,
                'createdAt': entry.created_at.isoformat() if entry.created_at else None,
            }
            for entry in section.comments
        ],
    }


def card_to_dict(card: BlogCard) -> dict:
    return {
        'id': card.id,
        'title': card.title,
        'url': card.url,
        'authorHandle': card.author_handle,
        'avatarUrl': card.avatar_url,
        'excerpt': card.excerpt,
        'metrics': metrics_to_dict(card.metrics),
        'tags': card.tags,
        'tagTargets': [target_to_dict(t) for t in card.tag_targets],
    }


# ========== LISTINGS ==========

@blog_bp.route("/blogs")
def list_blogs():
    """All blogs, optionally filtered by ?tag=, with the display mode."""
    blog_service = current_app.extensions['blog_service']
    feed = current_app.extensions['feed_service'].get_feed()
    display_mode = current_app.extensions['display_mode_store'].get_display_mode()

    tag = request.args.get('tag') or None
    listing = blog_service.resolve_listing(feed, tag=tag)
    current_app.logger.info(f"Blog listing: {listing.status.value}, {len(listing.cards)} cards, tag={tag}")

    return jsonify({
        'status': listing.status.value,
        'message': listing.message,
        'tag': tag,
        'displayMode': display_mode.value,
        'blogs': [card_to_dict(card) for card in listing.cards],
    })


# ========== SINGLE BLOG ==========

@blog_bp.route("/blogs/<path:blog_title>")
def blog_detail(blog_title):
    """Single blog looked up by its URL-encoded title."""
    blog_service = current_app.extensions['blog_service']
    feed = current_app.extensions['feed_service'].get_feed()

    # Flask has already decoded the segment; lookup expects it encoded
    raw_title = quote(blog_title, safe='')
    view = blog_service.resolve_blog_view(feed, raw_title)
    status_code = DETAIL_STATUS_CODES[view.status]

    if not view.is_found:
        current_app.logger.warning(f"Blog view {view.status.value}: {raw_title}")
        return jsonify({'status': view.status.value, 'message': view.message}), status_code

    blog = view.blog
    author = blog_service.resolve_author(blog)
    viewer_id = request.args.get('viewer')
    current_app.logger.info(f"Blog accessed: {blog.id}")

    return jsonify({
        'status': view.status.value,
        'blog': {
            'id': blog.id,
            'title': blog.title,
            'content': blog.content,
            'url': blog_service.blog_path(blog),
            'createdAt': blog.created_at.isoformat() if blog.created_at else None,
            'author': {
                'id': author.id,
                'username': author.username,
                'handle': f"@{author.username}",
                'avatarUrl': blog_service.resolve_avatar(author),
            },
            'tags': blog.tags,
            'tagTargets': [target_to_dict(t) for t in blog_service.tag_targets(blog)],
            'metrics': metrics_to_dict(blog_service.compute_metrics(blog)),
            'likedByViewer': blog_service.has_liked(blog, viewer_id),
            'comments': comments_to_dict(blog_service.comment_section(blog)),
        },
    }), status_code


# ========== DISPLAY MODE ==========

@blog_bp.route("/display-mode", methods=["GET"])
def get_display_mode():
    """Current list/grid preference."""
    mode = current_app.extensions['display_mode_store'].get_display_mode()
    return jsonify({'mode': mode.value})


@blog_bp.route("/display-mode", methods=["POST"])
@limiter.limit(_display_mode_limit)
def set_display_mode():
    """Persist a new preference from a JSON body: {"mode": "grid"}."""
    try:
        payload = DisplayModeSchema.model_validate(request.get_json(silent=True) or {})
    except ValidationError as e:
        current_app.logger.warning(f"Invalid display mode request: {e.error_count()} errors")
        return jsonify({'error': 'Invalid display mode', 'details': e.errors(include_url=False)}), 400

    mode = current_app.extensions['display_mode_store'].set_display_mode(payload.mode)
    current_app.logger.info(f"Display mode set to {mode.value}")
    return jsonify({'mode': mode.value})


@blog_bp.route("/display-mode/toggle", methods=["POST"])
@limiter.limit(_display_mode_limit)
def toggle_display_mode():
    """Flip between list and grid."""
    mode = current_app.extensions['display_mode_store'].toggle_display_mode()
    current_app.logger.info(f"Display mode toggled to {mode.value}")
    return jsonify({'mode': mode.value})

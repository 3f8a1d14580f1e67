"""
Feed Service - Supplies blog records to the presentation layer

Stands in for the blog API: reads a JSON file of API-shaped records and
reports the result as a BlogFeed, with failures folded into its error field.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from models.blog import BlogFeed, BlogRecord

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Failed to fetch blogs"


class FeedService:
    """Loads blog records from a JSON file."""

    def __init__(self, blogs_file: Path):
        self.blogs_file = Path(blogs_file)

    def _read_raw(self) -> Optional[list]:
        try:
            with open(self.blogs_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            logger.error(f"Blog source unavailable: {e}")
            return None
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Blog source is not valid JSON: {e}")
            return None

        # The API wraps listings as {"blogs": [...]}
        if isinstance(data, dict):
            data = data.get("blogs")
        if not isinstance(data, list):
            logger.error(f"Blog source has no blog list: {self.blogs_file}")
            return None
        return data

    def get_feed(self) -> BlogFeed:
        """
        Fetch all blogs.

        Returns:
            BlogFeed with the parsed records, or an error message when the
            source cannot be read or a record is malformed
        """
        raw = self._read_raw()
        if raw is None:
            return BlogFeed(error=FETCH_ERROR_MESSAGE)

        try:
            blogs = [BlogRecord.from_dict(item) for item in raw]
        except ValidationError as e:
            logger.error(f"Malformed blog record in {self.blogs_file}: {e}")
            return BlogFeed(error=FETCH_ERROR_MESSAGE)

        logger.debug(f"Loaded {len(blogs)} blogs from {self.blogs_file}")
        return BlogFeed(blog_list=blogs)

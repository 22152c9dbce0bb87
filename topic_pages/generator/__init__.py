"""Utilities for rendering and generating learning topic pages."""

from .page_generator import TopicPageGenerator, topic_image_url
from .renderer import HtmlTopicRenderer

__all__ = [
    "HtmlTopicRenderer",
    "TopicPageGenerator",
    "topic_image_url",
]

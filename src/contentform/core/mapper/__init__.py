"""Per-kind mapping between declared resources and remote representations."""

from contentform.core.mapper import content_type, entry, webhook

__all__ = ["content_type", "entry", "webhook"]

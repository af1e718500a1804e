"""Core config-domain exports."""

from contentform.core.config.loader import load_config, load_resources, resolve_token

__all__ = ["load_config", "load_resources", "resolve_token"]

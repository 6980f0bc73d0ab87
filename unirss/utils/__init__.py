"""Utility components for unirss."""

from unirss.utils.files import get_project_root, init_unirss
from unirss.utils.headers import DEFAULT_USER_AGENT, HeaderGenerator
from unirss.utils.logging import setup_local_logging
from unirss.utils.text import strip_invalid_xml_chars
from unirss.utils.urls import hostname, is_magnet_uri, is_valid_item_link, is_valid_url, resolve_url

__all__ = [
    'DEFAULT_USER_AGENT',
    'HeaderGenerator',
    'get_project_root',
    'hostname',
    'init_unirss',
    'is_magnet_uri',
    'is_valid_item_link',
    'is_valid_url',
    'resolve_url',
    'setup_local_logging',
    'strip_invalid_xml_chars',
]

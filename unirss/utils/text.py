"""Text clean-up for values that end up in feed XML."""

import re

# Anything outside the XML 1.0 Char production: C0 controls other than tab/LF/CR, lone surrogates, U+FFFE and U+FFFF
_INVALID_XML_RE = re.compile(r'[^\x09\x0a\x0d\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010ffff]')


def strip_invalid_xml_chars(text: str) -> str:
    """Remove characters that cannot appear in an XML 1.0 document."""
    return _INVALID_XML_RE.sub('', text)

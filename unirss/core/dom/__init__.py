"""DOM query facade."""

from unirss.core.dom.query import DomQuery

__all__ = ['DomQuery']

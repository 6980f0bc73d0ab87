import pytest

from unirss.core.dom import DomQuery
from unirss.exceptions import SelectorError


def test_select_all_keeps_document_order(blog_dom):
    titles = [blog_dom.text(tag) for tag in blog_dom.select_all(None, 'h2')]
    assert titles == ['First Post Title', 'Second Post']


def test_select_all_scoped_to_root(blog_dom):
    first_post = blog_dom.select_one(None, '.post')
    links = blog_dom.select_all(first_post, 'a[href]')
    assert [blog_dom.attr(a, 'href') for a in links] == ['/posts/first']


def test_select_one_returns_none_without_match(blog_dom):
    assert blog_dom.select_one(None, 'article.missing') is None


def test_invalid_selector_raises_selector_error(blog_dom):
    with pytest.raises(SelectorError) as exc_info:
        blog_dom.select_all(None, 'div[')
    assert exc_info.value.selector == 'div['


def test_attr_joins_multi_valued_attributes():
    dom = DomQuery('<div class="post featured" id="x"></div>', 'https://example.com')
    div = dom.select_one(None, 'div')
    assert dom.attr(div, 'class') == 'post featured'
    assert dom.attr(div, 'id') == 'x'
    assert dom.attr(div, 'data-missing') is None


def test_text_collapses_whitespace_when_trimming():
    dom = DomQuery('<p>  Hello\n   <b>big</b>   world  </p>', 'https://example.com')
    p = dom.select_one(None, 'p')
    assert dom.text(p) == 'Hello big world'
    assert dom.text(p, trim=False).startswith('  Hello')


def test_parent_is_immediate_parent(blog_dom):
    anchor = blog_dom.select_one(None, 'a[href="/posts/first"]')
    parent = blog_dom.parent(anchor)
    assert parent.name == 'div'
    assert 'post' in parent['class']


def test_resolve_url_uses_page_url(blog_dom):
    assert blog_dom.resolve_url('/x') == 'https://example.com/x'
    assert blog_dom.resolve_url('magnet:?xt=urn:btih:ABC') == 'magnet:?xt=urn:btih:ABC'
    assert blog_dom.resolve_url('y', base='https://other.org/a/') == 'https://other.org/a/y'


def test_title_is_whitespace_collapsed(blog_dom):
    assert blog_dom.title() == 'My Blog'


def test_title_missing_or_blank():
    assert DomQuery('<html><body></body></html>', 'https://example.com').title() is None
    assert DomQuery('<html><head><title>  </title></head></html>', 'https://example.com').title() is None


def test_html_parser_backend_behaves_the_same(blog_html):
    dom = DomQuery(blog_html, 'https://example.com/blog/', parser='html.parser')
    assert dom.title() == 'My Blog'
    assert len(dom.select_all(None, '.post')) == 4


def test_text_and_attr_drop_xml_incompatible_characters():
    dom = DomQuery('<a href="/x" title="Say&#8; hi">Other &#8; item</a>', 'https://example.com')
    anchor = dom.select_one(None, 'a')
    assert dom.text(anchor) == 'Other item'
    assert dom.attr(anchor, 'title') == 'Say hi'


def test_children_are_direct_only():
    html = '<table><tr><td>a</td><td><table><tr><td>nested</td></tr></table></td></tr></table>'
    dom = DomQuery(html, 'https://example.com')
    row = dom.select_one(None, 'tr')
    assert [dom.text(cell) for cell in dom.children(row, 'td')] == ['a', 'nested']
    assert len(dom.select_all(row, 'td')) == 3

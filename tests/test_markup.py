import unittest

from svgicons.errors import MarkupError
from svgicons.markup import (
    find_matching_close_tag,
    parse_attributes,
    parse_children,
    parse_element,
)


class TestParseAttributes(unittest.TestCase):
    def test_order_and_digits(self):
        """Attribute names may contain digits, colons and dashes."""
        attrs = parse_attributes(' x1="0" y2="5" stroke-width="2" xlink:href="#a"')
        self.assertEqual(list(attrs), ["x1", "y2", "stroke-width", "xlink:href"])
        self.assertEqual(attrs["x1"], "0")

    def test_values_are_unescaped(self):
        attrs = parse_attributes(' aria-label="Say &quot;hi&quot;" href="?a=1&amp;b=2"')
        self.assertEqual(attrs, {"aria-label": 'Say "hi"', "href": "?a=1&b=2"})


class TestFindMatchingCloseTag(unittest.TestCase):
    def test_nested_same_tag(self):
        content = '<g><g><path d="a"/></g><path d="b"/></g>'
        self.assertEqual(find_matching_close_tag(content, "g"), len(content) - len("</g>"))

    def test_self_closing_same_tag_is_not_nesting(self):
        content = "<g><g/></g>"
        self.assertEqual(find_matching_close_tag(content, "g"), 7)

    def test_prefix_tag_names_do_not_match(self):
        """<path> must not count as an opening <p>."""
        content = "<p><path d=\"1\"/></p>"
        self.assertEqual(find_matching_close_tag(content, "p"), content.index("</p>"))

    def test_unclosed(self):
        self.assertEqual(find_matching_close_tag("<g><path/>", "g"), -1)


class TestParseElement(unittest.TestCase):
    """Test building the element tree."""

    def test_root_with_child(self):
        node = parse_element('<svg viewBox="0 0 24 24"><path d="M1"/></svg>')
        self.assertEqual(node.tag, "svg")
        self.assertEqual(node.attributes, {"viewBox": "0 0 24 24"})
        self.assertEqual(len(node.children), 1)
        self.assertEqual(node.children[0].tag, "path")
        self.assertTrue(node.children[0].self_closing)
        self.assertTrue(node.children[0].is_leaf)

    def test_nested_groups(self):
        node = parse_element(
            '<svg><g fill="none"><path d="M1"/><circle cx="1" cy="1" r="1"/></g><path d="M2"/></svg>'
        )
        self.assertEqual([c.tag for c in node.children], ["g", "path"])
        group = node.children[0]
        self.assertEqual(group.attributes, {"fill": "none"})
        self.assertEqual([c.tag for c in group.children], ["path", "circle"])

    def test_nested_same_tag(self):
        node = parse_element('<g><g><path d="a"/></g><path d="b"/></g>')
        self.assertEqual([c.tag for c in node.children], ["g", "path"])
        self.assertEqual(node.children[0].children[0].attributes, {"d": "a"})

    def test_self_closing_root(self):
        node = parse_element('<svg viewBox="0 0 1 1"/>')
        self.assertTrue(node.self_closing)
        self.assertEqual(node.children, [])

    def test_text_content(self):
        node = parse_element("<svg><title>A &amp; B</title></svg>")
        title = node.children[0]
        self.assertEqual(title.tag, "title")
        self.assertEqual(title.text, "A & B")
        self.assertFalse(title.is_leaf)

    def test_no_opening_tag_raises(self):
        with self.assertRaises(MarkupError):
            parse_element("just text")


class TestParseChildren(unittest.TestCase):
    def test_stops_at_text(self):
        children = parse_children('<path d="1"/> trailing text <path d="2"/>')
        self.assertEqual(len(children), 1)

    def test_unclosed_child_raises(self):
        with self.assertRaises(MarkupError):
            parse_children('<g><path d="1"/>')


if __name__ == '__main__':
    unittest.main()

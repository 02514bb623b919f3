import unittest

from svgicons.jsx import render_jsx, to_jsx_attr, to_jsx_attr_name
from svgicons.model import CallNode


class TestAttributeNames(unittest.TestCase):
    def test_camel_case(self):
        self.assertEqual(to_jsx_attr_name("stroke-width"), "strokeWidth")
        self.assertEqual(to_jsx_attr_name("xlink:href"), "xlinkHref")
        self.assertEqual(to_jsx_attr_name("viewBox"), "viewBox")

    def test_special_names(self):
        self.assertEqual(to_jsx_attr_name("class"), "className")
        self.assertEqual(to_jsx_attr_name("tabindex"), "tabIndex")

    def test_aria_and_data_unchanged(self):
        self.assertEqual(to_jsx_attr_name("aria-label"), "aria-label")
        self.assertEqual(to_jsx_attr_name("data-icon"), "data-icon")


class TestAttributeValues(unittest.TestCase):
    def test_numeric_values(self):
        self.assertEqual(to_jsx_attr("stroke-width", "2"), "strokeWidth={2}")
        self.assertEqual(to_jsx_attr("opacity", "0.5"), "opacity={0.5}")

    def test_numeric_aria_stays_string(self):
        self.assertEqual(to_jsx_attr("aria-level", "2"), 'aria-level="2"')

    def test_string_values(self):
        self.assertEqual(to_jsx_attr("fill", "none"), 'fill="none"')

    def test_quoted_values_become_expressions(self):
        self.assertEqual(to_jsx_attr("aria-label", 'Say "hi"'), 'aria-label={"Say \\"hi\\""}')
        self.assertEqual(to_jsx_attr("href", "?a=1&b=2"), 'href={"?a=1&b=2"}')

    def test_style_object(self):
        self.assertEqual(
            to_jsx_attr("style", "fill-opacity:0.5;mix-blend-mode:multiply"),
            'style={{ fillOpacity: 0.5, mixBlendMode: "multiply" }}',
        )


class TestRenderJsx(unittest.TestCase):
    def test_root_props_on_root_only(self):
        node = CallNode(
            tag="svg",
            attributes={"viewBox": "0 0 24 24"},
            children=[CallNode(tag="path", attributes={"d": "M1", "stroke-linecap": "round"})],
        )
        self.assertEqual(
            render_jsx(node, root_props=["ref={ref}", "{...props}"]),
            '<svg viewBox="0 0 24 24" ref={ref} {...props}><path d="M1" strokeLinecap="round" /></svg>',
        )

    def test_text_children(self):
        node = CallNode(tag="svg", children=[CallNode(tag="title", text="Home")])
        self.assertEqual(render_jsx(node), "<svg><title>Home</title></svg>")

    def test_text_with_braces_is_an_expression(self):
        node = CallNode(tag="title", text="a {b}")
        self.assertEqual(render_jsx(node), '<title>{"a {b}"}</title>')

    def test_kebab_case_mode(self):
        node = CallNode(tag="path", attributes={"stroke-width": "2"})
        self.assertEqual(render_jsx(node, camel_case=False), '<path stroke-width="2" />')


if __name__ == '__main__':
    unittest.main()

import unittest

from svgicons.errors import MarkupError
from svgicons.model import ComponentSpec
from svgicons.svg import (
    find_svg_markup,
    get_a11y_attrs,
    get_extra_attrs,
    inject_svg_attrs,
    inject_svg_title,
    normalize,
    optimize_markup,
    to_readable_name,
)


SIMPLE = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path d="M1 1"/></svg>'


class TestOptimizeMarkup(unittest.TestCase):
    """Test SVG canonicalization."""

    def test_strips_prolog_comments_and_metadata(self):
        markup = (
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">\n'
            "  <!-- generated -->\n"
            "  <title>home</title>\n"
            "  <desc>A house</desc>\n"
            "  <metadata>x</metadata>\n"
            '  <path d="M1 1"/>\n'
            "</svg>\n"
        )
        result = optimize_markup(markup)
        self.assertTrue(result.startswith("<svg"))
        for fragment in ("<?xml", "<!--", "<title>", "<desc>", "<metadata>", "\n"):
            self.assertNotIn(fragment, result)
        self.assertTrue(result.endswith('<path d="M1 1"/></svg>'))

    def test_style_becomes_attributes(self):
        """Presentation properties move out of style."""
        markup = (
            '<svg xmlns="http://www.w3.org/2000/svg">'
            '<path d="M1" style="fill:red;stroke-width:2"/></svg>'
        )
        result = optimize_markup(markup)
        self.assertIn('fill="red"', result)
        self.assertIn('stroke-width="2"', result)
        self.assertNotIn("style=", result)

    def test_unknown_style_properties_stay(self):
        markup = '<svg xmlns="http://www.w3.org/2000/svg"><path d="M1" style="mix-blend-mode:multiply"/></svg>'
        self.assertIn('style="mix-blend-mode:multiply"', optimize_markup(markup))

    def test_editor_namespaces_removed(self):
        markup = (
            '<svg xmlns="http://www.w3.org/2000/svg" '
            'xmlns:inkscape="http://www.inkscape.org/namespaces/inkscape" '
            'inkscape:version="1.0"><path d="M0"/></svg>'
        )
        self.assertNotIn("inkscape", optimize_markup(markup))

    def test_attributes_sorted(self):
        """Known attributes come first, in a fixed order."""
        markup = '<svg xmlns="http://www.w3.org/2000/svg"><path d="M1" fill="none"/></svg>'
        self.assertIn('<path fill="none" d="M1"/>', optimize_markup(markup))

    def test_standard_namespace_prefixes(self):
        markup = (
            '<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink">'
            '<use xlink:href="#a"/></svg>'
        )
        result = optimize_markup(markup)
        self.assertTrue(result.startswith('<svg xmlns="http://www.w3.org/2000/svg"'))
        self.assertIn('<use xlink:href="#a"/>', result)
        self.assertNotIn("ns0", result)

    def test_self_closing_without_space(self):
        self.assertNotIn(" />", optimize_markup(SIMPLE))

    def test_malformed_markup_raises(self):
        with self.assertRaises(MarkupError):
            optimize_markup("<svg><path></svg>")


class TestAccessibility(unittest.TestCase):
    def test_readable_name(self):
        self.assertEqual(to_readable_name("ArrowUpRight"), "Arrow Up Right")
        self.assertEqual(to_readable_name("Icon2Fa"), "Icon2 Fa")

    def test_a11y_attrs(self):
        self.assertEqual(get_a11y_attrs("hidden", "Home"), {"aria-hidden": "true"})
        self.assertEqual(
            get_a11y_attrs("img", "ArrowUp"), {"role": "img", "aria-label": "Arrow Up"}
        )
        self.assertEqual(get_a11y_attrs("presentation", "Home"), {"role": "presentation"})
        self.assertEqual(get_a11y_attrs("title", "Home"), {})
        self.assertEqual(get_a11y_attrs("none", "Home"), {})
        self.assertEqual(get_a11y_attrs(None, "Home"), {})

    def test_extra_attrs_track_source(self):
        spec = ComponentSpec("Home", icon_name="mdi:home", a11y="hidden")
        self.assertEqual(
            get_extra_attrs(spec), {"aria-hidden": "true", "data-icon": "mdi:home"}
        )

    def test_extra_attrs_without_tracking(self):
        spec = ComponentSpec("Home", icon_name="mdi:home", track_source=False)
        self.assertEqual(get_extra_attrs(spec), {})

    def test_spec_rejects_unknown_strategy(self):
        with self.assertRaises(ValueError):
            ComponentSpec("Home", a11y="loud")

    def test_spec_maps_none_strategy(self):
        self.assertEqual(ComponentSpec("Home", a11y=None).a11y, "none")


class TestRootInjection(unittest.TestCase):
    """Test splicing attributes and children into the root tag."""

    def test_inject_attrs(self):
        result = inject_svg_attrs('<svg viewBox="0 0 24 24"><path d="M1"/></svg>', {"aria-hidden": "true"})
        self.assertEqual(result, '<svg viewBox="0 0 24 24" aria-hidden="true"><path d="M1"/></svg>')

    def test_inject_attrs_self_closing(self):
        result = inject_svg_attrs('<svg viewBox="0 0 24 24"/>', {"role": "img"})
        self.assertEqual(result, '<svg viewBox="0 0 24 24" role="img"/>')

    def test_inject_attrs_escapes_values(self):
        result = inject_svg_attrs("<svg></svg>", {"aria-label": 'Say "hi"'})
        self.assertIn('aria-label="Say &quot;hi&quot;"', result)

    def test_title_with_children(self):
        result = inject_svg_title('<svg a="1"><path d="M1"/></svg>', "Home")
        self.assertEqual(result, '<svg a="1"><title>Home</title><path d="M1"/></svg>')

    def test_title_on_self_closing_root(self):
        result = inject_svg_title('<svg viewBox="0 0 1 1"/>', "Home")
        self.assertEqual(result, '<svg viewBox="0 0 1 1"><title>Home</title></svg>')

    def test_missing_root_raises(self):
        with self.assertRaises(MarkupError):
            inject_svg_attrs("<div></div>", {"role": "img"})
        with self.assertRaises(MarkupError):
            inject_svg_title("<div></div>", "Home")

    def test_find_svg_markup(self):
        self.assertEqual(find_svg_markup("x <svg a=\"1\"></svg> y"), '<svg a="1"></svg>')
        self.assertEqual(find_svg_markup("<svg/>"), "<svg/>")
        self.assertIsNone(find_svg_markup("404"))


class TestNormalize(unittest.TestCase):
    def test_title_strategy(self):
        """The title strategy adds a readable <title> as first child."""
        spec = ComponentSpec("ArrowRight", icon_name="lucide:arrow-right", a11y="title")
        result = normalize(SIMPLE, spec)
        self.assertIn('data-icon="lucide:arrow-right"><title>Arrow Right</title><path', result)

    def test_img_strategy(self):
        spec = ComponentSpec("Home", icon_name="mdi:home", a11y="img")
        result = normalize(SIMPLE, spec)
        self.assertIn('role="img" aria-label="Home" data-icon="mdi:home"', result)

    def test_custom_optimizer(self):
        spec = ComponentSpec("Home", track_source=False, a11y="hidden")
        result = normalize("<svg></svg>", spec, optimizer=lambda m: m)
        self.assertEqual(result, '<svg aria-hidden="true"></svg>')


if __name__ == '__main__':
    unittest.main()

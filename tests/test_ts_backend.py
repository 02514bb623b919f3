import unittest

from svgicons.errors import RegistryParseError
from svgicons.ts_backend import TsBackend


class TestTsBackend(unittest.TestCase):
    """Test the tree-sitter wrapper."""

    def test_exported_declarators(self):
        backend = TsBackend()
        root = backend.parse("const a = 1;\nexport const b = 2, c = 3;\nexport default {};\n")
        names = [
            backend.node_text(d.child_by_field_name("name"))
            for d in backend.iter_exported_declarators(root)
        ]
        self.assertEqual(names, ["b", "c"])

    def test_unwrap_wrappers(self):
        backend = TsBackend()
        root = backend.parse("export const Icons = ({} as const) satisfies Record<string, number>;\n")
        declarator = next(backend.iter_exported_declarators(root))
        value = backend.unwrap(declarator.child_by_field_name("value"))
        self.assertEqual(value.type, "object")

    def test_char_offsets_with_multibyte_text(self):
        source = 'export const s = "ü";\nexport const Icons = {};\n'
        backend = TsBackend()
        root = backend.parse(source)
        declarator = list(backend.iter_exported_declarators(root))[1]
        start, end = backend.span(declarator)
        self.assertEqual(source[start:end], "Icons = {}")

    def test_syntax_error_position(self):
        with self.assertRaises(RegistryParseError) as ctx:
            TsBackend().parse("export const a = 1;\nexport const = ;\n")
        self.assertIn("line 2", str(ctx.exception))


if __name__ == '__main__':
    unittest.main()

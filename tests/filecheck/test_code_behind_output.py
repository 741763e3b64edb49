"""
FileCheck-style tests for generated code-behind output.

These tests validate the structure of generated C# using ordered pattern
matching similar to LLVM FileCheck, plus one exact golden comparison.
"""

import re

import pytest

from rosalina.codegen.builder import build_declarations
from rosalina.codegen.renderer import SourceRenderer
from rosalina.synthesis import SynthesisRequest, synthesize


def check_order(text, patterns):
    """Assert that every pattern matches, each after the previous match."""
    position = 0
    for pattern in patterns:
        match = re.compile(pattern, re.MULTILINE).search(text, position)
        assert match, f"CHECK failed: {pattern!r} not found after offset {position}"
        position = match.end()


class TestCodeBehindStructure:
    """Test generated code-behind structure."""

    def test_exact_output(self, banner, expected_main_menu_source):
        """The generated file matches the reference text byte for byte."""
        assert synthesize("Assets/UI/MainMenu.uxml", banner).text == expected_main_menu_source

    def test_section_order(self, banner):
        """Banner, usings, class, field, property, method appear in order."""
        text = synthesize("UI/MainMenu.uxml", banner).text

        check_order(text, [
            # CHECK: // <auto-generated>
            r"^// <auto-generated>$",
            # CHECK: Version: 9.9.9
            r"^//     Version: 9\.9\.9$",
            # CHECK: // </auto-generated>
            r"^// </auto-generated>$",
            # CHECK: using UnityEngine;
            r"^using UnityEngine;$",
            # CHECK-NEXT: using UnityEngine.UIElements;
            r"\nusing UnityEngine\.UIElements;$",
            # CHECK: public partial class MainMenu : MonoBehaviour
            r"^public partial class MainMenu : MonoBehaviour$",
            # CHECK: [SerializeField]
            r"^    \[SerializeField\]$",
            # CHECK-NEXT: private UIDocument _document;
            r"\n    private UIDocument _document;$",
            # CHECK: public VisualElement Root
            r"^    public VisualElement Root$",
            # CHECK: return _document?.rootVisualElement;
            r"^            return _document\?\.rootVisualElement;$",
            # CHECK: public void InitializeDocument()
            r"^    public void InitializeDocument\(\)$",
            # CHECK-NEXT: {
            r"\n    \{$",
            # CHECK-NEXT: }
            r"\n    \}$",
        ])

    def test_banner_precedes_everything(self, banner):
        """The first non-empty line block is the banner."""
        text = synthesize("UI/Hud.uxml", banner).text
        first_block = text.split("\n\n", 1)[0].splitlines()

        assert all(line.startswith("//") for line in first_block)
        assert "//     Version: 9.9.9" in first_block

    def test_no_timestamps(self, banner):
        """Generated text carries no date or time stamps."""
        text = synthesize("UI/Hud.uxml", banner).text

        # CHECK-NOT: generated on
        assert not re.search(r"generated on", text, re.IGNORECASE)
        assert not re.search(r"\d{4}-\d{2}-\d{2}", text)

    def test_single_type_declaration(self, banner):
        text = synthesize("UI/Hud.uxml", banner).text

        assert len(re.findall(r"\bclass\b", text)) == 1
        assert len(re.findall(r"^using ", text, re.MULTILINE)) == 2

    @pytest.mark.parametrize("name", ["MainMenu", "Settings", "Hud", "Inventory_Panel"])
    def test_class_named_after_document(self, banner, name):
        text = synthesize(f"Assets/UI/{name}.uxml", banner).text

        # CHECK: public partial class {{name}} : MonoBehaviour
        assert re.search(rf"^public partial class {name} : MonoBehaviour$", text, re.MULTILINE)

    def test_balanced_braces(self, banner):
        text = synthesize("UI/MainMenu.uxml", banner).text
        assert text.count("{") == text.count("}")
        assert text.count("(") == text.count(")")


class TestRegeneration:
    """Test that regeneration is a fixed point."""

    def test_rerender_same_tree(self, banner):
        request = SynthesisRequest.from_path("UI/MainMenu.uxml")
        unit = build_declarations(request)
        renderer = SourceRenderer()

        assert renderer.render(unit, banner) == renderer.render(unit, banner)

    def test_rebuild_and_rerender(self, banner):
        request = SynthesisRequest.from_path("UI/MainMenu.uxml")
        first = SourceRenderer().render(build_declarations(request), banner)
        second = SourceRenderer().render(build_declarations(request), banner)

        assert first == second

    def test_version_changes_only_banner(self, banner):
        from rosalina.codegen.renderer import BannerMeta

        old = synthesize("UI/MainMenu.uxml", banner).text
        new = synthesize("UI/MainMenu.uxml", BannerMeta(banner.tool_name, "10.0.0")).text

        old_lines = old.splitlines()
        new_lines = new.splitlines()
        changed = [i for i, (a, b) in enumerate(zip(old_lines, new_lines)) if a != b]
        assert changed == [3]

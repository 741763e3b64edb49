#!/usr/bin/env python3
"""
Basic usage example for Rosalina.

This example shows the pure synthesis step, a look at the intermediate
syntax tree, and the host-side generator writing a file next to its
document.
"""

import tempfile
from pathlib import Path

import rosalina
from rosalina.codegen import build_declarations
from rosalina.synthesis import SynthesisRequest


def main():
    """Demonstrate basic Rosalina usage."""
    print("Rosalina UI Code-Behind Generator - Basic Usage Example")
    print("=" * 60)

    # 1. Pure synthesis: nothing is written
    print("\n1. Synthesizing code-behind for Assets/UI/MainMenu.uxml...")
    rendered = rosalina.synthesize("Assets/UI/MainMenu.uxml")
    print(f"Output path: {rendered.path}")
    print(rendered.text)

    # 2. The tree the text was rendered from
    print("2. Declaration tree members:")
    unit = build_declarations(SynthesisRequest.from_path("Assets/UI/MainMenu.uxml"))
    for member in unit.types[0].members:
        print(f"   {member.kind.value:<8} {member.name}")
    print(f"   imports: {', '.join(unit.imports)}")

    # 3. Host generation into a scratch project
    print("\n3. Generating into a temporary project...")
    with tempfile.TemporaryDirectory() as project:
        document = Path(project) / "Hud.uxml"
        document.write_text("<ui:UXML />", encoding="utf-8")

        generator = rosalina.CodeBehindGenerator()
        result = generator.generate(document)
        print(f"✓ Wrote {result.path} ({len(result.text)} characters)")


if __name__ == "__main__":
    main()

"""
Pytest configuration and shared fixtures for Rosalina tests.

This module provides common test fixtures, configuration, and utilities
used across the test suite.
"""

import pytest

from rosalina.codegen import (
    BannerMeta,
    DeclarationBuilder,
    SourceRenderer,
)
from rosalina.synthesis import SynthesisRequest
from rosalina.utils.config import set_config


# Expected output for Assets/UI/MainMenu.uxml with the test banner
MAIN_MENU_SOURCE = """\
//------------------------------------------------------------------------------
// <auto-generated>
//     This code was generated by the Rosalina Code Generator tool.
//     Version: 9.9.9
//
//     Changes to this file may cause incorrect behavior and will be lost if
//     the code is regenerated.
// </auto-generated>
//------------------------------------------------------------------------------

using UnityEngine;
using UnityEngine.UIElements;

public partial class MainMenu : MonoBehaviour
{
    [SerializeField]
    private UIDocument _document;

    public VisualElement Root
    {
        get
        {
            return _document?.rootVisualElement;
        }
    }

    public void InitializeDocument()
    {
    }
}
"""


@pytest.fixture
def banner():
    """Banner metadata with a fixed version string."""
    return BannerMeta(tool_name="Rosalina Code Generator", version="9.9.9")


@pytest.fixture
def document_path():
    """Path of a sample UI document."""
    return "Assets/UI/MainMenu.uxml"


@pytest.fixture
def synthesis_request(document_path):
    """Synthesis request for the sample document."""
    return SynthesisRequest.from_path(document_path)


@pytest.fixture
def builder():
    """Create a DeclarationBuilder instance."""
    return DeclarationBuilder()


@pytest.fixture
def renderer():
    """Create a SourceRenderer instance."""
    return SourceRenderer()


@pytest.fixture
def compilation_unit(builder, synthesis_request):
    """Declaration tree for the sample document."""
    return builder.build(synthesis_request)


@pytest.fixture
def expected_main_menu_source():
    """Exact generated text for MainMenu.uxml."""
    return MAIN_MENU_SOURCE


@pytest.fixture
def ui_project(tmp_path):
    """Create a small Unity-like asset tree with UI documents."""
    ui_dir = tmp_path / "Assets" / "UI"
    (ui_dir / "Menus").mkdir(parents=True)
    (ui_dir / "MainMenu.uxml").write_text("<ui:UXML />", encoding="utf-8")
    (ui_dir / "Menus" / "Settings.uxml").write_text("<ui:UXML />", encoding="utf-8")
    (ui_dir / "Theme.uss").write_text(".root {}", encoding="utf-8")
    return tmp_path


@pytest.fixture(autouse=True)
def reset_global_config():
    """Make sure no test leaks its configuration into another."""
    set_config(None)
    yield
    set_config(None)


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test path."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "filecheck" in str(item.fspath):
            item.add_marker(pytest.mark.filecheck)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "filecheck: FileCheck-style generated code validation tests"
    )

"""Ensure interface adapter packages expose the expected metadata."""

from importlib import import_module


def test_interface_package_exports_are_empty() -> None:
    module = import_module("src.adapters.interface")
    assert module.__all__ == []


def test_streamlit_package_exports_are_empty() -> None:
    module = import_module("src.adapters.interface.streamlit")
    assert module.__all__ == []


def test_streamlit_modules_expose_entry_points() -> None:
    """The app runs through main and renders through the view helpers."""
    app = import_module("src.adapters.interface.streamlit.app")
    view = import_module("src.adapters.interface.streamlit.settlement_view")

    assert callable(app.main)
    assert {"balance_rows", "transfer_rows", "balance_chart_data"} <= set(
        view.__all__
    )

"""
Top-level package for the data workbench.

This package exposes the exploration state engine and its Dash front end.
Most code should import from submodules such as:
    data_workbench.core
    data_workbench.views
    data_workbench.ui
"""

__all__: list[str] = []

"""
UI adapters for the browser.

Currently provides a Dash-based web UI via create_dash_app(); the core and
views packages know nothing about Dash beyond Plotly figures.
"""

from .dash_app import create_dash_app

__all__ = ["create_dash_app"]

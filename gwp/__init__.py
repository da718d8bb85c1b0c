# gwp/__init__.py
"""
Average gross written premium per line of business, served over HTTP.

    uvicorn gwp:app
"""

from .main import app, create_app

__all__ = ["app", "create_app"]

# app.py
"""
Serves the GWP averages API from the project root, loading the dataset
named by GWP_DATA_FILE at startup.

    uvicorn app:app --reload
"""

from gwp.main import app

# gwp/config.py
import os


class Config:
    # Dataset loaded once at startup
    DATA_FILE = os.environ.get("GWP_DATA_FILE", "data/gwp.csv")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

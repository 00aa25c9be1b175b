import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    OUTPUT_DIR: str = os.environ.get("DATASET_REPORT_OUTPUT_DIR", "/tmp/dataset_report")
    DEFAULT_MODEL: str = os.environ.get("DEFAULT_MODEL", "gemini-2.5-flash")
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()

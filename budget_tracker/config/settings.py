"""Global settings and configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Ledger file, always relative to the working directory
STORE_FILE = Path("transactions.csv")
STORE_HEADER = "date,type,category,amount,note"
STORE_ENCODING = "utf-8"

# Date handling
DATE_FORMAT = "%Y-%m-%d"
MONTH_FORMAT = "%Y-%m"

# Logging (diagnostics only, never affects where data is stored)
LOG_LEVEL = os.getenv("BUDGET_LOG_LEVEL", "WARNING")
LOG_FILE = Path(os.environ["BUDGET_LOG_FILE"]) if os.getenv("BUDGET_LOG_FILE") else None

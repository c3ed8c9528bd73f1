import os

SEED_URL = os.getenv(
    "SEED_URL", "https://s3.amazonaws.com/roxiler.com/product_transaction.json"
)
SEED_CONNECT_TIMEOUT = int(os.getenv("SEED_CONNECT_TIMEOUT", "10"))
SEED_READ_TIMEOUT = int(os.getenv("SEED_READ_TIMEOUT", "60"))

# Month windows are always built in this year, whatever year a record carries.
REFERENCE_YEAR = int(os.getenv("REFERENCE_YEAR", "2022"))

DEFAULT_PER_PAGE = int(os.getenv("DEFAULT_PER_PAGE", "10"))
# keeps (page - 1) * perPage well inside a 64-bit OFFSET
MAX_PER_PAGE = int(os.getenv("MAX_PER_PAGE", "1000"))
MAX_PAGE = int(os.getenv("MAX_PAGE", "1000000"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

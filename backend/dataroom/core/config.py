import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables (only in development)
# In containers, environment variables are set directly
if os.getenv("ENVIRONMENT") != "production":
    load_dotenv()

# Data directory - holds the persisted state and uploaded blobs (defaults to ./data)
DATA_DIR_STR = os.getenv("DATAROOM_DATA_DIR", str(Path.cwd() / "data"))
DATA_DIR = Path(DATA_DIR_STR)

# State store configuration
STATE_STORE_TYPE = os.getenv("STATE_STORE_TYPE", "json")  # Options: 'json', 'memory'
JSON_DB_PATH = os.getenv("JSON_DB_PATH")  # Directory for the JSON state file
STATE_FILE_NAME = "dataroom-state.json"

# Blob storage configuration
BLOB_STORAGE_TYPE = os.getenv("BLOB_STORAGE_TYPE", "local")  # Options: 'local', 'memory'
BLOB_STORAGE_DIR = os.getenv("BLOB_STORAGE_DIR")  # Directory for uploaded file bytes
BLOB_KEY_PREFIX = "file-"

# Uploads
MAX_FILE_SIZE = int(os.getenv("MAX_FILE_SIZE", str(5 * 1024 * 1024)))
SUPPORTED_FILE_TYPE = "application/pdf"

# Naming
ROOT_FOLDER_NAME = os.getenv("ROOT_FOLDER_NAME", "Acme Corp Data Room")
DEFAULT_FOLDER_NAME = "New Folder"
MAX_NAME_LENGTH = 255
INVALID_NAME_CHARS = ['\\', '/', ':', '*', '?', '"', '<', '>', '|']

# Listing
ITEMS_PER_PAGE = int(os.getenv("ITEMS_PER_PAGE", "20"))

from pathlib import Path


# Repository root (the directory holding pyproject.toml)
BASE_DIR = Path(__file__).resolve().parents[3]

LOG_DIR = BASE_DIR / 'logs'

# Local overrides win over the checked-in example
ENV_FILE = BASE_DIR / '.env' if (BASE_DIR / '.env').exists() else BASE_DIR / '.env.example'

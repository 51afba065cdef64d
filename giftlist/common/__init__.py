# Common utilities
from .config_loader import build_fetch_settings, load_config, load_fetch_settings
from .log_config import setup_logging
from .settings import FetchSettings
from .text_utils import clean_text, parse_price

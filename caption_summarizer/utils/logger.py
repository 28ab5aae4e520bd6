import os
import sys
import logging

from caption_summarizer.config import config

logging_str = "[%(asctime)s] {%(pathname)s:%(lineno)d} %(levelname)s - %(message)s"
logging_dir = os.path.join(config.BASE_DIR, "logs")
logging_path = os.path.join(logging_dir, "captionsummarizer.log")
os.makedirs(logging_dir, exist_ok=True)

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format=logging_str,
    handlers=[
        logging.FileHandler(logging_path),
        logging.StreamHandler(sys.stdout)
    ]
)

logging = logging.getLogger('captionsummarizer')

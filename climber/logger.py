# Climber CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""Package logger shared by all Climber modules."""
import logging

logger: logging.Logger = logging.getLogger("climber")

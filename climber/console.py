# Climber CLI Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Climber applications."""
from rich.console import Console

console = Console(highlight=False)

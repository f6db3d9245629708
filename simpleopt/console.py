# Simpleopt CLI Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance used for diagnostics and help rendering."""
from rich.console import Console

console = Console(color_system="truecolor", highlight=False)

# Optscan Option Scanner — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for optscan output and scan diagnostics."""
from rich.console import Console

console = Console(color_system="truecolor")
error_console = Console(stderr=True, highlight=False)

"""Classic getopt loop: `python getopt_demo.py -v -o out.txt input.txt`."""
import sys

from optscan import OptionScanner, ScanError, ShortOption
from optscan.utils import setup_logging

setup_logging()

verbose = False
output = "-"

scanner = OptionScanner(sys.argv, "vo:")
for result in scanner:
    if isinstance(result, ScanError):
        print(f"usage: {scanner.program} [-v] [-o file] file ...", file=sys.stderr)
        sys.exit(2)
    if isinstance(result, ShortOption):
        if result.char == "v":
            verbose = True
        elif result.char == "o":
            output = result.value

print(f"verbose={verbose} output={output} files={scanner.operands}")

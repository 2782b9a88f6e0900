"""getopt_long with a config-defined table: `python long_options_demo.py --verbose --output=x a b`."""
import sys
from pathlib import Path

from optscan import FlagSet, LongOptionMatch, OptionScanner, ShortOption
from optscan.config import loader

spec = loader(Path(__file__).parent / "options.yaml")
scanner = OptionScanner(
    sys.argv, spec.short, spec.long, program=spec.program, print_errors=spec.print_errors
)

results, operands = scanner.collect(strict=False)
for result in results:
    match result:
        case LongOptionMatch(name=name, value=value) | ShortOption(char=name, value=value):
            print(f"option {name!r} value={value!r}")
        case FlagSet(name=name, stored=stored):
            print(f"flag {name!r} stored {stored!r}")
        case _:
            print(f"error: {result.describe()}")

print("verbose flag:", spec.flags["verbose"].value)
print("operands:", operands)

"""Allow ``python -m sc2kit``."""
from .cli import main

main()

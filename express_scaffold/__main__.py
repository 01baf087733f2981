"""Allow ``python -m express_scaffold``."""

from express_scaffold.cli import main

main()

"""express-scaffold -- generate a minimal Express backend skeleton.

Quick usage::

    from pathlib import Path
    from express_scaffold.scaffolder import initialize_structure

    results = initialize_structure(Path.cwd())
"""

__version__ = "1.0.0"

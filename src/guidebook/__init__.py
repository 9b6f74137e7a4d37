"""guidebook -- scaffolding and validation for a markdown knowledge base.

Guides live in two category directories (``how/`` for mechanics, ``why/``
for mental models).  The package creates new guides from templates and runs
the format/lint pipeline over the whole tree.

Public API::

    from guidebook import GuidebookConfig
    from guidebook.scaffold import Category, create_guide
    from guidebook.pipeline import Mode, Pipeline, run_pipeline
"""

from guidebook.config import GuidebookConfig

__all__ = ["GuidebookConfig"]
__version__ = "0.1.0"

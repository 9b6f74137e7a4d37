"""Scaffold subsystem -- new guides from category templates."""

from guidebook.scaffold.engine import create_guide, next_steps
from guidebook.scaffold.models import Category, Guide
from guidebook.scaffold.templates import render_guide

__all__ = [
    "Category",
    "Guide",
    "create_guide",
    "next_steps",
    "render_guide",
]

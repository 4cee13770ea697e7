"""Backends for XES output generation."""

from .xes_writer import XmlLayout, generate_markup, generate_xes, render_markup, save_xes_file

__all__ = ["XmlLayout", "generate_markup", "generate_xes", "render_markup", "save_xes_file"]

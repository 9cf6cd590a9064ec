"""Layered Markdown configuration for AI coding agents: parsing, merging, validation and directive tools."""

__version__ = "1.0.0"
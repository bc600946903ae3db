"""
QUILL - Quick Upload and Import of Legacy Layouts

Backend for a browser-based résumé builder. Users who already have a résumé
can upload it as a PDF and have the builder's form pre-filled.

Architecture:
- Importing Context: PDF text extraction and heuristic field reconstruction
"""

__version__ = "0.1.0"

"""Core logic for Strapi Stencil.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- classify fields of envelope-wrapped API responses
- flatten `{data: {id, attributes}}` envelopes into plain records
- consolidate localized siblings into a locale-keyed map
"""

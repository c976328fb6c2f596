"""
resume_html - Render JSON Resume documents to self-contained HTML pages

Architecture:
- i18n Context: Locale catalog, locale negotiation and Fluent message lookup
- Rendering Context: HTML templating, date/markdown/link helpers, image inlining, minification
"""

__version__ = "0.1.0"

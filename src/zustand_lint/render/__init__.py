"""Report renderers (terminal text, Markdown)."""

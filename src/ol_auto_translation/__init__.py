"""Django plugin translating CMS content with DeepL."""

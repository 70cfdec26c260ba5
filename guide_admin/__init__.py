"""Guide Admin: web administration for guides, categories and digital content."""

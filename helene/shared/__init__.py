"""Code shared by every Helene analytics service: models, i18n, utils."""

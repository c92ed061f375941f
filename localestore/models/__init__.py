from localestore.models.translation import Translation

__all__ = ['Translation']

from cms_sites.db.base_class import Base
from cms_sites.models.site import Category, File, Layout, Page, Site, Snippet


__all__ = [
    'Base',
    'Category',
    'File',
    'Layout',
    'Page',
    'Site',
    'Snippet',
]

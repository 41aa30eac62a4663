from cms_sites.models.site import Category, File, Layout, Page, Site, Snippet

__all__ = [
    'Category',
    'File',
    'Layout',
    'Page',
    'Site',
    'Snippet',
]

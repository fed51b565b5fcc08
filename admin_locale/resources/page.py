from admin_locale.models.page import Page
from admin_locale.resources.base import Resource


class PageResource(Resource):
    model = Page
    uri_key = "pages"
    title_attribute = "title"

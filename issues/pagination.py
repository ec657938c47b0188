# -*- coding: utf-8 -*-
from django.conf import settings
from rest_framework.pagination import PageNumberPagination


class IssuePagination(PageNumberPagination):
    page_size = getattr(settings, 'ISSUES_PAGE_SIZE', 50)
    page_query_param = 'page'
    page_size_query_param = 'page_size'
    max_page_size = 200

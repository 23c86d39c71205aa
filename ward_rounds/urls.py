"""
URL configuration for ward_rounds project.

界面层不在本项目范围内，这里只挂载后台管理。
"""
from django.contrib import admin
from django.urls import path

urlpatterns = [
    path("admin/", admin.site.urls),
]
